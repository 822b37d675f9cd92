"""Pytest configuration and shared fixtures."""

import io
import sys
from pathlib import Path

import pytest

# Add the repository root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


FIXTURE_SOURCE = (
    "loop:\n"
    "  .org $8000\n"
    "LDA #$01 ; load accumulator\n"
    "; just a comment\n"
    "\n"
)


@pytest.fixture
def fixture_source():
    """The five-line fixture: label, directive, commented op, comment, blank."""
    return FIXTURE_SOURCE


@pytest.fixture
def fixture_stream(fixture_source):
    """The five-line fixture as an open text stream."""
    return io.StringIO(fixture_source)


@pytest.fixture
def asm_file(tmp_path, fixture_source):
    """The five-line fixture written to a temporary .asm file."""
    path = tmp_path / "fixture.asm"
    path.write_text(fixture_source, encoding="utf-8")
    return path
