"""Tests for the command line program."""

import logging

import pytest

import gasm
from gasm import Gasm, build_parser, main


class TestArguments:
    """Tests for argument parsing."""

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.input_file == "hello.asm"
        assert args.listing is None
        assert args.debug is False

    def test_options(self):
        args = build_parser().parse_args(["prog.asm", "-l", "out.lst", "-d"])
        assert args.input_file == "prog.asm"
        assert args.listing == "out.lst"
        assert args.debug is True

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--version"])
        assert exc_info.value.code == 0
        assert gasm.VERSION in capsys.readouterr().out


class TestMain:
    """Tests for running the program end to end."""

    def test_prints_listing(self, asm_file, capsys):
        assert main([str(asm_file)]) == 0

        out = capsys.readouterr().out
        assert out.splitlines() == [
            "lines lexed: 5",
            "1 LABEL loop:",
            "2 DIRECTIVE .org $8000",
            "3 OP LDA #$01",
        ]

    def test_writes_listing_file(self, asm_file, tmp_path, capsys):
        listing = tmp_path / "out.lst"

        assert main([str(asm_file), "--listing", str(listing)]) == 0

        assert listing.read_text(encoding="utf-8").startswith("lines lexed: 5\n")
        assert capsys.readouterr().out == ""

    def test_missing_input(self, tmp_path, capsys):
        assert main([str(tmp_path / "nope.asm")]) == 1

        err = capsys.readouterr().err
        assert "Cannot open input file" in err
        assert "Total Errors: 1" in err

    def test_unwritable_listing(self, asm_file, tmp_path, capsys):
        listing = tmp_path / "no_such_dir" / "out.lst"

        assert main([str(asm_file), "-l", str(listing)]) == 1
        assert "Cannot write listing file" in capsys.readouterr().err

    def test_debug_log_file(self, asm_file, tmp_path):
        log_file = tmp_path / "logs" / "gasm.log"

        assert main([str(asm_file), "-d", "--log-file", str(log_file)]) == 0

        for handler in logging.getLogger("gasm").handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "Classified 3 of 5 lines" in text
        assert "Category counts: {'LABEL': 1, 'DIRECTIVE': 1, 'OP': 1}" in text


def test_run_keeps_result(asm_file):
    app = Gasm(input_filename=str(asm_file), listing_filename=None)
    assert app.run()
    assert app.result.lines_consumed == 5
    assert not app.error_reporter.has_errors()
