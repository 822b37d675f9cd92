# lexer.py v2.2
"""
Provides the line classification pass for the GASM assembler.

Each non-blank source line is tagged as a LABEL, a DIRECTIVE or an
OP (operation) line. Comments are clipped from operation lines and
comment-only lines produce no record. Rules are tried in order and the
first one that matches wins:

    \\w+:                     Label, the whole trimmed line
    ^[\\t\\n\\f\\r ]*\\.[a-z]*   Directive, matched at the start of the line
    ;[a-zA-Z ]*               Comment marker, clipped from operation lines

The comment pattern only spans letters and spaces. Lines are cut at the
start of the marker, so the narrow span never leaks into the OP text.

v2.0: Rewrite as a whole-line classifier returning ClassificationResult.
v2.1: Wrap stream failures in StreamReadError, add classify_file.
v2.2: Split files on \n only; spell out the directive indent class.
"""
import logging
import re
from typing import Iterable, NamedTuple, Optional, Tuple

from errors import PatternCompilationError, StreamReadError
from line_record import Category, ClassificationResult, ClassifiedLine

logger = logging.getLogger("gasm.lexer")

LABEL_REGEX_STR = r'\w+:'
DIRECTIVE_REGEX_STR = r'^[\t\n\f\r ]*\.[a-z]*'
COMMENT_REGEX_STR = r';[a-zA-Z ]*'

# \w is ASCII only. The directive indent class is spelled out because
# ASCII \s would also accept \v.
PATTERN_FLAGS = re.ASCII


class LinePatterns(NamedTuple):
    label: re.Pattern
    directive: re.Pattern
    comment: re.Pattern


def compile_patterns() -> LinePatterns:
    """
    Compiles the fixed line patterns. A failure here is a build fault,
    never an input error.
    """
    compiled = []
    for pattern_str in (LABEL_REGEX_STR, DIRECTIVE_REGEX_STR, COMMENT_REGEX_STR):
        try:
            compiled.append(re.compile(pattern_str, PATTERN_FLAGS))
        except re.error as e:
            raise PatternCompilationError(f"Cannot compile line pattern {pattern_str!r}: {e}", pattern=pattern_str) from e
    return LinePatterns(*compiled)


def classify_line(line: str, patterns: Optional[LinePatterns] = None) -> Optional[Tuple[Category, str]]:
    """
    Applies the line rules to a single line (without its terminator).
    Returns (category, text), or None if the line yields no record.
    """
    if patterns is None:
        patterns = compile_patterns()

    trimmed = line.strip()

    # labels and directives live on their own line, so check those first
    if patterns.label.fullmatch(trimmed):
        return Category.LABEL, trimmed
    if patterns.directive.match(line):
        return Category.DIRECTIVE, trimmed

    comment_match = patterns.comment.search(line)
    if comment_match:
        # clip off the comment, a comment-only line leaves nothing
        trimmed = line[:comment_match.start()].strip()
    if not trimmed:
        return None
    return Category.OP, trimmed


def classify(source: Iterable[str]) -> ClassificationResult:
    """
    Classifies every line of a readable text stream (or any iterable of
    lines). The stream is read to the end but never closed here.

    Raises StreamReadError if reading fails; nothing accumulated up to that
    point is returned.
    """
    patterns = compile_patterns()
    source_name = getattr(source, 'name', None)
    lines = []
    line_num = 0

    line_iter = None
    while True:
        try:
            if line_iter is None:
                line_iter = iter(source)
            raw_line = next(line_iter)
        except StopIteration:
            break
        except (OSError, ValueError) as e:
            raise StreamReadError(f"Error reading input: {e}", line_num=line_num + 1, source_name=source_name) from e
        line_num += 1

        classified = classify_line(raw_line.rstrip('\r\n'), patterns)
        if classified is None:
            continue
        category, text = classified
        lines.append(ClassifiedLine(line_number=line_num, category=category, text=text))
        logger.debug("L%d: %s %r", line_num, category.display_name, text)

    logger.debug("Classified %d of %d lines", len(lines), line_num)
    return ClassificationResult(lines=lines, lines_consumed=line_num)


def classify_file(path, encoding: str = 'utf-8') -> ClassificationResult:
    """Opens path, classifies its lines and closes it again."""
    try:
        # split on \n only, a lone \r stays part of its line
        with open(path, 'r', encoding=encoding, newline='\n') as f:
            return classify(f)
    except StreamReadError as e:
        e.source_name = str(path)
        raise
    except OSError as e:
        raise StreamReadError(f"Cannot open input file '{path}': {e}", source_name=str(path)) from e

# lexer.py v2.2
