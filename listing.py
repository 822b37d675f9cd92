# listing.py v1.0
"""
Writes the diagnostic listing for a classification result: a summary
line followed by one '<line> <category> <text>' line per record.
"""
import sys
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from line_record import ClassificationResult

SUMMARY_FORMAT = "lines lexed: {count}"


def listing_lines(result: 'ClassificationResult') -> List[str]:
    lines = [SUMMARY_FORMAT.format(count=result.lines_consumed)]
    lines.extend(str(record) for record in result.lines)
    return lines


def format_listing(result: 'ClassificationResult') -> str:
    return "".join(line + "\n" for line in listing_lines(result))


def write_listing(result: 'ClassificationResult', file_handle=None):
    """Writes the listing to an already open handle (stdout by default). The handle is not closed."""
    out = file_handle or sys.stdout
    for line in listing_lines(result):
        out.write(line + "\n")

# listing.py v1.0
