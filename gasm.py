# gasm.py v0.2
"""
GASM - line classifier for 6502-style assembly source.
Main application entry point.

v0.1: Classify hello.asm and print the listing.
v0.2: Add argparse options for input, listing file, debug and log file.
"""

import argparse
import collections
import logging
import sys
from typing import List, Optional

from errors import ErrorReporter, GasmException
from lexer import classify_file
from line_record import ClassificationResult
from listing import write_listing
from logging_config import get_logger, setup_logging

DEFAULT_INPUT_FILENAME = "hello.asm"
VERSION = "0.0.2"

logger = get_logger("main")


class Gasm:
    """ Runs the line classification pass over one source file. """
    def __init__(self, input_filename: str = DEFAULT_INPUT_FILENAME, listing_filename: Optional[str] = None, debug_mode: bool = False):
        self.input_filename = input_filename
        self.listing_filename = listing_filename
        self.debug_mode = debug_mode
        self.error_reporter = ErrorReporter()
        self.result: Optional[ClassificationResult] = None

    def run(self) -> bool:
        """ Classifies the input and writes the listing. Returns False on error. """
        logger.info("Classifying %s", self.input_filename)
        try:
            self.result = classify_file(self.input_filename)
        except GasmException as e:
            self.error_reporter.add_exception(e)
            self._print_summary()
            return False

        if self.debug_mode:
            counts = collections.Counter(line.category.display_name for line in self.result)
            logger.debug("Category counts: %s", dict(counts))

        if not self._write_listing():
            self._print_summary()
            return False
        return True

    def _write_listing(self) -> bool:
        if not self.listing_filename:
            write_listing(self.result, sys.stdout)
            return True
        try:
            with open(self.listing_filename, 'w', encoding='utf-8') as f:
                write_listing(self.result, f)
        except OSError as e:
            self.error_reporter.add_error(f"Cannot write listing file '{self.listing_filename}': {e}", code='F')
            return False
        logger.info("Listing written to %s", self.listing_filename)
        return True

    def _print_summary(self):
        print("\n--- Classification Summary ---", file=sys.stderr)
        self.error_reporter.print_summary()
        print("--- End Summary ---", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gasm", description=f"GASM line classifier v{VERSION}")
    parser.add_argument("input_file", nargs="?", default=DEFAULT_INPUT_FILENAME, help=f"Assembly source file (defaults to '{DEFAULT_INPUT_FILENAME}').")
    parser.add_argument("-l", "--listing", help="Output listing file name (defaults to stdout).")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging.")
    parser.add_argument("--log-file", help="Also write log output to this file.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.WARNING, log_file=args.log_file)

    gasm = Gasm(
        input_filename=args.input_file,
        listing_filename=args.listing,
        debug_mode=args.debug,
    )
    return 0 if gasm.run() else 1


if __name__ == "__main__":
    sys.exit(main())

# gasm.py v0.2
