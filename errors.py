# errors.py v1.3
"""
Error classes for the GASM line classifier.
Includes the exception hierarchy and the ErrorReporter used by the
command line program.
"""

import sys
from typing import Any, Dict, List, Optional

# --- Custom Exceptions ---

class GasmException(Exception):
    """Base class for errors that stop classification."""
    default_code = 'E'

    def __init__(self, message, line_num=None, code=None):
        super().__init__(message)
        self.message = message
        self.line_num = line_num
        code = code or self.default_code
        # Ensure code is a single uppercase char
        self.code = code[0].upper() if isinstance(code, str) else self.default_code

    def __str__(self):
        prefix = f"L{self.line_num}: " if self.line_num else ""
        return f"{prefix}{self.message} [{self.code}]"


class PatternCompilationError(GasmException):
    """One of the fixed line patterns failed to compile. Always fatal."""
    default_code = 'F'

    def __init__(self, message, pattern=None):
        super().__init__(message)
        self.pattern = pattern


class StreamReadError(GasmException):
    """The input stream failed while being read. Carries no partial result."""
    default_code = 'R'

    def __init__(self, message, line_num=None, source_name=None):
        super().__init__(message, line_num=line_num)
        self.source_name = source_name


# --- Error Reporter Class ---

class ErrorReporter:
    """Handles collection and reporting of errors."""
    def __init__(self):
        self.errors: List[Dict[str, Any]] = []

    def has_errors(self) -> bool:
        return bool(self.errors)

    def add_error(self, message: str, line_num: Optional[int] = None, code: str = 'E'):
        """Adds an error message."""
        self.errors.append({'message': message, 'line_num': line_num, 'code': code})

    def add_exception(self, exc: GasmException):
        """Adds an error from a raised GasmException."""
        self.add_error(exc.message, exc.line_num, exc.code)

    def print_summary(self, file_handle=None):
        """Prints all collected errors."""
        out = file_handle or sys.stderr
        if self.errors:
            print("\n--- Errors ---", file=out)
            for error in sorted(self.errors, key=lambda x: x['line_num'] or 0):
                line_prefix = f"L{error['line_num']}: " if error['line_num'] else ""
                print(f"{line_prefix}{error['message']} [{error['code']}]", file=out)
        print(f"\nTotal Errors: {len(self.errors)}", file=out)

# errors.py v1.3
