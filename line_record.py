# line_record.py v1.1
"""
Record types produced by the GASM line classifier.

v1.1: Add ClassificationResult.by_category and Category.from_display_name.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Tuple


class Category(Enum):
    """Closed set of line/token categories.

    Only OP, LABEL and DIRECTIVE are produced by the line rules. The others
    are kept for the operand tokenizer that will sit on top of the lexer.
    """

    EOF = 0
    ILLEGAL = 1
    COMMA = 2
    OP = 3
    SEMI = 4
    LABEL = 5
    COMMENT = 6
    BYTE = 7
    WORD = 8
    LITERAL = 9
    STRING = 10
    DIRECTIVE = 11

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_display_name(cls, name: str) -> 'Category':
        for category, display in _DISPLAY_NAMES.items():
            if display == name:
                return category
        raise ValueError(f"Unknown category name: {name!r}")

    def __str__(self):
        return self.display_name


_DISPLAY_NAMES: Dict[Category, str] = {
    Category.EOF: "EOF",
    Category.ILLEGAL: "ILLEGAL",
    Category.COMMA: ",",
    Category.OP: "OP",
    Category.SEMI: ";",
    Category.LABEL: "LABEL",
    Category.COMMENT: "COMMENT",
    Category.BYTE: "BYTE",
    Category.WORD: "WORD",
    Category.LITERAL: "LITERAL",
    Category.STRING: "STRING",
    Category.DIRECTIVE: "DIRECTIVE",
}


@dataclass(frozen=True)
class ClassifiedLine:
    """One classified source line. line_number is 1-based."""

    line_number: int
    category: Category
    text: str

    def __str__(self):
        return f"{self.line_number} {self.category.display_name} {self.text}"


@dataclass
class ClassificationResult:
    """
    Ordered classified lines plus the number of source lines read.
    lines_consumed counts blank and comment-only lines too, so it is
    always >= len(lines).
    """

    lines: List[ClassifiedLine] = field(default_factory=list)
    lines_consumed: int = 0

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[ClassifiedLine]:
        return iter(self.lines)

    def __getitem__(self, index):
        return self.lines[index]

    def by_category(self, category: Category) -> List[ClassifiedLine]:
        return [line for line in self.lines if line.category is category]

    def as_tuples(self) -> List[Tuple[int, str, str]]:
        """(line_number, display name, text) for each record."""
        return [(line.line_number, line.category.display_name, line.text) for line in self.lines]

# line_record.py v1.1
