"""
Validation finding models.

This module defines the non-fatal findings produced by the validator.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ViolationCode(Enum):
    """Classification of validation findings."""
    ITEM_OUT_OF_SEQUENCE = "item_out_of_sequence"
    CHAPTER_OUT_OF_SEQUENCE = "chapter_out_of_sequence"
    MISSING_TITLE = "missing_title"
    EMPTY_CHAPTER = "empty_chapter"
    TABLE_COLUMN_MISMATCH = "table_column_mismatch"
    NO_ITEMS = "no_items"


@dataclass(frozen=True)
class Violation:
    """A single validation finding."""
    code: ViolationCode
    message: str
    chapter_no: Optional[int] = None
    item_no: Optional[int] = None
    line: int = 0

    def get_location(self) -> str:
        """Generate a location string, e.g. 'Chapter 2 - Item 5 (line 14)'."""
        parts = []
        if self.chapter_no is not None:
            parts.append(f"Chapter {self.chapter_no}")
        if self.item_no is not None:
            parts.append(f"Item {self.item_no}")
        location = " - ".join(parts) or "Document"
        if self.line:
            location += f" (line {self.line})"
        return location

    def __str__(self) -> str:
        return f"{self.get_location()}: {self.message}"

    def to_dict(self) -> dict:
        return {
            "code": self.code.value,
            "message": self.message,
            "chapter_no": self.chapter_no,
            "item_no": self.item_no,
            "line": self.line
        }
