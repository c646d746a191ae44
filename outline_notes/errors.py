"""
Exceptions raised by the outline notes toolkit.
"""

from typing import Optional


class NotesError(ValueError):
    """Base class for errors raised by this package."""


class MalformedDocument(NotesError):
    """
    Raised by the parser when numbering or structure invariants are broken.

    Carries the offending line (1-based number and raw text) together with
    the expected and actual numbers. `expected` is the smallest number that
    would have been accepted; both are None for structural failures such as
    a chapter without items.
    """

    def __init__(
        self,
        reason: str,
        line_no: int,
        line: str,
        expected: Optional[int] = None,
        actual: Optional[int] = None,
    ):
        self.reason = reason
        self.line_no = line_no
        self.line = line
        self.expected = expected
        self.actual = actual
        super().__init__(self._format())

    def _format(self) -> str:
        message = f"line {self.line_no}: {self.reason}"
        if self.expected is not None or self.actual is not None:
            message += f" (expected >= {self.expected}, got {self.actual})"
        return f"{message}: {self.line.strip()!r}"
