"""
Document validator.

Checks a parsed (or hand-built) Document and reports findings as Violation
records. Validation never raises; findings come out in document order, each
chapter's own findings ahead of those for its items.
"""

import logging
from typing import Optional

from .models import BlockKind, Chapter, Document, Item, Violation, ViolationCode

logger = logging.getLogger(__name__)


def _check_chapter(chapter: Chapter, previous: Optional[int]) -> list[Violation]:
    violations = []

    if previous is not None and chapter.number != previous + 1:
        violations.append(Violation(
            code=ViolationCode.CHAPTER_OUT_OF_SEQUENCE,
            message=f"chapter {chapter.number} is out of sequence (expected {previous + 1})",
            chapter_no=chapter.number,
            line=chapter.line
        ))
    if not chapter.title.strip():
        violations.append(Violation(
            code=ViolationCode.MISSING_TITLE,
            message="chapter is missing title",
            chapter_no=chapter.number,
            line=chapter.line
        ))
    if not chapter.items:
        violations.append(Violation(
            code=ViolationCode.EMPTY_CHAPTER,
            message="chapter contains no items",
            chapter_no=chapter.number,
            line=chapter.line
        ))

    return violations


def _check_item(chapter_no: int, item: Item, expected: int) -> list[Violation]:
    violations = []

    if item.number != expected:
        violations.append(Violation(
            code=ViolationCode.ITEM_OUT_OF_SEQUENCE,
            message=f"item {item.number} is out of sequence (expected {expected})",
            chapter_no=chapter_no,
            item_no=item.number,
            line=item.line
        ))
    if not item.title.strip():
        violations.append(Violation(
            code=ViolationCode.MISSING_TITLE,
            message="item is missing title",
            chapter_no=chapter_no,
            item_no=item.number,
            line=item.line
        ))

    violations.extend(_check_tables(chapter_no, item))
    return violations


def _check_tables(chapter_no: int, item: Item) -> list[Violation]:
    violations = []
    tables = [b for b in item.blocks if b.kind is BlockKind.TABLE]

    for table_no, table in enumerate(tables, start=1):
        for row_no, row in enumerate(table.rows, start=1):
            if len(row) != table.column_count:
                violations.append(Violation(
                    code=ViolationCode.TABLE_COLUMN_MISMATCH,
                    message=(
                        f"table {table_no} row {row_no} has {len(row)} cells, "
                        f"header has {table.column_count}"
                    ),
                    chapter_no=chapter_no,
                    item_no=item.number,
                    line=item.line
                ))

    return violations


def validate(document: Document) -> list[Violation]:
    """Validate numbering, titles and table shapes of a document."""
    violations = []

    if not document.items:
        violations.append(Violation(
            code=ViolationCode.NO_ITEMS,
            message="document contains no items"
        ))

    previous = None
    expected = 1
    for chapter in document.chapters:
        violations.extend(_check_chapter(chapter, previous))
        previous = chapter.number

        for item in chapter.items:
            violations.extend(_check_item(chapter.number, item, expected))
            expected = max(expected, item.number) + 1

    logger.info(f"[VALIDATE] {len(violations)} violation(s) found")
    for violation in violations:
        logger.debug(f"[VALIDATE] {violation}")

    return violations


def format_report(violations: list[Violation]) -> list[str]:
    """Human-readable report lines, one per violation."""
    return [str(v) for v in violations]
