"""
Outline Parser for Structured Notes.

Builds a Document tree from Markdown-like notes text.

This parser handles:
- Document title detection (first level-1 heading that is not a chapter)
- Chapter/Item heading extraction with configurable patterns
- Numbering checks: chapters ascending, items strictly increasing across
  the whole document, no chapter without items
- Fenced code awareness (heading-like lines inside fences are content)
"""

import logging
import re
from pathlib import Path
from typing import Optional

from tqdm import tqdm

from ..config import get_settings
from ..errors import MalformedDocument, NotesError
from ..models import Chapter, Document, Item
from .blocks import FENCE_PATTERN, is_fence_close, parse_blocks

logger = logging.getLogger(__name__)

TITLE_PATTERN = re.compile(r'^#\s+(.+?)\s*$')


class _ItemDraft:
    """Mutable builder for an item while its content lines are collected."""

    def __init__(self, number: int, title: str, line_no: int):
        self.number = number
        self.title = title
        self.line_no = line_no
        self.lines: list[str] = []

    def build(self) -> Item:
        return Item(
            number=self.number,
            title=self.title,
            blocks=parse_blocks(self.lines),
            line=self.line_no
        )


class _ChapterDraft:
    """Mutable builder for a chapter while its items are collected."""

    def __init__(self, number: int, title: str, line_no: int, line: str):
        self.number = number
        self.title = title
        self.line_no = line_no
        self.line = line
        self.items: list[Item] = []

    def build(self) -> Chapter:
        if not self.items:
            raise MalformedDocument(
                f"chapter {self.number} contains no items",
                self.line_no,
                self.line
            )
        return Chapter(
            number=self.number,
            title=self.title,
            items=tuple(self.items),
            line=self.line_no
        )


class OutlineParser:
    """Parser for chapter/item structured notes."""

    def __init__(
        self,
        chapter_pattern: Optional[str] = None,
        item_pattern: Optional[str] = None,
    ):
        settings = get_settings()
        self.chapter_pattern = re.compile(chapter_pattern or settings.chapter_pattern)
        self.item_pattern = re.compile(item_pattern or settings.item_pattern)

    def parse(self, text: str) -> Document:
        """Parse notes text into a Document.

        Raises MalformedDocument if a chapter or item number does not exceed
        its predecessor, if an item appears before any chapter, or if a
        chapter has no items. Forward gaps are left for the validator.
        """
        chapters: list[Chapter] = []
        chapter: Optional[_ChapterDraft] = None
        item: Optional[_ItemDraft] = None
        title = ""
        last_chapter_no: Optional[int] = None
        last_item_no = 0
        fence: Optional[str] = None

        # Leading byte order mark is not part of the first line
        text = text.removeprefix("\ufeff")

        for line_no, raw in enumerate(text.splitlines(), start=1):
            line = raw.rstrip()

            if fence is not None:
                if is_fence_close(line, fence):
                    fence = None
                if item is not None:
                    item.lines.append(line)
                continue

            fence_match = FENCE_PATTERN.match(line)
            if fence_match:
                fence = fence_match.group(1)
                if item is not None:
                    item.lines.append(line)
                continue

            chapter_match = self.chapter_pattern.match(line)
            if chapter_match:
                number = int(chapter_match.group(1))
                if last_chapter_no is not None and number <= last_chapter_no:
                    raise MalformedDocument(
                        "chapter number out of sequence",
                        line_no, line,
                        expected=last_chapter_no + 1,
                        actual=number
                    )
                if item is not None:
                    chapter.items.append(item.build())
                    item = None
                if chapter is not None:
                    chapters.append(chapter.build())

                chapter = _ChapterDraft(number, (chapter_match.group(2) or "").strip(), line_no, line)
                last_chapter_no = number
                logger.debug(f"[PARSE] Chapter {number}: '{chapter.title}' (line {line_no})")
                continue

            item_match = self.item_pattern.match(line)
            if item_match:
                number = int(item_match.group(1))
                if chapter is None:
                    raise MalformedDocument("item outside of any chapter", line_no, line)
                if number <= last_item_no:
                    raise MalformedDocument(
                        "item number out of sequence",
                        line_no, line,
                        expected=last_item_no + 1,
                        actual=number
                    )
                if item is not None:
                    chapter.items.append(item.build())

                item = _ItemDraft(number, (item_match.group(2) or "").strip(), line_no)
                last_item_no = number
                logger.debug(f"[PARSE] Item {number}: '{item.title}' (line {line_no})")
                continue

            if item is not None:
                item.lines.append(line)
            elif chapter is None and not title:
                title_match = TITLE_PATTERN.match(line)
                if title_match:
                    title = title_match.group(1)

        if item is not None:
            chapter.items.append(item.build())
        if chapter is not None:
            chapters.append(chapter.build())

        document = Document(chapters=tuple(chapters), title=title)
        logger.info(
            f"[PARSE] Parsed {len(document.chapters)} chapters, "
            f"{len(document.items)} items"
        )
        return document

    def parse_file(self, path: str | Path) -> Document:
        """Parse a UTF-8 notes file."""
        path = Path(path)
        logger.debug(f"[PARSE] Reading {path}")
        return self.parse(path.read_text(encoding="utf-8-sig"))


def parse(text: str) -> Document:
    """Parse notes text with the configured heading patterns."""
    return OutlineParser().parse(text)


def parse_file(path: str | Path) -> Document:
    """Parse a notes file with the configured heading patterns."""
    return OutlineParser().parse_file(path)


def parse_all_documents(notes_dir: str | Path, pattern: str = "*.md") -> dict[str, Document]:
    """Parse every notes file in a directory, keyed by file name.

    Files that fail to parse are logged and skipped.
    """
    notes_dir = Path(notes_dir)
    parser = OutlineParser()
    documents = {}

    files = sorted(notes_dir.glob(pattern))
    logger.info(f"[PARSE] Found {len(files)} notes files in {notes_dir}")

    for path in tqdm(files, desc="Parsing notes", disable=not files):
        try:
            documents[path.name] = parser.parse_file(path)
        except (NotesError, OSError, UnicodeDecodeError) as e:
            logger.error(f"[PARSE] Failed to parse {path.name}: {e}")

    return documents
