"""
Content block parser.

Splits the raw lines found under an item heading into content blocks:
- Bullet lists (ordered or unordered, nested by indentation)
- Pipe tables (alignment row dropped)
- Fenced code blocks (``` or ~~~)
- Paragraphs (anything else)

Blank lines and thematic breaks (---, ***, ___) end the current block. As in
CommonMark, a line made only of three or more of the same marker, spaces
allowed, is a break rather than a bullet: `- ---` and `* * *` produce no
entry, while `- --- note` is a bullet with text `--- note`.
"""

import re
from typing import Optional

from ..models import (
    Bullet,
    BulletList,
    CodeBlock,
    ContentBlock,
    Paragraph,
    Table,
)

FENCE_PATTERN = re.compile(r'^\s*(`{3,}|~{3,})\s*(.*?)\s*$')

BULLET_PATTERN = re.compile(r'^([ \t]*)([-*+]|\d+[.)])(?:\s+(.*?))?\s*$')

THEMATIC_BREAK_PATTERN = re.compile(r'^\s*([-*_])(?:\s*\1){2,}\s*$')

ALIGNMENT_CELL_PATTERN = re.compile(r'^:?-+:?$')

# Cells are separated by pipes not preceded by a backslash
CELL_SEPARATOR = re.compile(r'(?<!\\)\|')

INDENT_WIDTH = 2


def is_fence_close(line: str, fence: str) -> bool:
    """True if `line` closes a code block opened with `fence`."""
    stripped = line.strip()
    return (
        len(stripped) >= len(fence)
        and stripped.startswith(fence)
        and stripped.strip(fence[0]) == ""
    )


def split_cells(line: str) -> tuple[str, ...]:
    """Split a pipe-table row into stripped cell strings."""
    row = line.strip()
    if row.startswith("|"):
        row = row[1:]
    if row.endswith("|") and not row.endswith("\\|"):
        row = row[:-1]
    return tuple(cell.strip() for cell in CELL_SEPARATOR.split(row))


def _is_alignment_row(cells: tuple[str, ...]) -> bool:
    return bool(cells) and all(ALIGNMENT_CELL_PATTERN.match(c) for c in cells)


def _indent_depth(indent: str) -> int:
    width = len(indent.replace("\t", " " * INDENT_WIDTH))
    return width // INDENT_WIDTH


class BlockParser:
    """Accumulates lines into content blocks."""

    def __init__(self):
        self.blocks: list[ContentBlock] = []
        self._bullets: list[Bullet] = []
        self._rows: list[tuple[str, ...]] = []
        self._paragraph: list[str] = []

    def parse(self, lines: list[str]) -> tuple[ContentBlock, ...]:
        fence: Optional[str] = None
        info = ""
        code: list[str] = []

        for line in lines:
            if fence is not None:
                if is_fence_close(line, fence):
                    self.blocks.append(CodeBlock(lines=tuple(code), info=info, fence=fence))
                    fence, code = None, []
                else:
                    code.append(line)
                continue

            fence_match = FENCE_PATTERN.match(line)
            if fence_match:
                self._flush()
                fence, info = fence_match.group(1), fence_match.group(2)
                continue

            if not line.strip() or THEMATIC_BREAK_PATTERN.match(line):
                self._flush()
                continue

            if line.lstrip().startswith("|"):
                self._add_row(line)
                continue

            bullet_match = BULLET_PATTERN.match(line)
            if bullet_match:
                self._add_bullet(bullet_match)
                continue

            if self._bullets and line[0] in " \t":
                # Indented continuation of the previous bullet
                last = self._bullets[-1]
                self._bullets[-1] = Bullet(
                    text=f"{last.text} {line.strip()}".strip(),
                    depth=last.depth,
                    ordered=last.ordered
                )
                continue

            self._add_paragraph_line(line)

        if fence is not None:
            # Unterminated fence runs to the end of the item
            self.blocks.append(CodeBlock(lines=tuple(code), info=info, fence=fence))
        self._flush()
        return tuple(self.blocks)

    def _add_row(self, line: str):
        if not self._rows:
            self._flush()
        cells = split_cells(line)
        if len(self._rows) == 1 and _is_alignment_row(cells):
            return
        self._rows.append(cells)

    def _add_bullet(self, match: re.Match):
        if not self._bullets:
            self._flush()
        marker = match.group(2)
        self._bullets.append(Bullet(
            text=match.group(3) or "",
            depth=_indent_depth(match.group(1)),
            ordered=marker[0].isdigit()
        ))

    def _add_paragraph_line(self, line: str):
        if not self._paragraph:
            self._flush()
        self._paragraph.append(line.strip())

    def _flush(self):
        if self._bullets:
            self.blocks.append(BulletList(entries=tuple(self._bullets)))
            self._bullets = []
        if self._rows:
            self.blocks.append(Table(header=self._rows[0], rows=tuple(self._rows[1:])))
            self._rows = []
        if self._paragraph:
            self.blocks.append(Paragraph(lines=tuple(self._paragraph)))
            self._paragraph = []


def parse_blocks(lines: list[str]) -> tuple[ContentBlock, ...]:
    """Parse the lines under an item heading into content blocks."""
    return BlockParser().parse(lines)
