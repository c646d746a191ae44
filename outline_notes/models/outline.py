"""
Core outline data models.

This module defines the hierarchical structure of a notes document:
- Document: Complete notes document (optional title + chapters)
- Chapter: Numbered chapter within a document
- Item: Numbered point within a chapter
- BulletList / Table / Paragraph / CodeBlock: content owned by an item

All nodes are frozen; collections are tuples.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Union


class BlockKind(Enum):
    """Classification of item content blocks."""
    BULLETS = "bullets"
    TABLE = "table"
    PARAGRAPH = "paragraph"
    CODE = "code"


@dataclass(frozen=True)
class Bullet:
    """A single bullet entry. Depth 0 is the outermost level."""
    text: str
    depth: int = 0
    ordered: bool = False

    def to_dict(self) -> dict:
        return {"text": self.text, "depth": self.depth, "ordered": self.ordered}

    @classmethod
    def from_dict(cls, data: dict) -> "Bullet":
        return cls(
            text=data["text"],
            depth=data.get("depth", 0),
            ordered=data.get("ordered", False)
        )


@dataclass(frozen=True)
class BulletList:
    """Consecutive bullet entries."""
    entries: tuple[Bullet, ...] = ()
    kind = BlockKind.BULLETS

    def texts(self) -> list[str]:
        return [b.text for b in self.entries]

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "entries": [b.to_dict() for b in self.entries]
        }

    @classmethod
    def from_dict(cls, data: dict) -> "BulletList":
        return cls(entries=tuple(Bullet.from_dict(b) for b in data.get("entries", [])))


@dataclass(frozen=True)
class Table:
    """A pipe table: header cells plus body rows."""
    header: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...] = ()
    kind = BlockKind.TABLE

    @property
    def column_count(self) -> int:
        return len(self.header)

    def texts(self) -> list[str]:
        return [cell for row in (self.header, *self.rows) for cell in row]

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "header": list(self.header),
            "rows": [list(r) for r in self.rows]
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Table":
        return cls(
            header=tuple(data["header"]),
            rows=tuple(tuple(r) for r in data.get("rows", []))
        )


@dataclass(frozen=True)
class Paragraph:
    """Free prose lines under an item."""
    lines: tuple[str, ...] = ()
    kind = BlockKind.PARAGRAPH

    @property
    def text(self) -> str:
        return " ".join(self.lines)

    def texts(self) -> list[str]:
        return list(self.lines)

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "lines": list(self.lines)}

    @classmethod
    def from_dict(cls, data: dict) -> "Paragraph":
        return cls(lines=tuple(data.get("lines", [])))


@dataclass(frozen=True)
class CodeBlock:
    """Fenced code. `fence` is the opening marker (``` or ~~~)."""
    lines: tuple[str, ...] = ()
    info: str = ""
    fence: str = "```"
    kind = BlockKind.CODE

    def texts(self) -> list[str]:
        return list(self.lines)

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "lines": list(self.lines),
            "info": self.info,
            "fence": self.fence
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CodeBlock":
        return cls(
            lines=tuple(data.get("lines", [])),
            info=data.get("info", ""),
            fence=data.get("fence", "```")
        )


ContentBlock = Union[BulletList, Table, Paragraph, CodeBlock]

_BLOCK_TYPES = {
    BlockKind.BULLETS: BulletList,
    BlockKind.TABLE: Table,
    BlockKind.PARAGRAPH: Paragraph,
    BlockKind.CODE: CodeBlock,
}


def block_from_dict(data: dict) -> ContentBlock:
    """Rebuild a content block from its `to_dict()` form."""
    kind = BlockKind(data["kind"])
    return _BLOCK_TYPES[kind].from_dict(data)


@dataclass(frozen=True)
class Item:
    """
    A numbered point within a chapter.

    `chapter` is filled in by the owning Chapter and is excluded from
    equality, hashing and repr. An item already owned elsewhere is copied
    by the new Chapter, so an existing tree is never re-parented.
    """
    number: int
    title: str
    blocks: tuple[ContentBlock, ...] = ()
    line: int = field(default=0, compare=False)
    chapter: Optional["Chapter"] = field(default=None, compare=False, repr=False)

    def texts(self) -> list[str]:
        """All text carried by the item's content blocks, in order."""
        return [t for block in self.blocks for t in block.texts()]

    def to_dict(self) -> dict:
        return {
            "number": self.number,
            "title": self.title,
            "blocks": [b.to_dict() for b in self.blocks],
            "line": self.line
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Item":
        return cls(
            number=data["number"],
            title=data.get("title", ""),
            blocks=tuple(block_from_dict(b) for b in data.get("blocks", [])),
            line=data.get("line", 0)
        )


@dataclass(frozen=True)
class Chapter:
    """A numbered chapter. Owns its items and attaches itself as their parent."""
    number: int
    title: str
    items: tuple[Item, ...] = ()
    line: int = field(default=0, compare=False)

    def __post_init__(self):
        # Items already owned by another chapter are copied, never re-parented
        items = tuple(
            item if item.chapter is None else replace(item, chapter=None)
            for item in self.items
        )
        for item in items:
            object.__setattr__(item, "chapter", self)
        object.__setattr__(self, "items", items)

    def to_dict(self) -> dict:
        return {
            "number": self.number,
            "title": self.title,
            "items": [i.to_dict() for i in self.items],
            "line": self.line
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Chapter":
        return cls(
            number=data["number"],
            title=data.get("title", ""),
            items=tuple(Item.from_dict(i) for i in data.get("items", [])),
            line=data.get("line", 0)
        )


@dataclass(frozen=True)
class Document:
    """A complete notes document."""
    chapters: tuple[Chapter, ...] = ()
    title: str = ""

    @property
    def items(self) -> tuple[Item, ...]:
        """Every item in document order."""
        return tuple(item for chapter in self.chapters for item in chapter.items)

    def get_chapter(self, number: int) -> Optional[Chapter]:
        for chapter in self.chapters:
            if chapter.number == number:
                return chapter
        return None

    def get_item(self, number: int) -> Optional[Item]:
        for item in self.items:
            if item.number == number:
                return item
        return None

    def get_stats(self) -> dict:
        items = self.items
        return {
            "chapters": len(self.chapters),
            "items": len(items),
            "blocks": sum(len(i.blocks) for i in items),
            "bullets": sum(
                len(b.entries) for i in items for b in i.blocks
                if b.kind is BlockKind.BULLETS
            ),
            "tables": sum(
                1 for i in items for b in i.blocks if b.kind is BlockKind.TABLE
            ),
        }

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "chapters": [c.to_dict() for c in self.chapters]
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Document":
        return cls(
            title=data.get("title", ""),
            chapters=tuple(Chapter.from_dict(c) for c in data.get("chapters", []))
        )
