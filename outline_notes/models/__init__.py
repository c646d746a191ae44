"""
Data models for the outline notes toolkit.

This package contains all data models organized by domain:
- outline: Document tree models (Document, Chapter, Item, content blocks)
- violation: Validation finding models
"""

from .outline import (
    BlockKind,
    Bullet,
    BulletList,
    Table,
    Paragraph,
    CodeBlock,
    ContentBlock,
    Item,
    Chapter,
    Document,
    block_from_dict,
)

from .violation import Violation, ViolationCode

__all__ = [
    # Outline models
    "BlockKind",
    "Bullet",
    "BulletList",
    "Table",
    "Paragraph",
    "CodeBlock",
    "ContentBlock",
    "Item",
    "Chapter",
    "Document",
    "block_from_dict",
    # Validation models
    "Violation",
    "ViolationCode",
]
