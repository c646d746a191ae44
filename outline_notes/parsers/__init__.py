"""
Notes parsers.

This package contains:
- outline: Chapter/item heading parser producing Document trees
- blocks: Content block parser (bullets, tables, paragraphs, code)
"""

from .outline import (
    OutlineParser,
    parse,
    parse_file,
    parse_all_documents,
)
from .blocks import BlockParser, parse_blocks, split_cells

__all__ = [
    "OutlineParser",
    "parse",
    "parse_file",
    "parse_all_documents",
    "BlockParser",
    "parse_blocks",
    "split_cells",
]
