"""
Outline Notes - Structured Notes Document Model

Parses chapter/item structured notes (such as book summaries written as
Markdown headings and bullet lists) into an immutable tree, and offers
validation, querying and canonical re-serialization over it.

Packages:
    - models: Document tree and validation finding models
    - parsers: Outline and content block parsers
    - validator: Non-fatal document checks
    - query: Lazy, re-iterable item queries
    - serializer: Canonical Markdown output
"""

__version__ = "1.0.0"

# Core models
from .models import (
    BlockKind,
    Bullet,
    BulletList,
    Table,
    Paragraph,
    CodeBlock,
    Item,
    Chapter,
    Document,
    Violation,
    ViolationCode,
)

# Errors
from .errors import NotesError, MalformedDocument

# Parsers
from .parsers import (
    OutlineParser,
    parse,
    parse_file,
    parse_all_documents,
)

# Validation
from .validator import validate, format_report

# Queries
from .query import (
    ItemQuery,
    find,
    title_contains,
    in_chapter,
    number_between,
    mentions,
)

# Serialization
from .serializer import to_markdown, outline

__all__ = [
    # Version
    "__version__",
    # Core models
    "BlockKind",
    "Bullet",
    "BulletList",
    "Table",
    "Paragraph",
    "CodeBlock",
    "Item",
    "Chapter",
    "Document",
    "Violation",
    "ViolationCode",
    # Errors
    "NotesError",
    "MalformedDocument",
    # Parsers
    "OutlineParser",
    "parse",
    "parse_file",
    "parse_all_documents",
    # Validation
    "validate",
    "format_report",
    # Queries
    "ItemQuery",
    "find",
    "title_contains",
    "in_chapter",
    "number_between",
    "mentions",
    # Serialization
    "to_markdown",
    "outline",
]
