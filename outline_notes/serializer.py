"""
Canonical Markdown serialization of a Document.

Output uses the `## Chapter N: Title` / `### Item N: Title` heading forms
that the default parser patterns accept, so parsing the output yields an
equal Document.
"""

from .models import (
    BlockKind,
    Chapter,
    ContentBlock,
    Document,
    Item,
)


def chapter_heading(chapter: Chapter) -> str:
    heading = f"## Chapter {chapter.number}"
    return f"{heading}: {chapter.title}" if chapter.title else heading


def item_heading(item: Item) -> str:
    heading = f"### Item {item.number}"
    return f"{heading}: {item.title}" if item.title else heading


def outline(document: Document) -> list[str]:
    """Chapter and item heading lines in document order."""
    lines = []
    for chapter in document.chapters:
        lines.append(chapter_heading(chapter))
        lines.extend(item_heading(item) for item in chapter.items)
    return lines


def render_block(block: ContentBlock) -> list[str]:
    if block.kind is BlockKind.BULLETS:
        return [
            f"{'  ' * b.depth}{'1.' if b.ordered else '-'} {b.text}".rstrip()
            for b in block.entries
        ]
    if block.kind is BlockKind.TABLE:
        lines = [_table_row(block.header)]
        lines.append(_table_row(("---",) * block.column_count))
        lines.extend(_table_row(row) for row in block.rows)
        return lines
    if block.kind is BlockKind.CODE:
        opening = f"{block.fence}{block.info}"
        return [opening, *block.lines, block.fence]
    return list(block.lines)


def _table_row(cells: tuple[str, ...]) -> str:
    return "| " + " | ".join(cells) + " |"


def render_item(item: Item) -> str:
    lines = [item_heading(item)]
    for block in item.blocks:
        lines.append("")
        lines.extend(render_block(block))
    return "\n".join(lines)


def to_markdown(document: Document) -> str:
    """Serialize a Document as canonical outline Markdown."""
    sections = []
    if document.title:
        sections.append(f"# {document.title}")
    for chapter in document.chapters:
        sections.append(chapter_heading(chapter))
        sections.extend(render_item(item) for item in chapter.items)
    return "\n\n".join(sections) + "\n"
