"""
Outline Notes CLI - Command Line Interface
"""

import sys
import json
import logging
import click
from pathlib import Path
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markdown import Markdown
from rich.markup import escape
from dotenv import load_dotenv

from outline_notes import __version__
from outline_notes.config import get_settings

# Load environment variables
load_dotenv()

console = Console()


def _load(file: str):
    """Parse a notes file, exiting with a console message if it is malformed."""
    from outline_notes import NotesError, parse_file

    try:
        return parse_file(file)
    except NotesError as e:
        console.print(f"[red]✗ Malformed document {escape(file)}: {escape(str(e))}[/red]")
        sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """Outline Notes CLI - Structured Notes Parser and Validator"""
    level = "DEBUG" if verbose else get_settings().log_level
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", default=None, help="Write the parsed tree as JSON to this path")
def parse(file: str, output: str | None):
    """Parse a notes file and print a summary."""
    document = _load(file)

    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(document.to_dict(), f, ensure_ascii=False, indent=2)
        console.print(f"[green]✓[/green] Saved: {escape(output_path.name)}")

    table = Table(title=escape(document.title) or "Parsing Summary")
    table.add_column("Chapter", style="cyan", justify="right")
    table.add_column("Title")
    table.add_column("Items", justify="right")
    table.add_column("Range", justify="right")

    for chapter in document.chapters:
        numbers = [item.number for item in chapter.items]
        table.add_row(
            str(chapter.number),
            escape(chapter.title),
            str(len(numbers)),
            f"{numbers[0]}-{numbers[-1]}" if numbers else "-"
        )

    console.print(table)


@cli.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
def validate(files: tuple[str, ...]):
    """Validate one or more notes files. Exits 1 if anything is wrong."""
    from outline_notes import NotesError, parse_file, validate as validate_document, format_report

    failed = False
    for file in files:
        try:
            document = parse_file(file)
        except NotesError as e:
            console.print(f"[red]✗ {escape(file)}: malformed: {escape(str(e))}[/red]")
            failed = True
            continue

        report = format_report(validate_document(document))
        if not report:
            console.print(f"[green]✓[/green] {escape(file)}: {len(document.items)} items, no violations")
            continue

        failed = True
        console.print(f"[yellow]✗ {escape(file)}: {len(report)} violation(s)[/yellow]")
        for line in report:
            console.print(f"  - {escape(line)}")

    if failed:
        sys.exit(1)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--title", "-t", default=None, help="Item title contains text")
@click.option("--chapter", "-c", type=int, default=None, help="Only items in this chapter")
@click.option("--mentions", "-m", default=None, help="Title or content contains text")
@click.option("--from", "low", type=int, default=None, help="Lowest item number")
@click.option("--to", "high", type=int, default=None, help="Highest item number")
def find(file: str, title: str | None, chapter: int | None, mentions: str | None,
         low: int | None, high: int | None):
    """List items matching all given filters."""
    from outline_notes import query as q

    document = _load(file)
    results = q.find(document)
    if title:
        results = results.where(q.title_contains(title))
    if chapter is not None:
        results = results.where(q.in_chapter(chapter))
    if mentions:
        results = results.where(q.mentions(mentions))
    if low is not None or high is not None:
        results = results.where(q.number_between(low, high))

    table = Table(title="Matching Items")
    table.add_column("Item", style="cyan", justify="right")
    table.add_column("Chapter", justify="right")
    table.add_column("Title")

    for item in results:
        table.add_row(str(item.number), str(item.chapter.number), escape(item.title))

    if table.row_count == 0:
        console.print("[yellow]No matching items.[/yellow]")
        return
    console.print(table)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--item", "-i", "item_no", type=int, default=None, help="Show a single item")
def show(file: str, item_no: int | None):
    """Render a notes file (or one item) in the terminal."""
    from outline_notes.serializer import render_item, to_markdown

    document = _load(file)

    if item_no is None:
        console.print(Markdown(to_markdown(document)))
        return

    item = document.get_item(item_no)
    if item is None:
        console.print(f"[red]Item {item_no} not found.[/red]")
        sys.exit(1)

    console.print(Panel(
        Markdown(render_item(item)),
        title=f"Chapter {item.chapter.number}: {escape(item.chapter.title)}",
        border_style="dim"
    ))


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", default=None, help="Write canonical Markdown to this path")
def export(file: str, output: str | None):
    """Re-serialize a notes file as canonical Markdown."""
    from outline_notes.serializer import to_markdown

    text = to_markdown(_load(file))

    if output is None:
        click.echo(text, nl=False)
        return

    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")
    console.print(f"[green]✓[/green] Saved: {escape(output_path.name)}")


@cli.command()
@click.argument("notes_dir", required=False, type=click.Path(file_okay=False))
def stats(notes_dir: str | None):
    """Show statistics about every notes file in a directory."""
    from outline_notes import parse_all_documents

    notes_path = Path(notes_dir) if notes_dir else get_settings().notes_dir

    if not notes_path.exists():
        console.print(f"[red]Notes directory not found: {escape(str(notes_path))}[/red]")
        sys.exit(1)

    documents = parse_all_documents(notes_path)

    console.print(Panel.fit(
        "[bold blue]Notes Statistics[/bold blue]\n"
        f"Directory: {escape(str(notes_path))}",
        title="📊 Stats"
    ))

    if not documents:
        console.print("[red]No notes files were parsed![/red]")
        return

    table = Table()
    table.add_column("File", style="cyan")
    table.add_column("Chapters", justify="right")
    table.add_column("Items", justify="right")
    table.add_column("Bullets", justify="right")
    table.add_column("Tables", justify="right")

    for name, document in documents.items():
        doc_stats = document.get_stats()
        table.add_row(
            escape(name),
            str(doc_stats["chapters"]),
            str(doc_stats["items"]),
            str(doc_stats["bullets"]),
            str(doc_stats["tables"])
        )

    console.print(table)


if __name__ == "__main__":
    cli()
