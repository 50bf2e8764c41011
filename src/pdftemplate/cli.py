"""PDF Template CLI."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from pdftemplate.config import settings
from pdftemplate.errors import PdfTemplateError
from pdftemplate.models import (
    DocumentContent,
    FileExistsAction,
    FileProperties,
    Options,
)
from pdftemplate.pipeline import parse_document
from pdftemplate.task import create_pdf

app = typer.Typer(
    name="pdftemplate",
    help="Render PDF documents from JSON document descriptions",
    add_completion=False,
)
console = Console()


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else settings.log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _read_content(content_path: str) -> str:
    path = Path(content_path)
    if not path.is_file():
        console.print(f"[red]Content file not found:[/red] {content_path}", soft_wrap=True)
        raise typer.Exit(code=1)
    return path.read_text(encoding="utf-8")


@app.command()
def render(
    content_path: str = typer.Argument(..., help="Path to JSON document description"),
    directory: str = typer.Option(".", help="Output directory"),
    file_name: str = typer.Option("example_file.pdf", help="Output file name"),
    file_exists_action: FileExistsAction = typer.Option(
        FileExistsAction.ERROR, case_sensitive=False, help="What to do if the file exists"
    ),
    no_save: bool = typer.Option(False, "--no-save", help="Render only, do not write a file"),
    no_throw: bool = typer.Option(
        False, "--no-throw", help="Report failures as a result instead of an error"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Render a JSON document description to PDF."""
    _configure_logging(verbose)
    console.print(f"[bold blue]Rendering:[/bold blue] {content_path}")

    output_file = FileProperties(
        save_to_disk=not no_save,
        directory=directory,
        file_name=file_name,
        file_exists_action=file_exists_action,
    )
    options = Options(throw_error_on_failure=not no_throw, get_result_as_byte_array=False)

    content = DocumentContent(content_json=_read_content(content_path))
    try:
        output = create_pdf(output_file, content, options)
    except PdfTemplateError as exc:
        console.print(f"[red]{type(exc).__name__}:[/red] {exc}", soft_wrap=True)
        raise typer.Exit(code=1)

    if not output.success:
        console.print(f"[yellow]Failed:[/yellow] {output.error_message}", soft_wrap=True)
        raise typer.Exit(code=2)

    target = output.file_name or "[dim]not saved[/dim]"
    console.print(f"[green]Done:[/green] {target} ({output.page_count} pages)", soft_wrap=True)


@app.command()
def validate(
    content_path: str = typer.Argument(..., help="Path to JSON document description"),
) -> None:
    """Check a JSON document description without rendering it."""
    try:
        definition = parse_document(_read_content(content_path))
    except PdfTemplateError as exc:
        console.print(f"[red]Invalid:[/red] {exc}", soft_wrap=True)
        raise typer.Exit(code=1)

    summary = Table(title="Document")
    summary.add_column("Property", style="bold")
    summary.add_column("Value")
    summary.add_row("Page size", definition.page_size.value)
    summary.add_row("Orientation", definition.page_orientation.value)
    summary.add_row("Title", definition.title or "")
    summary.add_row("Author", definition.author or "")
    summary.add_row("Elements", str(definition.element_count))
    for element in definition.document_elements:
        summary.add_row("", element.element_type.value)
    console.print(summary)


if __name__ == "__main__":
    app()
