"""Command-line interface for the PDF resector."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress
from rich.prompt import Confirm

from . import __version__
from .config import Settings, get_settings
from .errors import ConflictError, PathTraversalError, ResectorError
from .logging_config import setup_logging
from .path_sanitizer import normalize_source_path
from .splitter import PDFSplitter

app = typer.Typer(help="Split a page range out of a PDF into a new PDF inside a sandbox")
console = Console()


def _make_splitter(settings: Settings, root: Optional[Path], verbose: bool = False) -> PDFSplitter:
    setup_logging("DEBUG" if verbose else settings.log_level)
    return PDFSplitter.from_settings(settings, root=root)


@app.command()
def split(
    source: str = typer.Argument(..., help="Sandbox-relative path of the source PDF"),
    start_page: int = typer.Argument(..., help="First page to include (1-indexed)"),
    end_page: int = typer.Argument(..., help="Last page to include (inclusive)"),
    name: str = typer.Option(
        ...,
        "--name", "-n",
        help="Name for the new PDF file (.pdf is added if missing)"
    ),
    output_dir: Optional[str] = typer.Option(
        None,
        "--output-dir", "-o",
        help="Output directory inside the sandbox (default: settings.default_output_folder; "
             "pass '' to save next to the source PDF)"
    ),
    root: Optional[Path] = typer.Option(
        None,
        "--root", "-r",
        help="Sandbox root directory (default: PDF_RESECTOR_SANDBOX_ROOT or .)"
    ),
    yes: bool = typer.Option(
        False,
        "--yes", "-y",
        help="Overwrite an existing output file without asking"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Extract pages START_PAGE..END_PAGE of SOURCE into a new PDF.

    The output path is checked against the sandbox, its filename is
    sanitized, and missing directories are created. If the output already
    exists you are asked before it is overwritten.
    """
    settings = get_settings()
    splitter = _make_splitter(settings, root, verbose)
    if output_dir is None:
        output_dir = settings.default_output_folder

    console.print(Panel.fit(
        f"[bold]Source:[/bold] {source}\n"
        f"[bold]Pages:[/bold] {start_page}-{end_page}\n"
        f"[bold]Output:[/bold] {output_dir or '(source folder)'}/{name}\n"
        f"[bold]Sandbox:[/bold] {(root or settings.sandbox_root).resolve()}",
        title="Split Configuration"
    ))

    overwrite = yes
    if not yes:
        try:
            candidate = splitter.output_path_for(source, output_dir, name)
            exists = splitter.check_output_conflict(candidate)
        except PathTraversalError as e:
            console.print(f"[red]Error splitting PDF: {e}[/red]")
            raise typer.Exit(1)
        if exists:
            overwrite = Confirm.ask(f"File {candidate} already exists. Overwrite?")
            if not overwrite:
                console.print("[yellow]Cancelled[/yellow]")
                raise typer.Exit(1)

    try:
        with Progress(console=console, transient=True) as progress:
            task = progress.add_task("Splitting PDF...", total=100)

            def on_progress(update):
                progress.update(
                    task,
                    completed=update.current,
                    total=update.total,
                    description=update.status,
                )

            splitter.set_progress_callback(on_progress)
            result = splitter.split_document(
                source, start_page, end_page, output_dir, name, overwrite=overwrite
            )
    except ConflictError as e:
        console.print(f"[yellow]{e}[/yellow]")
        raise typer.Exit(1)
    except (ResectorError, ValueError) as e:
        console.print(f"[red]Error splitting PDF: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"\n[green]✓ Successfully created {result.path}[/green]")
    console.print(f"  Pages: {result.page_count}")
    console.print(f"  Size: {result.size} bytes")
    if result.overwritten:
        console.print("  [dim]Replaced existing file[/dim]")


@app.command()
def info(
    source: str = typer.Argument(..., help="Sandbox-relative path of the PDF"),
    root: Optional[Path] = typer.Option(None, "--root", "-r", help="Sandbox root directory"),
):
    """Show the page count and size of a PDF."""
    splitter = _make_splitter(get_settings(), root)

    try:
        page_count = splitter.page_count(source)
        size = splitter.fs.stat(normalize_source_path(source)).size
    except ResectorError as e:
        console.print(f"[red]Error loading PDF: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[bold]{source}[/bold]: PDF loaded with {page_count} pages ({size} bytes)")


@app.command()
def check(
    path: str = typer.Argument(..., help="Sandbox-relative output path to check"),
    root: Optional[Path] = typer.Option(None, "--root", "-r", help="Sandbox root directory"),
):
    """Check whether an output path is valid and already exists."""
    splitter = _make_splitter(get_settings(), root)

    try:
        exists = splitter.check_output_conflict(path)
    except PathTraversalError as e:
        console.print(f"[red]Invalid path: {e}[/red]")
        raise typer.Exit(1)

    if exists:
        console.print(f"[yellow]{path} already exists[/yellow]")
    else:
        console.print(f"[green]{path} is free[/green]")


@app.command()
def version():
    """Show version information."""
    console.print(f"pdf-resector v{__version__}")


if __name__ == "__main__":
    app()
