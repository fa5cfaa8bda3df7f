"""Main CLI entry point using Typer."""
import json
import sys
from pathlib import Path
from typing import Optional
import typer
from rich.console import Console
from rich.table import Table

from .. import __version__
from ..config import get_settings
from ..config.constants import FORMAT_HINTS
from ..models import ChaptersRecord, CharactersRecord, ParseEnvelope, PlotRecord, TextRecord
from ..parsing import parse_ai_response, validate_response


app = typer.Typer(
    name="storyparse",
    help="storyparse - turn free-form model output into validated story records",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()
err_console = Console(stderr=True)


def _read_input(source: str) -> str:
    """Read the response text from a file path or '-' for stdin."""
    if source == '-':
        return sys.stdin.read()
    path = Path(source).expanduser()
    if not path.exists():
        err_console.print(f"[red]File not found: {source}[/red]")
        raise typer.Exit(1)
    return path.read_text(encoding='utf-8')


def _render_chapters(record: ChaptersRecord) -> None:
    table = Table(title=f"Chapters ({record.count})")
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Title", style="bold")
    table.add_column("Summary")
    table.add_column("Setting")
    table.add_column("Mood")
    table.add_column("Key Events")
    table.add_column("Characters")

    for chapter in record.chapters:
        table.add_row(
            str(chapter.number),
            chapter.title,
            chapter.summary or "—",
            chapter.setting or "—",
            chapter.mood or "—",
            "、".join(chapter.key_events) or "—",
            "、".join(chapter.characters) or "—",
        )
    console.print(table)


def _render_characters(record: CharactersRecord) -> None:
    table = Table(title=f"Characters ({record.count})")
    table.add_column("Name", style="cyan")
    table.add_column("Role")
    table.add_column("Appearance")
    table.add_column("Personality")
    table.add_column("Background")

    for character in record.characters:
        table.add_row(
            character.name,
            character.role or "—",
            character.appearance or "—",
            character.personality or "—",
            character.background or "—",
        )
    console.print(table)


def _render_plot(record: PlotRecord) -> None:
    table = Table(title="Plot")
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    for key, value in record.plot.to_dict().items():
        table.add_row(key, value)
    console.print(table)


def render_envelope(envelope: ParseEnvelope) -> None:
    """Pretty-print a parse result."""
    if not envelope.success:
        console.print(f"[red]✗ {envelope.error}[/red]")
    else:
        data = envelope.data
        if isinstance(data, ChaptersRecord):
            _render_chapters(data)
        elif isinstance(data, CharactersRecord):
            _render_characters(data)
        elif isinstance(data, PlotRecord):
            _render_plot(data)
        elif isinstance(data, TextRecord):
            console.print(f"[cyan]Plain text[/cyan] [dim]({data.line_count} lines, {data.word_count} chars)[/dim]")
            console.print(data.content, markup=False)
        else:
            console.print("[cyan]Decoded JSON[/cyan]")
            console.print_json(json.dumps(data, ensure_ascii=False))

    for warning in envelope.warnings or []:
        console.print(f"[yellow]⚠ {warning}[/yellow]")


@app.command(help="Parse a saved model response")
def parse(
    source: str = typer.Argument(..., help="Response file, or '-' to read stdin"),
    format_hint: Optional[str] = typer.Option(
        None,
        "--format", "-f",
        help="Expected format: json, text or auto (default from config)"
    ),
    as_json: bool = typer.Option(
        False,
        "--json", "-j",
        help="Print the envelope as JSON instead of tables"
    ),
    strict: bool = typer.Option(
        False,
        "--strict", "-s",
        help="Exit with status 1 unless the result passes validation"
    )
):
    """Parse a model response and show the extracted records."""
    settings = get_settings()
    hint = (format_hint or settings.default_format).lower()
    if hint not in FORMAT_HINTS:
        err_console.print(f"[red]Unknown format: {hint} (expected one of {', '.join(FORMAT_HINTS)})[/red]")
        raise typer.Exit(2)

    content = _read_input(source)
    envelope = parse_ai_response(content, hint, settings=settings)

    if as_json:
        console.print_json(json.dumps(envelope.to_dict(), ensure_ascii=False))
    else:
        render_envelope(envelope)

    if not envelope.success:
        raise typer.Exit(1)
    if strict and not validate_response(envelope):
        err_console.print("[red]Result did not pass validation[/red]")
        raise typer.Exit(1)


@app.command(help="Show or set configuration")
def config(
    key: Optional[str] = typer.Argument(None, help="Config key to show/set"),
    value: Optional[str] = typer.Argument(None, help="Value to set"),
    list_all: bool = typer.Option(
        False,
        "--list", "-l",
        help="List all configuration values"
    )
):
    """Show or set configuration values."""
    settings = get_settings()

    if list_all or not key:
        table = Table(title="Configuration")
        table.add_column("Key", style="cyan")
        table.add_column("Value")

        for k, v in settings.to_config_dict().items():
            table.add_row(k, str(v))

        console.print(table)
        return

    if key not in type(settings).model_fields:
        console.print(f"[red]Unknown config key: {key}[/red]")
        raise typer.Exit(1)

    if value is None:
        console.print(f"{key}: {getattr(settings, key)}")
        return

    try:
        setattr(settings, key, value)
    except ValueError as e:
        console.print(f"[red]Invalid value for {key}: {e}[/red]")
        raise typer.Exit(1)

    settings.save_config_file(Path("config.yaml"))
    console.print(f"[green]✓ Set {key} = {getattr(settings, key)}[/green]")


@app.command(help="Show version information")
def version():
    """Show version information."""
    console.print(f"[cyan]storyparse v{__version__}[/cyan]")
    console.print("[dim]Structured story records from free-form model output[/dim]")


if __name__ == "__main__":
    app()
