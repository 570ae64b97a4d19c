"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from text_refiner.config import AppConfig, load_config
from text_refiner.export.clipboard import ClipboardDeniedError, copy_to_clipboard
from text_refiner.export.plain_text import save_plain_text
from text_refiner.models.refinement import RefinementResult
from text_refiner.pipeline.alternatives import AlternativePhraseSuggester
from text_refiner.pipeline.fluency_scorer import score_fluency
from text_refiner.pipeline.refiner import RefinementPipeline

app = typer.Typer(
    name="text-refiner",
    help="Rule-based text refinement: corrections, fluency score, alternatives",
    no_args_is_help=True,
)
console = Console()

_CATEGORY_COLORS = {
    "grammar": "cyan",
    "spelling": "magenta",
    "punctuation": "yellow",
    "fluency": "blue",
}


def _setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


def _load(config_path: Path | None) -> AppConfig:
    try:
        return load_config(config_path)
    except (ValueError, TypeError, yaml.YAMLError) as e:
        console.print(f"[red]Invalid configuration: {escape(str(e))}[/red]")
        raise typer.Exit(1)


def _read_input(text: str | None, file: Path | None) -> str:
    if file is not None:
        if not file.exists():
            console.print(f"[red]Input file not found: {file}[/red]")
            raise typer.Exit(1)
        try:
            return file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            console.print(f"[red]Cannot read input file {file}: {escape(str(e))}[/red]")
            raise typer.Exit(1)
    if text is None:
        console.print("[red]Provide TEXT or --file.[/red]")
        raise typer.Exit(1)
    return text


def _corrections_table(result: RefinementResult) -> Table:
    table = Table(title="Corrections")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Category")
    table.add_column("Position", justify="right")
    table.add_column("Original")
    table.add_column("Corrected")
    for i, c in enumerate(result.corrections, 1):
        color = _CATEGORY_COLORS.get(c.category, "white")
        table.add_row(
            str(i),
            f"[{color}]{c.category}[/{color}]",
            str(c.position),
            repr(c.original),
            repr(c.corrected),
        )
    return table


def _score_color(score: int) -> str:
    if score >= 90:
        return "green"
    if score >= 80:
        return "yellow"
    return "red"


@app.command()
def refine(
    text: str = typer.Argument(None, help="Text to refine"),
    file: Path = typer.Option(None, "--file", "-f", help="Read text from a file"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    no_delay: bool = typer.Option(False, "--no-delay", help="Skip the processing delay"),
    copy: bool = typer.Option(False, "--copy", help="Copy the refined text to the clipboard"),
    config_path: Path = typer.Option(None, "--config", help="Path to config.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Correct grammar, spelling, punctuation and spacing."""
    _setup_logging(verbose)
    config = _load(config_path)
    source = _read_input(text, file)

    pipeline = RefinementPipeline.from_config(config.refinement)
    if no_delay:
        pipeline.latency = 0

    if as_json or not source.strip():
        result = asyncio.run(pipeline.refine(source))
    else:
        with console.status("Refining..."):
            result = asyncio.run(pipeline.refine(source))

    if as_json:
        console.print_json(result.model_dump_json(by_alias=True))
    else:
        console.print(Panel(result.refined_text or "[dim](empty)[/dim]", title="Refined text"))
        if result.corrections:
            console.print(_corrections_table(result))
            counts = result.counts_by_category()
            console.print(
                "  ".join(f"{name}: {count}" for name, count in counts.items() if count)
            )
        else:
            console.print("[green]No corrections needed.[/green]")
        color = _score_color(result.fluency_score)
        console.print(f"Fluency score: [bold {color}]{result.fluency_score}[/bold {color}]")

    if copy and result.refined_text:
        _copy(result.refined_text)


@app.command()
def suggest(
    text: str = typer.Argument(None, help="Text to rephrase"),
    file: Path = typer.Option(None, "--file", "-f", help="Read text from a file"),
    config_path: Path = typer.Option(None, "--config", help="Path to config.yaml"),
) -> None:
    """Suggest alternative phrasings for weak or informal phrases."""
    config = _load(config_path)
    source = _read_input(text, file)

    suggester = AlternativePhraseSuggester(
        max_alternatives=config.suggestions.max_alternatives,
    )
    alternatives = suggester.suggest(source)
    if not alternatives:
        console.print("[yellow]No alternatives found.[/yellow]")
        return

    console.print(f"\n[bold]Alternatives ({len(alternatives)}):[/bold]")
    for i, alt in enumerate(alternatives, 1):
        console.print(f"  {i}. {alt}")


@app.command()
def score(
    original: str = typer.Argument(help="Original text"),
    refined: str = typer.Argument(help="Refined text"),
) -> None:
    """Compute the fluency score of a refined text."""
    value = score_fluency(original, refined)
    color = _score_color(value)
    console.print(f"Fluency score: [bold {color}]{value}[/bold {color}]")


@app.command()
def export(
    text: str = typer.Argument(None, help="Text to export"),
    file: Path = typer.Option(None, "--file", "-f", help="Read text from a file"),
    output: Path = typer.Option(None, "--output", "-o", help="Output path (.txt)"),
    do_refine: bool = typer.Option(True, "--refine/--raw", help="Refine before exporting"),
    config_path: Path = typer.Option(None, "--config", help="Path to config.yaml"),
) -> None:
    """Save text (refined by default) as a plain-text file."""
    config = _load(config_path)
    source = _read_input(text, file)

    content = source
    if do_refine:
        pipeline = RefinementPipeline.from_config(config.refinement)
        content = pipeline.refine_sync(source).refined_text

    if output is None:
        output = config.export.resolved_output_dir / "refined.txt"

    path = save_plain_text(content, output, encoding=config.export.encoding)
    console.print(f"[green]Saved: {path}[/green]")


@app.command("copy")
def copy_command(
    text: str = typer.Argument(None, help="Text to copy"),
    file: Path = typer.Option(None, "--file", "-f", help="Read text from a file"),
) -> None:
    """Copy text to the clipboard."""
    source = _read_input(text, file)
    _copy(source)


def _copy(text: str) -> None:
    try:
        asyncio.run(copy_to_clipboard(text))
    except ClipboardDeniedError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
    console.print("[green]Copied to clipboard.[/green]")


if __name__ == "__main__":
    app()
