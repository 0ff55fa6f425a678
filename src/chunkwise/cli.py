"""CLI interface for chunkwise.

Typer-based command-line interface with Rich output formatting.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from chunkwise import __version__
from chunkwise.compile import (
    assemble_context,
    rank_chunks,
    summarize_chunks,
    summarize_text,
)
from chunkwise.config import CONFIG_FILE, ChunkwiseConfig, load_config, save_config
from chunkwise.exceptions import ChunkwiseError
from chunkwise.loader import clean_text, read_document
from chunkwise.registry import default_registry

__all__ = ["app"]

app = typer.Typer(
    name="chunkwise",
    help="Split long documents into boundary-aware chunks for model prompts.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
console = Console()

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help=f"Config file (default: ./{CONFIG_FILE} if present)"),
]
LimitOption = Annotated[
    int | None,
    typer.Option("--limit", "-l", help="Maximum characters per chunk"),
]


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """chunkwise command-line interface."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _fail(message: str) -> typer.Exit:
    console.print(f"[red]{escape(message)}[/red]")
    return typer.Exit(code=1)


def _load_settings(config_path: Path | None) -> ChunkwiseConfig:
    """Load config from ``config_path``, ./chunkwise.toml, or defaults."""
    path = config_path or Path.cwd() / CONFIG_FILE
    if config_path is None and not path.exists():
        return ChunkwiseConfig()
    try:
        return load_config(path)
    except ChunkwiseError as e:
        raise _fail(str(e)) from e


def _load_chunks(
    file: Path,
    settings: ChunkwiseConfig,
    limit: int | None,
    strategy: str | None = None,
) -> list[str]:
    """Read, clean and chunk a document with the configured strategy."""
    try:
        text = clean_text(read_document(file))
        char_limit = limit if limit is not None else settings.split.char_limit
        name = strategy or settings.chat.strategy
        chunker = default_registry.create(name, settings)
        return chunker.split(text, char_limit)
    except ChunkwiseError as e:
        raise _fail(str(e)) from e


@app.command()
def version() -> None:
    """Show chunkwise version."""
    console.print(f"chunkwise {__version__}")


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file"),
    ] = False,
) -> None:
    """Write a default chunkwise.toml in the current directory."""
    path = Path.cwd() / CONFIG_FILE
    if path.exists() and not force:
        console.print(
            f"[yellow]{CONFIG_FILE} already exists.[/yellow] Use [bold]--force[/bold] to overwrite."
        )
        raise typer.Exit(code=1)

    try:
        save_config(ChunkwiseConfig(), path)
    except ChunkwiseError as e:
        raise _fail(str(e)) from e

    console.print(f"[green]Wrote default config[/green] to {path}")


@app.command()
def split(
    file: Annotated[Path, typer.Argument(help="Document to split")],
    limit: LimitOption = None,
    strategy: Annotated[
        str | None,
        typer.Option("--strategy", "-s", help="Chunking strategy (basic, section, smart)"),
    ] = None,
    overlap: Annotated[
        int | None,
        typer.Option("--overlap", "-o", help="Characters carried between chunks"),
    ] = None,
    fmt: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format (table, json, text)"),
    ] = "table",
    config_path: ConfigOption = None,
) -> None:
    """Split a document into chunks."""
    settings = _load_settings(config_path)
    if overlap is not None:
        settings.split.overlap = overlap
        try:
            settings.split.validate()
        except ChunkwiseError as e:
            raise _fail(str(e)) from e

    if fmt not in ("table", "json", "text"):
        raise _fail(f"Unknown format '{fmt}'. Use table, json, or text.")

    chunks = _load_chunks(file, settings, limit, strategy)
    summaries = summarize_chunks(chunks, settings.summary.preview_length)

    if fmt == "json":
        typer.echo(json.dumps([asdict(s) for s in summaries], ensure_ascii=False, indent=2))
        return

    if fmt == "text":
        typer.echo("\n\n".join(chunks))
        return

    table = Table(title=f"{escape(file.name)}: {len(chunks)} chunks")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Chars", justify="right")
    table.add_column("Words", justify="right")
    table.add_column("Preview")
    for s in summaries:
        table.add_row(str(s.index + 1), str(s.length), str(s.word_count), Text(s.preview))
    console.print(table)


@app.command()
def search(
    file: Annotated[Path, typer.Argument(help="Document to search")],
    query: Annotated[str, typer.Argument(help="Search query")],
    top_k: Annotated[
        int | None,
        typer.Option("--top-k", "-k", help="Number of results"),
    ] = None,
    limit: LimitOption = None,
    config_path: ConfigOption = None,
) -> None:
    """Rank a document's chunks by keyword relevance to a query."""
    settings = _load_settings(config_path)
    chunks = _load_chunks(file, settings, limit)
    results = rank_chunks(
        chunks,
        query,
        max_results=top_k if top_k is not None else settings.rank.max_results,
        phrase_bonus=settings.rank.phrase_bonus,
    )

    if not results:
        console.print(f"[yellow]No chunks match[/yellow] '{escape(query)}'")
        raise typer.Exit(code=0)

    for rank, chunk in enumerate(results, start=1):
        console.rule(f"[bold]Result {rank}[/bold]")
        console.print(chunk, markup=False, highlight=False)


@app.command()
def context(
    file: Annotated[Path, typer.Argument(help="Document to build context from")],
    query: Annotated[
        str | None,
        typer.Option("--query", "-q", help="Only include chunks relevant to this query"),
    ] = None,
    max_chunks: Annotated[
        int | None,
        typer.Option("--max-chunks", "-n", help="Maximum chunks to include"),
    ] = None,
    limit: LimitOption = None,
    config_path: ConfigOption = None,
) -> None:
    """Print a prompt-ready context block built from a document's chunks."""
    settings = _load_settings(config_path)
    chunks = _load_chunks(file, settings, limit)
    count = max_chunks if max_chunks is not None else settings.context.max_chunks

    if query:
        chunks = rank_chunks(
            chunks, query, max_results=count, phrase_bonus=settings.rank.phrase_bonus
        )

    typer.echo(assemble_context(chunks, count))


@app.command()
def summarize(
    file: Annotated[Path, typer.Argument(help="Document to summarize")],
    max_length: Annotated[
        int | None,
        typer.Option("--max-length", "-m", help="Maximum summary length in characters"),
    ] = None,
    config_path: ConfigOption = None,
) -> None:
    """Print a short extractive summary of a document."""
    settings = _load_settings(config_path)
    try:
        text = clean_text(read_document(file))
    except ChunkwiseError as e:
        raise _fail(str(e)) from e

    length = max_length if max_length is not None else settings.summary.max_length
    typer.echo(summarize_text(text, length, settings.summary.markers))
