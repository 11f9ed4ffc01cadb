"""Command line interface for linedocs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from linedocs.config import AppConfig
from linedocs.decoder import LineFormatError
from linedocs.reader import LineFileDocs
from linedocs.source import materialize_line_docs


console = Console()
app = typer.Typer(help="linedocs - random-access sampling of line corpora")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _resolve_corpus(path: Optional[str]) -> str:
    return path if path is not None else AppConfig().resolve_line_docs_file()


@app.command()
def sample(
    path: Optional[str] = typer.Argument(None, help="Line file path or bundled corpus name."),
    seed: Optional[int] = typer.Option(None, help="Seed for the start position (omit to read from the start)"),
    count: int = typer.Option(10, "--count", "-n", min=1, help="Number of records to print"),
    doc_values: bool = typer.Option(True, "--doc-values/--no-doc-values", help="Populate the title doc-values field"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Print records read from a random position in the corpus."""
    _setup_logging(verbose)
    corpus = _resolve_corpus(path)

    try:
        docs = LineFileDocs(seed, corpus, doc_values)
    except FileNotFoundError as exc:
        raise typer.BadParameter(f"Corpus not found: {corpus}") from exc

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Id")
    table.add_column("Title")
    table.add_column("Date")
    table.add_column("Body")

    with docs:
        for _ in range(count):
            try:
                doc = docs.next_doc()
            except LineFormatError as exc:
                console.print(str(exc), style="red", markup=False)
                raise typer.Exit(code=1) from exc
            table.add_row(doc["id"], doc["title"], doc["date"], doc["body"][:120])

    console.print(table)


@app.command()
def materialize(
    path: Optional[str] = typer.Argument(None, help="Compressed line file path or bundled corpus name."),
    temp_dir: Path = typer.Option(None, "--temp-dir", help="Directory for the decompressed copy"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Decompress a gzip'd corpus once so readers can seek it directly."""
    _setup_logging(verbose)
    corpus = _resolve_corpus(path)

    try:
        result = materialize_line_docs(corpus, temp_dir=temp_dir)
    except FileNotFoundError as exc:
        raise typer.BadParameter(f"Corpus not found: {corpus}") from exc

    if result is None:
        console.print("[yellow]Corpus is not compressed, nothing to do.[/yellow]")
        return
    console.print(str(result), soft_wrap=True)
