"""CLI interface for HAR capture profiling.

Provides commands for building API graphs from HAR files and
summarizing the API surface they exercise.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from har_profiler.config import get_log_level
from har_profiler.models import APIGraph, BuildOptions, CaptureInput, ParseError, UrlErrorPolicy
from har_profiler.report import format_graph_report
from har_profiler.service import build_api_graph, build_api_graph_batch
from har_profiler.utils.logging import setup_logging

app = typer.Typer(
    name="har-profiler",
    help="Build API graphs from recorded HTTP traffic (HAR files)",
)


def _load_graph(
    files: list[Path],
    sequence: bool,
    url_errors: UrlErrorPolicy | None,
) -> APIGraph:
    """Read HAR files and build one graph (merged when several files are given).

    Raises:
        typer.Exit: If a file is missing or unreadable, or a capture cannot be parsed
    """
    for file in files:
        if not file.exists():
            typer.echo(f"❌ File not found: {file}", err=True)
            raise typer.Exit(1)

    options = BuildOptions(url_error_policy=url_errors) if url_errors is not None else None

    try:
        if len(files) == 1:
            content = files[0].read_text(encoding="utf-8")
            return build_api_graph(content, is_sequence=sequence, options=options)

        captures = [CaptureInput(content=f.read_text(encoding="utf-8"), is_sequence=sequence) for f in files]
        return build_api_graph_batch(captures, options=options)
    except (OSError, UnicodeDecodeError) as e:
        typer.echo(f"❌ Failed to read capture: {e}", err=True)
        raise typer.Exit(1) from e
    except ParseError as e:
        typer.echo(f"❌ Error [{e.code.value}]: {e.message}", err=True)
        raise typer.Exit(1) from e


@app.command()
def build(
    files: Annotated[
        list[Path],
        typer.Argument(
            help="HAR files to build the graph from (several files are merged)",
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output file for the graph (JSON). Defaults to stdout",
        ),
    ] = None,
    sequence: Annotated[
        bool,
        typer.Option(
            "--sequence",
            "-s",
            help="Treat each capture as one ordered session and derive transitions",
        ),
    ] = False,
    url_errors: Annotated[
        UrlErrorPolicy | None,
        typer.Option(
            "--url-errors",
            help="Malformed URL handling (default from HAR_PROFILER_URL_ERROR_POLICY)",
        ),
    ] = None,
) -> None:
    """Build an API graph and write it as JSON.

    Example:
        uv run har-profiler build session.har --sequence -o graph.json
    """
    graph = _load_graph(files, sequence, url_errors)
    payload = graph.to_json()

    if output is None:
        typer.echo(payload)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(payload, encoding="utf-8")
    typer.echo(f"✅ Graph written to: {output}", err=True)


@app.command()
def analyze(
    files: Annotated[
        list[Path],
        typer.Argument(
            help="HAR files to analyze (several files are merged)",
        ),
    ],
    sequence: Annotated[
        bool,
        typer.Option(
            "--sequence",
            "-s",
            help="Treat each capture as one ordered session and derive transitions",
        ),
    ] = False,
    url_errors: Annotated[
        UrlErrorPolicy | None,
        typer.Option(
            "--url-errors",
            help="Malformed URL handling (default from HAR_PROFILER_URL_ERROR_POLICY)",
        ),
    ] = None,
) -> None:
    """Print a summary of the API surface exercised by HAR files.

    Example:
        uv run har-profiler analyze session.har --sequence
    """
    graph = _load_graph(files, sequence, url_errors)
    typer.echo(format_graph_report(graph))


@app.callback()
def _configure() -> None:
    """Configure logging before any command runs."""
    setup_logging(level=get_log_level())


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
