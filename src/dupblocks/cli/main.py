from __future__ import annotations

import json
from contextlib import nullcontext
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)

from dupblocks import __version__
from dupblocks.config import ScanConfig, load_config, merge_cli_overrides
from dupblocks.core import DupBlocksValueError, Leaf
from dupblocks.io import load_lines
from dupblocks.report import filter_leaves, matches_payload, render_match
from dupblocks.search import ScanSession, total_pairs
from dupblocks.telemetry import ScanTelemetryLogger

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Find near-duplicate blocks of lines within a text file.",
)
# Status output goes to stderr so stdout carries only the report.
console = Console(stderr=True)


def _enable_rich_tracebacks():
    """Enable rich tracebacks with local variables and customized formatting."""
    import rich.traceback as _rt

    _rt.install(show_locals=True, width=140, extra_lines=2, console=console)


def _run_scan(session: ScanSession, show_progress: bool) -> list[Leaf]:
    if not show_progress:
        return session.scan()
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
    ) as progress:
        task = progress.add_task("Comparing lines", total=total_pairs(session.n_lines))
        return session.scan(lambda advance: progress.advance(task, advance))


@app.callback()
def main() -> None:
    """Find near-duplicate blocks of lines within a text file."""


@app.command("scan")
def scan(
    file: Annotated[
        Path,
        typer.Option(
            "--file",
            "-f",
            exists=True,
            dir_okay=False,
            readable=True,
            help="File to process.",
        ),
    ],
    thres: Annotated[
        float | None,
        typer.Option(
            "--thres",
            "-t",
            help=(
                "Similarity threshold in [0, 1]. Only blocks of lines more similar than this "
                "are reported (default 0.9)."
            ),
        ),
    ] = None,
    min_length: Annotated[
        int | None,
        typer.Option(
            "--min-length",
            min=0,
            help="Minimum match length (end - start) to report (default 5, i.e. six lines).",
        ),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            exists=True,
            dir_okay=False,
            help="Optional YAML file with threshold/min_block_length/show_progress.",
        ),
    ] = None,
    out_json: Annotated[
        Path | None,
        typer.Option("--out-json", help="Optional path to write reported matches as JSON."),
    ] = None,
    telemetry_log: Annotated[
        Path | None,
        typer.Option("--telemetry-log", help="Append a run record to this JSONL file."),
    ] = None,
    no_progress: Annotated[
        bool,
        typer.Option("--no-progress", help="Disable the progress bar."),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Show rich tracebacks with local variables."),
    ] = False,
) -> None:
    """Report pairs of similar line blocks found in FILE."""

    if debug:
        _enable_rich_tracebacks()

    try:
        base_config = load_config(config_path) if config_path else ScanConfig()
        config = merge_cli_overrides(
            base_config,
            threshold=thres,
            min_block_length=min_length,
            show_progress=False if no_progress else None,
        )
        lines = load_lines(file)
    except DupBlocksValueError as exc:
        raise typer.BadParameter(str(exc))

    telemetry = (
        ScanTelemetryLogger(
            telemetry_log,
            document=str(file),
            config=config.model_dump(),
            context={"command": "scan"},
        )
        if telemetry_log
        else nullcontext()
    )
    with telemetry:
        session = ScanSession(lines=lines, threshold=config.threshold)
        leaves = _run_scan(session, config.show_progress)
        reported = filter_leaves(leaves, config.min_block_length)
        metrics = {
            "lines": session.n_lines,
            **session.stats.as_dict(),
            "visited": len(session.visited),
            "leaves": len(leaves),
            "reported": len(reported),
        }
        if isinstance(telemetry, ScanTelemetryLogger):
            telemetry.finalize(metrics=metrics)

    for leaf in reported:
        typer.echo(render_match(lines, leaf))

    console.print(
        f"[bold green]Scan completed[/]: {len(reported)} match(es) reported "
        f"from {len(leaves)} leaves ({session.stats.seeds} seeds, {session.n_lines} lines)"
    )

    if out_json:
        out_json.parent.mkdir(parents=True, exist_ok=True)
        payload = matches_payload(
            lines,
            reported,
            document=str(file),
            threshold=config.threshold,
            min_block_length=config.min_block_length,
        )
        out_json.write_text(json.dumps(payload, indent=2))
        console.print(f"Wrote matches to {out_json}")
    if telemetry_log:
        console.print(f"Appended telemetry to {telemetry_log}")


@app.command("version")
def version() -> None:
    """Print the dupblocks version."""
    typer.echo(__version__)


if __name__ == "__main__":  # pragma: no cover
    app()
