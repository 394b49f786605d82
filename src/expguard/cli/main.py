"""Main CLI entrypoint for expguard."""

import json
import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from expguard.cli.snapshot import load_targets
from expguard.conflicts.guard import ConflictGuard
from expguard.conflicts.indirect import might_indirectly_affect
from expguard.conflicts.keys import target_keys
from expguard.conflicts.payload import to_reserved_payload
from expguard.core.config import GuardConfig
from expguard.core.exceptions import GuardError
from expguard.models.target import ActiveTarget, CandidateTarget
from expguard.normalization.selector import canonicalize_selector
from expguard.normalization.url import normalize_url_to_pattern, url_overlap

console = Console()
err_console = Console(stderr=True)

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

app = typer.Typer(
    name="expguard",
    help="Experiment conflict guard - check DOM targets against running experiments",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", "-l", help="Logging level (overrides config)"),
    ] = None,
    config_dir: Annotated[
        Optional[Path],
        typer.Option("--config-dir", help="Directory holding expguard.config.json"),
    ] = None,
) -> None:
    """Load configuration and set up logging."""
    try:
        config = GuardConfig.load(config_dir)
    except GuardError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    level = (log_level or config.logging.level).upper()
    if level not in VALID_LOG_LEVELS:
        err_console.print(f"[red]Error: Invalid log level '{level.lower()}'[/red]")
        err_console.print(f"Valid levels: {', '.join(VALID_LOG_LEVELS)}")
        raise typer.Exit(1)

    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    ctx.obj = config


def _get_guard(ctx: typer.Context) -> ConflictGuard:
    config = ctx.obj if isinstance(ctx.obj, GuardConfig) else GuardConfig()
    return ConflictGuard(config)


def _load_targets_or_exit(path: Path) -> list[ActiveTarget]:
    try:
        return load_targets(path)
    except GuardError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command("normalize")
def normalize_command(
    url: Annotated[str, typer.Argument(help="URL or path to normalize")],
) -> None:
    """Print the canonical URL pattern."""
    typer.echo(normalize_url_to_pattern(url))


@app.command("overlap")
def overlap_command(
    first: Annotated[str, typer.Argument(help="First pattern or URL")],
    second: Annotated[str, typer.Argument(help="Second pattern or URL")],
) -> None:
    """Check whether two URL patterns overlap (exit code 1 if not)."""
    a = normalize_url_to_pattern(first)
    b = normalize_url_to_pattern(second)
    if url_overlap(a, b):
        console.print(f"[green]overlap[/green]: {a} ~ {b}")
        return
    console.print(f"no overlap: {a} / {b}")
    raise typer.Exit(1)


@app.command("canonicalize")
def canonicalize_command(
    selector: Annotated[str, typer.Argument(help="CSS selector")],
) -> None:
    """Print the canonical form of a CSS selector."""
    typer.echo(canonicalize_selector(selector))


@app.command("keys")
def keys_command(
    selector: Annotated[
        Optional[str], typer.Option("--selector", "-s", help="CSS selector")
    ] = None,
    role: Annotated[
        Optional[str], typer.Option("--role", "-r", help="Semantic role")
    ] = None,
) -> None:
    """Print the identity keys for a selector and/or role."""
    keys = target_keys(selector, role)
    typer.echo(json.dumps(
        {"target_key": keys.target_key, "role_key": keys.role_key}, indent=2
    ))


@app.command("check")
def check_command(
    ctx: typer.Context,
    targets_file: Annotated[
        Path, typer.Option("--targets", "-t", help="Active-target snapshot (JSON/YAML)")
    ],
    url: Annotated[str, typer.Option("--url", "-u", help="Candidate page URL")],
    selector: Annotated[
        Optional[str], typer.Option("--selector", "-s", help="Candidate CSS selector")
    ] = None,
    role: Annotated[
        Optional[str], typer.Option("--role", "-r", help="Candidate semantic role")
    ] = None,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output as JSON")
    ] = False,
) -> None:
    """Check a candidate target against active experiments.

    Exits with code 1 when conflicts are found.
    """
    active = _load_targets_or_exit(targets_file)
    candidate = CandidateTarget(url=url, selector=selector, role=role)
    result = _get_guard(ctx).check(active, candidate)

    if json_output:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    elif not result.has_conflicts:
        console.print(f"[green]{result.message}[/green] ({result.candidate_pattern})")
    else:
        table = Table(title=f"Conflicts on {result.candidate_pattern}")
        table.add_column("Experiment", style="cyan")
        table.add_column("Label")
        table.add_column("Pattern")
        table.add_column("Reason", style="yellow")
        for match in result.matches:
            table.add_row(
                match.target.experiment_id,
                match.target.label,
                match.target.url_pattern,
                match.reason.value,
            )
        console.print(table)

    if result.has_conflicts:
        raise typer.Exit(1)


@app.command("reserved")
def reserved_command(
    ctx: typer.Context,
    targets_file: Annotated[
        Path, typer.Option("--targets", "-t", help="Active-target snapshot (JSON/YAML)")
    ],
    url: Annotated[str, typer.Option("--url", "-u", help="Page being planned for")],
    max_items: Annotated[
        Optional[int],
        typer.Option("--max-items", "-n", min=0, help="Maximum reservations (overrides config)"),
    ] = None,
) -> None:
    """Print the reserved payload for a page as JSON."""
    active = _load_targets_or_exit(targets_file)
    guard = _get_guard(ctx)

    if max_items is not None:
        payload = to_reserved_payload(url, active, max_items=max_items)
    else:
        payload = guard.reserved_payload(url, active)

    typer.echo(json.dumps(payload.to_dict(), indent=2))


@app.command("indirect")
def indirect_command(
    proposal: Annotated[str, typer.Argument(help="Selector the proposal changes")],
    reserved: Annotated[str, typer.Argument(help="Selector held by a running experiment")],
) -> None:
    """Check whether a proposal might indirectly affect a reserved selector.

    Advisory only; always exits with code 0.
    """
    if might_indirectly_affect(proposal, reserved):
        console.print("[yellow]possible indirect effect[/yellow]")
    else:
        console.print("no indirect effect detected")


if __name__ == "__main__":
    app()
