"""CLI entry point for trackit.

Invoked as::

    trackit [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m trackit

Commands
--------
run         Start an interactive session
exec        Run one tracker command and save the result
show        List all contacts, modules, lessons or tasks
export      Dump the tracked data as JSON or YAML
check       Report stale module references and other integrity problems
version     Show version information
"""
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from trackit.cli.render import diagnostics_table, entity_table, render_result
from trackit.commands.base import CommandError
from trackit.config import Config, ConfigError, load_config
from trackit.integrity import IntegrityChecker
from trackit.logic import LogicManager
from trackit.logs import configure_logging
from trackit.model.manager import ModelManager
from trackit.model.track import Track
from trackit.parser.errors import ParseError
from trackit.storage import DataConversionError, JsonTrackStorage, TrackSerializer

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)

PROMPT = "trackit> "


@dataclass(frozen=True)
class AppState:
    """Settings resolved by the CLI group and shared with every command."""

    config: Config

    @property
    def storage(self) -> JsonTrackStorage:
        return JsonTrackStorage(self.config.data_file)


def _load_track(storage: JsonTrackStorage) -> Track:
    """Read the data file, exiting on unreadable data."""
    try:
        track = storage.read()
    except DataConversionError as exc:
        err_console.print(f"[red]Data error[/red] in {storage.path}: {escape(str(exc))}")
        sys.exit(1)
    if track is None:
        logger.info("Starting with an empty tracker")
        return Track()
    return track


def _open_logic(state: AppState) -> LogicManager:
    storage = state.storage
    model = ModelManager(_load_track(storage), state.config)
    return LogicManager(model, storage)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="trackit")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Configuration file (defaults to ./config.json)",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Override the configured console log level",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, log_level: str | None) -> None:
    """Track university contacts, modules, lessons and tasks."""
    try:
        config = load_config(config_path)
    except ConfigError as exc:
        err_console.print(f"[red]Config error:[/red] {escape(str(exc))}")
        sys.exit(1)
    configure_logging(log_level or config.log_level, config.log_file)
    ctx.obj = AppState(config)


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from trackit import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]trackit[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# run command
# ---------------------------------------------------------------------------


@cli.command(name="run")
@click.pass_obj
def run_command(state: AppState) -> None:
    """Start an interactive session.

    Enter commands such as ``T add n/Assignment 1 d/20/11/2026``; type
    ``help`` for the full list and ``exit`` to leave.
    """
    logic = _open_logic(state)
    console.print(f"[bold]trackit[/bold] [dim]data: {state.config.data_file}[/dim]")
    while True:
        try:
            line = console.input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break
        if not line.strip():
            continue
        try:
            result = logic.execute(line)
        except (ParseError, CommandError) as exc:
            err_console.print(f"[red]{escape(str(exc))}[/red]", highlight=False)
            continue
        render_result(console, result)
        if result.should_exit:
            break


# ---------------------------------------------------------------------------
# exec command
# ---------------------------------------------------------------------------


@cli.command(name="exec")
@click.argument("command", nargs=-1, required=True)
@click.pass_obj
def exec_command(state: AppState, command: tuple[str, ...]) -> None:
    """Run a single COMMAND and save any changes.

    The words of COMMAND are joined with spaces, so quoting is optional:
    ``trackit exec M add m/CS2103T n/Software Engineering``.
    """
    logic = _open_logic(state)
    try:
        result = logic.execute(" ".join(command))
    except (ParseError, CommandError) as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False)
        sys.exit(1)
    render_result(console, result)


# ---------------------------------------------------------------------------
# show command
# ---------------------------------------------------------------------------


@cli.command(name="show")
@click.argument("kind", type=click.Choice(["contacts", "modules", "lessons", "tasks"]))
@click.pass_obj
def show_command(state: AppState, kind: str) -> None:
    """List every tracked entity of one KIND."""
    track = _load_track(state.storage)
    items = getattr(track, kind)
    console.print(entity_table(kind.capitalize(), kind[:-1], items))


# ---------------------------------------------------------------------------
# export command
# ---------------------------------------------------------------------------


@cli.command(name="export")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default="json",
    help="Output format",
)
@click.option("--output", "-o", default=None, help="Output file path (defaults to stdout)")
@click.pass_obj
def export_command(state: AppState, output_format: str, output: str | None) -> None:
    """Dump all tracked data as JSON or YAML."""
    track = _load_track(state.storage)
    serializer = TrackSerializer()

    if output_format.lower() == "json":
        text = serializer.to_json(track, indent=2)
        lang = "json"
    else:
        text = serializer.to_yaml(track)
        lang = "yaml"

    if output:
        Path(output).write_text(text, encoding="utf-8")
        console.print(f"[green]Data written to[/green] {output}")
    else:
        console.print(Syntax(text, lang))


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


@cli.command(name="check")
@click.pass_obj
def check_command(state: AppState) -> None:
    """Report integrity problems in the stored data.

    Exits with status 1 when an ERROR-level problem is found.
    """
    track = _load_track(state.storage)
    diagnostics = IntegrityChecker(module_limit=state.config.module_limit).check(track)

    if not diagnostics:
        console.print(f"[green]OK[/green] {state.config.data_file}: no issues found")
        return

    console.print(diagnostics_table(f"Check: {state.config.data_file}", diagnostics))
    errors = [d for d in diagnostics if d.is_error]
    console.print(
        f"\n[bold]Summary:[/bold] {len(errors)} error(s), "
        f"{len(diagnostics) - len(errors)} other finding(s)"
    )
    if errors:
        sys.exit(1)


if __name__ == "__main__":
    cli()
