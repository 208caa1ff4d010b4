"""
main.py

typer entry point. every command opens the store, runs one operation from
commands.py and writes the store back, whatever the outcome of individual items.

exit codes: 0 all items succeeded, 1 some item failed, 2 config/setup error.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from . import __version__, commands
from .config_store import ConfigStore
from .errors import ConfigError
from .models import CmdResult
from .prompts import ConsolePrompt, PromptSource
from .settings import cmd_timeout, config_path
from .utils_run import run_cmd

logger = logging.getLogger(__name__)

EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2

app = typer.Typer(
    name="comphost",
    help="Clone, start and stop a set of docker compose projects together.",
    no_args_is_help=True,
    add_completion=False,
)

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


@dataclass
class AppState:
    """Per-invocation settings, carried on ctx.obj to every command."""

    prompt: PromptSource = field(default_factory=ConsolePrompt)
    config: Path | None = None
    timeout_s: float | None = None

    def run(self, cmd: list[str], cwd: Path | None = None) -> CmdResult:
        return run_cmd(cmd, cwd=cwd, timeout_s=self.timeout_s)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"comphost {__version__}")
        raise typer.Exit()


def _fatal(e: ConfigError) -> typer.Exit:
    err_console.print(f"[red]Error:[/red] {escape(str(e))}")
    return typer.Exit(code=EXIT_CONFIG_ERROR)


@app.callback()
def main(
    ctx: typer.Context,
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to the config file (default: $COMPHOST_CONFIG or ~/.config/comphost/config.toml)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log external commands to stderr"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s - %(levelname)s - %(message)s",
    )
    # ctx.obj may already be set by the caller (CliRunner.invoke(obj=...))
    state = ctx.ensure_object(AppState)
    if config is not None:
        state.config = config
    try:
        state.timeout_s = cmd_timeout()
    except ConfigError as e:
        raise _fatal(e) from None


def _open_store(ctx: typer.Context) -> ConfigStore:
    try:
        return ConfigStore.open(config_path(ctx.obj.config))
    except ConfigError as e:
        raise _fatal(e) from None


def _run(
    ctx: typer.Context,
    op: Callable[[ConfigStore, commands.Report], None],
    store: ConfigStore | None = None,
) -> None:
    if store is None:
        store = _open_store(ctx)
    report = commands.Report(out=console, err=err_console)

    op(store, report)

    try:
        store.save()
    except ConfigError as e:
        raise _fatal(e) from None

    if not report.ok:
        logger.debug("%d item(s) failed", report.failures)
        raise typer.Exit(code=EXIT_ERROR)


@app.command(name="add")
def add_command(
    ctx: typer.Context,
    names: list[str] | None = typer.Argument(None, metavar="NAME...", help="Configurations to add"),
) -> None:
    """Add new configurations, prompting for a URL for each."""
    store = _open_store(ctx)
    urls = commands.collect_urls(names or [], ctx.obj.prompt)
    _run(ctx, lambda store, report: commands.add(store, urls, report), store=store)


@app.command(name="on")
def on_command(
    ctx: typer.Context,
    names: list[str] | None = typer.Argument(None, metavar="NAME...", help="Configurations to turn on"),
) -> None:
    """Turn on configurations."""
    _run(ctx, lambda store, report: commands.set_active(store, names or [], True, report))


@app.command(name="off")
def off_command(
    ctx: typer.Context,
    names: list[str] | None = typer.Argument(None, metavar="NAME...", help="Configurations to turn off"),
) -> None:
    """Turn off configurations."""
    _run(ctx, lambda store, report: commands.set_active(store, names or [], False, report))


@app.command(name="clone")
def clone_command(
    ctx: typer.Context,
    dest: str | None = typer.Option(None, "--dest", "-d", help="Directory to clone into (prompted if omitted)"),
) -> None:
    """Clone active configurations."""
    store = _open_store(ctx)
    if dest is None:
        dest = commands.collect_clone_dir(ctx.obj.prompt)
    _run(ctx, lambda store, report: commands.clone(store, dest, report, run=ctx.obj.run), store=store)


@app.command(name="start")
def start_command(ctx: typer.Context) -> None:
    """Start Docker Compose for active configurations."""
    _run(ctx, lambda store, report: commands.start(store, report, run=ctx.obj.run))


@app.command(name="stop")
def stop_command(ctx: typer.Context) -> None:
    """Stop Docker Compose for active configurations."""
    _run(ctx, lambda store, report: commands.stop(store, report, run=ctx.obj.run))


@app.command(name="list-names")
def list_names_command(ctx: typer.Context) -> None:
    """List configuration names for shell completion."""

    def op(store: ConfigStore, report: commands.Report) -> None:
        for name in commands.list_names(store):
            typer.echo(name)

    _run(ctx, op)


@app.command(name="list")
def list_command(ctx: typer.Context) -> None:
    """Show all configurations as a table."""
    _run(ctx, lambda store, report: console.print(commands.describe(store)))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
