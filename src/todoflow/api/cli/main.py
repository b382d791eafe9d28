"""todoflow CLI entry point."""

import logging
import sys
from pathlib import Path
from typing import Any

import structlog
import typer
from rich.console import Console

from todoflow.api.cli.commands import config, todos
from todoflow.api.cli.output_formatter import TodoConsole
from todoflow.application.settings import load_settings
from todoflow.core.domain.errors import ConfigError

app = typer.Typer(
    name="todoflow",
    help="todoflow - a single-list task manager",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()

# Register commands
app.command("list")(todos.list_todos)
app.command("add")(todos.add)
app.command("toggle")(todos.toggle)
app.command("toggle-all")(todos.toggle_all)
app.command("edit")(todos.edit)
app.command("destroy")(todos.destroy)
app.command("clear-completed")(todos.clear_completed)
app.add_typer(config.app, name="config", help="Configuration")


def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    return structlog.PrintLogger(sys.stderr)


def configure_logging(level: int) -> None:
    """Configure logging at ``level``; log lines go to stderr, output to stdout."""
    logging.basicConfig(level=level, format="%(message)s")
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=_stderr_logger,
    )


@app.callback()
def main(
    ctx: typer.Context,
    work_dir: Path | None = typer.Option(
        None, "--work-dir", "-w", help="Directory holding the snapshot file"
    ),
    storage_key: str | None = typer.Option(
        None, "--storage-key", "-k", help="Snapshot name inside the work dir"
    ),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="YAML settings file"
    ),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging"),
):
    """todoflow CLI."""
    try:
        settings = load_settings(
            config_path,
            overrides={"work_dir": work_dir, "storage_key": storage_key},
        )
    except ConfigError as exc:
        TodoConsole().print_error(exc.message)
        raise typer.Exit(1) from exc

    configure_logging(logging.DEBUG if debug else settings.log_level_number)

    # Store global options in context for subcommands
    ctx.obj = {"settings": settings, "debug": debug}


@app.command()
def version():
    """Show todoflow version."""
    from todoflow import __version__

    console.print(f"[bold blue]Version:[/bold blue] [cyan]{__version__}[/cyan]")


if __name__ == "__main__":
    app()
