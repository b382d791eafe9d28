"""Config command - inspect effective settings."""

import typer
from rich.console import Console

from todoflow.application.settings import TodoflowSettings

app = typer.Typer(help="Configuration")
console = Console()


@app.command("show")
def show_config(ctx: typer.Context):
    """Show the effective settings after merging file, env and options."""
    global_opts = ctx.obj or {}
    settings = global_opts.get("settings") or TodoflowSettings()
    console.print_json(data=settings.model_dump(mode="json"))
