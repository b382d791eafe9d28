"""Todo commands - parse arguments into actions and render the result."""

import asyncio
from collections.abc import Callable

import typer

from todoflow.api.cli.output_formatter import TodoConsole
from todoflow.application.factory import create_store
from todoflow.application.settings import TodoflowSettings
from todoflow.core.domain import actions
from todoflow.core.domain.actions import Action
from todoflow.core.domain.errors import TodoflowError
from todoflow.core.domain.todo import TodoList, find_todo, normalize_title

console = TodoConsole()

ActionBuilder = Callable[[TodoList], Action | None]


class TodoLookupError(LookupError):
    """Raised when an id argument matches no todo or several."""


def resolve_todo_id(todos: TodoList, ref: str) -> str:
    """
    Resolve a full id or a unique id prefix to a todo id.

    Args:
        todos: Current snapshot
        ref: Id or prefix typed by the user

    Returns:
        The matching todo id

    Raises:
        TodoLookupError: If nothing or more than one todo matches
    """
    ref = ref.strip()
    if not ref:
        raise TodoLookupError("Todo id must not be empty")
    if find_todo(todos, ref) is not None:
        return ref
    matches = [todo.id for todo in todos if todo.id.startswith(ref)]
    if not matches:
        raise TodoLookupError(f"No todo matches id '{ref}'")
    if len(matches) > 1:
        raise TodoLookupError(f"Id prefix '{ref}' is ambiguous ({len(matches)} matches)")
    return matches[0]


def _settings(ctx: typer.Context) -> TodoflowSettings:
    global_opts = ctx.obj or {}
    settings = global_opts.get("settings")
    return settings if settings is not None else TodoflowSettings()


def run_action(ctx: typer.Context, build_action: ActionBuilder) -> TodoList:
    """Open the store, dispatch the built action (if any), flush and close."""
    settings = _settings(ctx)

    async def _run() -> TodoList:
        async with create_store(settings) as store:
            action = build_action(store.state)
            if action is not None:
                store.dispatch(action)
            return store.state

    try:
        return asyncio.run(_run())
    except TodoLookupError as exc:
        console.print_error(str(exc))
        raise typer.Exit(1) from exc
    except TodoflowError as exc:
        console.print_error(exc.message)
        raise typer.Exit(1) from exc


def _title_argument(words: list[str]) -> str:
    return normalize_title(" ".join(words))


def list_todos(ctx: typer.Context):
    """Show all todos."""
    todos = run_action(ctx, lambda todos: None)
    console.print_todos(todos)


def add(
    ctx: typer.Context,
    title: list[str] = typer.Argument(..., help="Todo text"),
):
    """Add a todo to the end of the list."""
    text = _title_argument(title)
    if not text:
        console.print_warning("Nothing to add: title is empty")
        raise typer.Exit(1)
    todos = run_action(ctx, lambda todos: actions.add_todo(text))
    console.print_success(f"Added '{text}'")
    console.print_todos(todos)


def toggle(
    ctx: typer.Context,
    todo_id: str = typer.Argument(..., help="Todo id or unique id prefix"),
):
    """Toggle a todo between active and completed."""
    todos = run_action(
        ctx, lambda todos: actions.toggle_completed(resolve_todo_id(todos, todo_id))
    )
    console.print_todos(todos)


def toggle_all(ctx: typer.Context):
    """Mark every todo completed, or all active if they already are."""
    todos = run_action(ctx, lambda todos: actions.toggle_all())
    console.print_todos(todos)


def edit(
    ctx: typer.Context,
    todo_id: str = typer.Argument(..., help="Todo id or unique id prefix"),
    title: list[str] = typer.Argument(None, help="New text; empty text deletes the todo"),
):
    """Change a todo's text. Editing the text away deletes the todo."""
    text = _title_argument(title or [])
    todos = run_action(
        ctx, lambda todos: actions.edit_todo(resolve_todo_id(todos, todo_id), text)
    )
    if not text:
        console.print_success("Deleted todo with empty text")
    console.print_todos(todos)


def destroy(
    ctx: typer.Context,
    todo_id: str = typer.Argument(..., help="Todo id or unique id prefix"),
):
    """Delete a todo."""
    todos = run_action(ctx, lambda todos: actions.destroy(resolve_todo_id(todos, todo_id)))
    console.print_todos(todos)


def clear_completed(ctx: typer.Context):
    """Delete every completed todo."""
    todos = run_action(ctx, lambda todos: actions.destroy_completed())
    console.print_todos(todos)
