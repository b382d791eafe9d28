"""Rich output formatting for the todoflow CLI."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from todoflow.core.domain.selectors import (
    active_count,
    all_completed,
    completed_count,
    has_completed,
    items_left_label,
)
from todoflow.core.domain.todo import TodoList

TODOFLOW_THEME = Theme(
    {
        "completed": "dim strike",
        "active": "white",
        "todo_id": "cyan",
        "error": "bold red",
        "warning": "bold yellow",
        "success": "bold green",
        "info": "white",
    }
)

SHORT_ID_LENGTH = 8


class TodoConsole:
    """Console wrapper rendering todo lists and status messages."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(theme=TODOFLOW_THEME)

    def print_todos(self, todos: TodoList) -> None:
        """Print the list followed by the footer line.

        Args:
            todos: Snapshot to render
        """
        if not todos:
            self.console.print("[info]Nothing to do.[/info]")
            return

        table = Table(title="todos", show_lines=False)
        table.add_column("", width=3)
        table.add_column("ID", style="todo_id", no_wrap=True)
        table.add_column("Title")

        for todo in todos:
            style = "completed" if todo.completed else "active"
            table.add_row(
                Text("[x]" if todo.completed else "[ ]"),
                todo.id[:SHORT_ID_LENGTH],
                Text(todo.title, style=style),
            )

        self.console.print(table)
        self.print_footer(todos)

    def print_footer(self, todos: TodoList) -> None:
        footer = items_left_label(active_count(todos))
        if all_completed(todos):
            footer += " - all done"
        if has_completed(todos):
            footer += f" - {completed_count(todos)} completed"
        self.console.print(f"[info]{footer}[/info]")

    def print_error(self, message: str) -> None:
        self.console.print(f"[error][X] {escape(message)}[/error]")

    def print_warning(self, message: str) -> None:
        self.console.print(f"[warning][!] {escape(message)}[/warning]")

    def print_success(self, message: str) -> None:
        self.console.print(f"[success][OK] {escape(message)}[/success]")
