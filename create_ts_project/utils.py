"""Shared console helpers for create-ts-project.

All user-facing output goes through the Rich consoles defined here: ``console``
for regular progress and ``err_console`` for failures, which is bound to
stderr.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

console = Console()
err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_step(message: str) -> None:
    """Print a progress step, prefixed with a cyan marker."""
    console.print(f"[cyan]>[/cyan] {escape(message)}")


def print_error(message: str) -> None:
    """Print a red error message on stderr."""
    err_console.print(f"[bold red]{escape(message)}[/bold red]")


def print_panel(body: str, title: str | None = None, style: str = "green") -> None:
    """Print *body* inside a bordered panel.

    The body is rendered as plain text so paths containing square brackets
    are shown verbatim.
    """
    console.print(
        Panel(
            Text(body),
            title=f"[bold]{title}[/bold]" if title else None,
            border_style=style,
            expand=False,
        )
    )
