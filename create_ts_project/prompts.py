"""Interactive prompts built on ``rich.prompt``.

Every prompt is a blocking call that returns either the user's answer or the
``CANCELLED`` marker.  Ctrl-C and end-of-input during a prompt are turned into
that marker here, so callers check ``is_cancel`` at each call site instead of
catching exceptions.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from rich.markup import escape
from rich.prompt import Prompt

from create_ts_project.utils import console

T = TypeVar("T")

Validator = Callable[[str], str | None]


class Cancelled:
    """Marker type returned by a prompt the user cancelled."""

    def __repr__(self) -> str:
        return "CANCELLED"


CANCELLED = Cancelled()


def is_cancel(value: Any) -> bool:
    """Return ``True`` if *value* is the cancellation marker."""
    return value is CANCELLED


def cancel(message: str = "Operation cancelled") -> None:
    """Print the cancellation notice."""
    console.print(f"[bold red]x[/bold red] {message}")


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------


def text(
    message: str,
    default: str | None = None,
    validate: Validator | None = None,
) -> str | Cancelled:
    """Ask for a line of text until it passes *validate*.

    Args:
        message: The question shown to the user.
        default: Answer used when the user submits an empty line.  It goes
            through *validate* like any typed answer.
        validate: Returns an error message for a rejected value, ``None`` to
            accept it.

    Returns:
        The accepted answer, or ``CANCELLED``.
    """
    kwargs: dict[str, Any] = {"default": default} if default else {}
    while True:
        try:
            value = Prompt.ask(message, console=console, **kwargs)
        except (KeyboardInterrupt, EOFError):
            console.print()
            return CANCELLED

        error = validate(value) if validate is not None else None
        if error is None:
            return value
        console.print(f"[red]{error}[/red]")


def select(message: str, options: Sequence[tuple[str, T]]) -> T | Cancelled:
    """Ask the user to pick one of *options*.

    Options are ``(label, value)`` pairs shown as a numbered list; the first
    one is the default answer.

    Returns:
        The chosen option's value, or ``CANCELLED``.
    """
    if not options:
        raise ValueError("select() needs at least one option")

    console.print(escape(message))
    for index, (label, _value) in enumerate(options, start=1):
        console.print(f"  [cyan]{index}[/cyan]) {label}")

    choices = [str(index) for index in range(1, len(options) + 1)]
    try:
        answer = Prompt.ask("Choice", console=console, choices=choices, default="1")
    except (KeyboardInterrupt, EOFError):
        console.print()
        return CANCELLED
    return options[int(answer) - 1][1]
