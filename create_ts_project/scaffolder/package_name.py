"""Validation and derivation of the generated ``package.json`` name."""

from __future__ import annotations

import re
from collections.abc import Callable

from create_ts_project.prompts import Cancelled, is_cancel

# Optional ``@scope/`` prefix, then the name.  Neither segment may start with
# ``.`` or ``_``.
_PACKAGE_NAME = re.compile(r"(?:@[a-z0-9\-~][a-z0-9\-._~]*/)?[a-z0-9\-~][a-z0-9\-._~]*")

_WHITESPACE = re.compile(r"\s+")
_LEADING_DOT_OR_UNDERSCORE = re.compile(r"^[._]")
_DISALLOWED = re.compile(r"[^a-z0-9\-~]+")

AskName = Callable[[str], str | Cancelled]


def is_valid_package_name(name: str) -> bool:
    """Return ``True`` if *name* is an acceptable npm package name."""
    return _PACKAGE_NAME.fullmatch(name) is not None


def to_valid_package_name(name: str) -> str:
    """Derive a package name suggestion from an arbitrary directory name.

    Examples::

        to_valid_package_name("My App!")  -> "my-app-"
        to_valid_package_name(".Hidden")  -> "hidden"
    """
    suggestion = name.strip().lower()
    suggestion = _WHITESPACE.sub("-", suggestion)
    suggestion = _LEADING_DOT_OR_UNDERSCORE.sub("", suggestion)
    return _DISALLOWED.sub("-", suggestion)


def resolve_package_name(candidate: str, ask: AskName) -> str | Cancelled:
    """Return *candidate* if valid, otherwise ask for a corrected name.

    Args:
        candidate: Usually the basename of the target directory.
        ask: Called with the derived suggestion as its default; must return a
            valid name or ``CANCELLED``.

    Raises:
        ValueError: If *ask* returns a name that is still invalid.
    """
    if is_valid_package_name(candidate):
        return candidate

    answer = ask(to_valid_package_name(candidate))
    if is_cancel(answer):
        return answer
    if not is_valid_package_name(answer):
        raise ValueError(f"Invalid package.json name: {answer!r}")
    return answer
