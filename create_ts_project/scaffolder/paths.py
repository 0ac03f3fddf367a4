"""Target-directory normalization."""

from __future__ import annotations

import re

_TRAILING_SLASHES = re.compile(r"/+$")
_LEADING_CURRENT_DIR = re.compile(r"^(?:\./+)+")


def normalize_target_dir(raw: str) -> str:
    """Canonicalize a user-supplied target directory.

    Strips surrounding whitespace, trailing slashes and leading ``./``
    segments; the bare ``.`` shorthand becomes the empty string, which callers
    treat as "use the default".  The steps are repeated until nothing changes,
    so the result is a fixed point of this function.

    Examples::

        normalize_target_dir("  my-app/ ")  -> "my-app"
        normalize_target_dir("./my-app")    -> "my-app"
        normalize_target_dir(".")           -> ""
        normalize_target_dir("../my-app")   -> "../my-app"
    """
    previous = None
    value = raw
    while value != previous:
        previous = value
        value = value.strip()
        value = _TRAILING_SLASHES.sub("", value)
        value = _LEADING_CURRENT_DIR.sub("", value)
        if value == ".":
            value = ""
    return value
