"""Shared pytest fixtures for the create-ts-project test suite.

Provides reusable fixtures for:
- A small on-disk template tree
- A working directory for scaffolding runs
- A ``ScaffoldConfig`` wired to both
- Scripted answers for the interactive prompts
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from create_ts_project.config import ScaffoldConfig


# ---------------------------------------------------------------------------
# Template tree
# ---------------------------------------------------------------------------

TEMPLATE_FILES: dict[str, bytes] = {
    "index.ts": b"export const answer = 42;\n",
    "src/main.ts": b"import { answer } from '../index.js';\nconsole.log(answer);\n",
    "src/nested/deep.txt": b"deep\r\nwith CRLF and \xff raw byte\n",
    "src/nested/package.json": b'{"name": "nested-untouched"}',
}


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """A template tree with a root ``package.json`` and nested files."""
    root = tmp_path / "template"
    for relative, content in TEMPLATE_FILES.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
    (root / "package.json").write_text(
        json.dumps({"name": "template", "version": "0.0.0", "private": True}),
        encoding="utf-8",
    )
    return root


# ---------------------------------------------------------------------------
# Working directory & config
# ---------------------------------------------------------------------------


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Directory playing the role of the CLI's working directory."""
    cwd = tmp_path / "workspace"
    cwd.mkdir()
    return cwd


@pytest.fixture
def config(template_dir: Path, workspace: Path) -> ScaffoldConfig:
    return ScaffoldConfig(template_dir=template_dir, cwd=workspace)


# ---------------------------------------------------------------------------
# Prompt scripting
# ---------------------------------------------------------------------------


class PromptScript:
    """Scripted stand-in for ``rich.prompt.Prompt.ask``.

    Answers are consumed in order.  An empty string answers with the
    prompt's default; an exception class (e.g. ``KeyboardInterrupt``) is
    raised to simulate a cancelled prompt.
    """

    def __init__(self) -> None:
        self.answers: list[Any] = []
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def push(self, *answers: Any) -> None:
        self.answers.extend(answers)

    def __call__(self, message: str, **kwargs: Any) -> str:
        self.calls.append((message, kwargs))
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {message!r}")
        answer = self.answers.pop(0)
        if isinstance(answer, type) and issubclass(answer, BaseException):
            raise answer()
        if answer == "" and "default" in kwargs:
            return kwargs["default"]
        return answer

    @property
    def messages(self) -> list[str]:
        return [message for message, _ in self.calls]


@pytest.fixture
def prompt_script() -> Iterator[PromptScript]:
    """Patch every interactive prompt with a ``PromptScript``."""
    script = PromptScript()
    with patch("create_ts_project.prompts.Prompt.ask", side_effect=script):
        yield script
