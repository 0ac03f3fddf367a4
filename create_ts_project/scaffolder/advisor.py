"""Post-scaffold instructions.

Works out which package manager launched the CLI (from the user-agent string
npm, pnpm, yarn and bun export as ``npm_config_user_agent``) and spells the
"cd, install, run" steps in that manager's dialect.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import NamedTuple

USER_AGENT_ENV = "npm_config_user_agent"
DEFAULT_PACKAGE_MANAGER = "npm"


class AgentInfo(NamedTuple):
    name: str
    version: str | None


def detect_user_agent(environ: Mapping[str, str] | None = None) -> str | None:
    """Return the invoking package manager's user-agent string, if any."""
    env = os.environ if environ is None else environ
    return env.get(USER_AGENT_ENV) or None


def parse_user_agent(user_agent: str | None) -> AgentInfo | None:
    """Extract ``name/version`` from the first token of *user_agent*.

    Examples::

        parse_user_agent("pnpm/9.1.0 npm/? node/v20.11.0 linux x64")
            -> AgentInfo(name="pnpm", version="9.1.0")
        parse_user_agent(None) -> None
    """
    if not user_agent or not user_agent.strip():
        return None
    token = user_agent.split()[0]
    name, _, version = token.partition("/")
    if not name:
        return None
    return AgentInfo(name=name, version=version or None)


def resolve_package_manager(
    user_agent: str | None, fallback: str = DEFAULT_PACKAGE_MANAGER
) -> str:
    info = parse_user_agent(user_agent)
    return info.name if info else fallback


def completion_steps(
    root: str | Path,
    cwd: str | Path,
    user_agent: str | None,
    script: str = "dev",
    fallback: str = DEFAULT_PACKAGE_MANAGER,
) -> list[str]:
    """Build the shell commands the user should run next.

    Args:
        root: The generated project directory.
        cwd: Working directory the CLI was started from.
        user_agent: Value of ``npm_config_user_agent``, if set.
        script: ``package.json`` script to start.
        fallback: Manager assumed when *user_agent* says nothing useful.

    Returns:
        An optional ``cd`` step followed by an install and a run step.
    """
    steps: list[str] = []

    root_path, cwd_path = Path(root), Path(cwd)
    if root_path.resolve() != cwd_path.resolve():
        relative = os.path.relpath(root_path, cwd_path)
        if any(char.isspace() for char in relative):
            relative = f'"{relative}"'
        steps.append(f"cd {relative}")

    manager = resolve_package_manager(user_agent, fallback=fallback)
    if manager == "yarn":
        steps.extend(["yarn", f"yarn {script}"])
    else:
        steps.extend([f"{manager} install", f"{manager} run {script}"])
    return steps


def format_completion_message(steps: list[str]) -> str:
    """Render *steps* as the closing "Done. Now run:" message."""
    lines = ["Done. Now run:", ""]
    lines.extend(f"  {step}" for step in steps)
    return "\n".join(lines)
