"""create-ts-project orchestrator and CLI entry point.

Runs the scaffolding stages in order:

1. Resolve the target directory (argument or ``Project name:`` prompt).
2. Classify the directory and reconcile any existing files.
3. Resolve the ``package.json`` name.
4. Materialize the template.
5. Print the next steps.

A cancelled prompt at any stage stops the run; nothing after it executes.

Usage::

    create-ts-project my-app
    create-ts-project --overwrite my-app
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from create_ts_project.config import ScaffoldConfig
from create_ts_project.prompts import CANCELLED, Cancelled, cancel, is_cancel, select, text
from create_ts_project.scaffolder.advisor import (
    completion_steps,
    detect_user_agent,
    format_completion_message,
)
from create_ts_project.scaffolder.directory import Choice, Outcome, classify, reconcile
from create_ts_project.scaffolder.materializer import MaterializedProject, TemplateMaterializer
from create_ts_project.scaffolder.package_name import is_valid_package_name, resolve_package_name
from create_ts_project.scaffolder.paths import normalize_target_dir
from create_ts_project.utils import print_error, print_panel, print_step

CONFLICT_OPTIONS: list[tuple[str, Choice]] = [
    ("Cancel operation", Choice.CANCEL),
    ("Remove existing files and continue", Choice.CLEAR),
    ("Ignore files and continue", Choice.IGNORE),
]


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------


class Scaffolder:
    """Drives one scaffolding run.

    Attributes:
        config: Run configuration, including the captured working directory.
        user_agent: The invoking package manager's user-agent string, used
            only for the closing instructions.
        materializer: Copies the template tree into the target.
    """

    def __init__(self, config: ScaffoldConfig, user_agent: str | None = None) -> None:
        self.config = config
        self.user_agent = user_agent
        self.materializer = TemplateMaterializer(
            config.template_dir, descriptor_name=config.descriptor_name
        )

    async def run(
        self, target_dir: str | None = None, overwrite: bool = False
    ) -> MaterializedProject | Cancelled:
        """Scaffold a project.

        Args:
            target_dir: Target directory from the command line.  Empty or
                ``None`` asks for a project name instead.
            overwrite: Clear a non-empty target without asking.

        Returns:
            The materialized project, or ``CANCELLED`` if the user backed out
            of any prompt.
        """
        resolved = self.resolve_target_dir(target_dir)
        if is_cancel(resolved):
            return CANCELLED

        root = self.config.target_path(resolved)
        state = await asyncio.to_thread(classify, root, vcs_dir=self.config.vcs_dir)

        # The conflict prompt stays on this thread so Ctrl-C reaches it;
        # reconcile then clears, if asked to, in a worker thread.
        choice: Choice | Cancelled | None = None
        if state.has_conflict and not overwrite:
            choice = self._choose_conflict_action(resolved, root)
        outcome = await asyncio.to_thread(
            reconcile,
            root,
            state,
            force_overwrite=overwrite,
            chooser=lambda: choice,
            vcs_dir=self.config.vcs_dir,
        )
        if outcome is Outcome.ABORTED:
            return CANCELLED

        package_name = resolve_package_name(root.resolve().name, self._ask_package_name)
        if is_cancel(package_name):
            return CANCELLED

        print_step(f"Creating project in {root}...")
        project = await self.materializer.materialize(root, package_name)

        steps = completion_steps(
            root,
            self.config.cwd,
            self.user_agent,
            script=self.config.run_script,
            fallback=self.config.fallback_package_manager,
        )
        print_panel(format_completion_message(steps), title="create-ts-project")
        return project

    # ------------------------------------------------------------------
    # Prompts
    # ------------------------------------------------------------------

    def resolve_target_dir(self, target_dir: str | None) -> str | Cancelled:
        """Return the normalized target, asking for a project name if needed."""
        if target_dir:
            normalized = normalize_target_dir(target_dir)
            if normalized:
                return normalized

        answer = text(
            "Project name:",
            default=self.config.default_target_dir,
            validate=_validate_project_name,
        )
        if is_cancel(answer):
            return CANCELLED
        return normalize_target_dir(answer) or self.config.default_target_dir

    def _choose_conflict_action(self, target_dir: str, root: Path) -> Choice | Cancelled:
        if root.resolve() == self.config.cwd.resolve():
            subject = "Current directory"
        else:
            subject = f'Target directory "{target_dir}"'
        return select(f"{subject} is not empty. Choose how to proceed:", CONFLICT_OPTIONS)

    def _ask_package_name(self, suggestion: str) -> str | Cancelled:
        return text("Package name:", default=suggestion, validate=_validate_package_name)


def _validate_project_name(value: str) -> str | None:
    if not value or normalize_target_dir(value):
        return None
    return "Invalid project name"


def _validate_package_name(value: str) -> str | None:
    return None if is_valid_package_name(value) else "Invalid package.json name"


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-ts-project",
        description=(
            "Create a new TypeScript project.\n"
            "With no arguments, start the CLI in interactive mode."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-ts-project\n"
            "  create-ts-project my-app\n"
            "  create-ts-project --overwrite my-app\n"
        ),
    )
    parser.add_argument(
        "target_dir",
        nargs="?",
        default=None,
        metavar="target-directory",
        help="Where to create the project (default: ./ts-project). "
        "If omitted, the wizard will ask for the name.",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Delete existing files in the target directory",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``create-ts-project``."""
    args = build_parser().parse_args(argv)

    try:
        config = ScaffoldConfig.from_env()
        scaffolder = Scaffolder(config, user_agent=detect_user_agent())
        result = asyncio.run(scaffolder.run(args.target_dir, overwrite=args.overwrite))
    except KeyboardInterrupt:
        result = CANCELLED
    except Exception as exc:
        print_error(f"Error: {str(exc) or type(exc).__name__}")
        sys.exit(1)

    if is_cancel(result):
        cancel()
        sys.exit(1)


if __name__ == "__main__":
    main()
