"""create-ts-project scaffolder -- the stages behind one scaffolding run.

Each stage is a small, independently testable unit:

- ``paths``: normalizes the target directory argument.
- ``directory``: classifies the target and reconciles any conflict.
- ``package_name``: validates or derives the ``package.json`` name.
- ``materializer``: copies the template tree into the target.
- ``advisor``: builds the "Now run:" instructions.

Quick usage::

    from create_ts_project.scaffolder import TemplateMaterializer

    materializer = TemplateMaterializer("/path/to/template")
    project = await materializer.materialize("/tmp/my-app", "my-app")
"""

from create_ts_project.scaffolder.advisor import (
    completion_steps,
    detect_user_agent,
    format_completion_message,
    parse_user_agent,
)
from create_ts_project.scaffolder.directory import (
    Choice,
    DirectoryState,
    Outcome,
    classify,
    clear_directory,
    reconcile,
)
from create_ts_project.scaffolder.materializer import (
    MaterializedProject,
    TemplateError,
    TemplateMaterializer,
)
from create_ts_project.scaffolder.package_name import (
    is_valid_package_name,
    resolve_package_name,
    to_valid_package_name,
)
from create_ts_project.scaffolder.paths import normalize_target_dir

__all__ = [
    "Choice",
    "DirectoryState",
    "MaterializedProject",
    "Outcome",
    "TemplateError",
    "TemplateMaterializer",
    "classify",
    "clear_directory",
    "completion_steps",
    "detect_user_agent",
    "format_completion_message",
    "is_valid_package_name",
    "normalize_target_dir",
    "parse_user_agent",
    "reconcile",
    "resolve_package_name",
    "to_valid_package_name",
]
