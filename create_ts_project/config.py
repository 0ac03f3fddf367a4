"""create-ts-project configuration.

Typed configuration for a single scaffolding run. Settings use a Pydantic v2
model so they are validated at construction time; the working directory is
captured once here and treated as fixed for the rest of the run.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates" / "ts"


class ScaffoldConfig(BaseModel):
    """Global configuration for one ``create-ts-project`` invocation.

    Instances are created once by the CLI entry point and passed to the
    ``Scaffolder``, which hands the relevant values to each stage.
    """

    default_target_dir: str = Field(
        default="ts-project", min_length=1, description="Target used when none is given"
    )
    template_dir: Path = Field(default=DEFAULT_TEMPLATE_DIR)
    descriptor_name: str = Field(
        default="package.json", min_length=1, description="File whose name field is rewritten"
    )
    vcs_dir: str = Field(default=".git", description="Entry ignored by conflict checks")
    fallback_package_manager: str = Field(default="npm", min_length=1)
    run_script: str = Field(default="dev", min_length=1)
    cwd: Path = Field(default_factory=Path.cwd)

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    def target_path(self, target_dir: str) -> Path:
        """Absolute location of *target_dir*, anchored at the captured cwd."""
        return self.cwd / target_dir

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            CREATE_TS_PROJECT_TEMPLATE_DIR.
        """
        kwargs: dict[str, Path] = {}
        if os.environ.get("CREATE_TS_PROJECT_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["CREATE_TS_PROJECT_TEMPLATE_DIR"])
        return cls(**kwargs)
