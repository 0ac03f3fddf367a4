"""Copies the bundled template tree into a target directory.

Every template entry is mirrored byte for byte, except the root package
descriptor (``package.json``), whose ``name`` field is replaced with the
resolved package name before it is written.
"""

from __future__ import annotations

import asyncio
import json
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class TemplateError(Exception):
    """Raised when the template tree cannot be materialized as shipped."""


class MaterializedProject(BaseModel):
    """The on-disk result of one materialization."""

    root: Path
    package_name: str = Field(..., min_length=1)
    files: list[Path] = Field(
        default_factory=list, description="Every file written, in write order"
    )


class TemplateMaterializer:
    """Mirrors a read-only template tree into a project directory.

    The template is addressed through the ``Traversable`` protocol, so a
    plain ``Path`` and an ``importlib.resources`` tree both work.  Copying is
    depth-first and sequential; a directory is always created before
    anything is written into it.
    """

    def __init__(
        self,
        template_dir: Traversable | str | Path,
        descriptor_name: str = "package.json",
    ) -> None:
        if isinstance(template_dir, str):
            template_dir = Path(template_dir)
        self.template_dir: Traversable = template_dir
        self.descriptor_name = descriptor_name

    # -- Public API --------------------------------------------------------

    async def materialize(self, target: str | Path, package_name: str) -> MaterializedProject:
        """Copy the template into *target* and stamp *package_name*.

        Args:
            target: Project root.  Created, with any missing parents, if it
                does not exist.
            package_name: Value written to the descriptor's ``name`` field.

        Returns:
            A ``MaterializedProject`` listing every file written.

        Raises:
            TemplateError: If the template has no usable descriptor.
            OSError: On any filesystem failure.  Files already written are
                left in place.
        """
        descriptor = self.template_dir / self.descriptor_name
        if not descriptor.is_file():
            raise TemplateError(
                f"Template {self.template_dir} has no {self.descriptor_name}"
            )
        raw = await asyncio.to_thread(descriptor.read_text, encoding="utf-8")
        rendered = render_descriptor(raw, package_name)

        root = Path(target)
        project = MaterializedProject(root=root, package_name=package_name)
        await asyncio.to_thread(root.mkdir, parents=True, exist_ok=True)

        for entry in _sorted_entries(self.template_dir):
            if entry.name == self.descriptor_name:
                continue
            await self._copy(entry, root / entry.name, project)

        dest = root / self.descriptor_name
        await asyncio.to_thread(dest.write_text, rendered, encoding="utf-8")
        project.files.append(dest)
        return project

    # -- Copying -----------------------------------------------------------

    async def _copy(self, src: Traversable, dest: Path, project: MaterializedProject) -> None:
        if src.is_dir():
            await asyncio.to_thread(dest.mkdir, parents=True, exist_ok=True)
            for child in _sorted_entries(src):
                await self._copy(child, dest / child.name, project)
            return

        content = await asyncio.to_thread(src.read_bytes)
        await asyncio.to_thread(dest.write_bytes, content)
        project.files.append(dest)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def render_descriptor(raw: str, package_name: str) -> str:
    """Return *raw* ``package.json`` text with its ``name`` replaced.

    Key order is preserved; the output is indented by two spaces and ends with
    a newline.
    """
    try:
        data: Any = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise TemplateError(f"Template package descriptor is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise TemplateError("Template package descriptor must be a JSON object")

    data["name"] = package_name
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def _sorted_entries(directory: Traversable) -> list[Traversable]:
    return sorted(directory.iterdir(), key=lambda entry: entry.name)
