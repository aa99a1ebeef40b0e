"""Package manifest rewriting.

The manifest is the only file whose content changes during scaffolding: its
``name`` field is replaced by the project name and every other field is kept
as the template has it, in the same order.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..utils import load_json, save_json


def rename_manifest(manifest: dict[str, Any], project_name: str) -> dict[str, Any]:
    """Return a copy of *manifest* whose ``name`` is *project_name*.

    Key order is preserved; a missing ``name`` is appended at the end.
    """
    patched = dict(manifest)
    patched["name"] = project_name
    return patched


def patch_manifest(
    template_dir: str | Path,
    root: str | Path,
    project_name: str,
    manifest_name: str = "package.json",
) -> Path:
    """Write the template's manifest into *root* with the new project name.

    Args:
        template_dir: Template directory holding the source manifest.
        root: Project directory that receives the patched manifest.
        project_name: Value for the ``name`` field.
        manifest_name: File name of the manifest in both directories.

    Returns:
        Path of the written manifest.
    """
    manifest = load_json(Path(template_dir) / manifest_name)
    return save_json(rename_manifest(manifest, project_name), Path(root) / manifest_name)
