"""create-starter scaffolder -- turns a packaged template into a project.

Each directory under ``scaffolder/templates/`` is one template, keyed by its
template identifier.  Scaffolding resolves the identifier, prepares the
target directory, copies the tree verbatim and rewrites the manifest name.

Quick usage::

    from create_starter.scaffolder import (
        DirectoryMaterializer,
        TemplateResolver,
        patch_manifest,
    )

    template_dir = TemplateResolver(config.templates_dir).resolve("vue")
    root = DirectoryMaterializer().prepare(config.project_root("my-app"), None)
    DirectoryMaterializer().copy_template(template_dir, root)
    patch_manifest(template_dir, root, "my-app")
"""

from create_starter.scaffolder.manifest import patch_manifest, rename_manifest
from create_starter.scaffolder.materializer import DirectoryMaterializer
from create_starter.scaffolder.resolver import TemplateResolver

__all__ = [
    "DirectoryMaterializer",
    "TemplateResolver",
    "patch_manifest",
    "rename_manifest",
]
