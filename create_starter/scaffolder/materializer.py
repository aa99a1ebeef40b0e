"""Target directory preparation and template copying.

The materializer first puts the target directory into a known state (emptied,
created, or rejected) and only then copies the template tree into it.  Files
are copied byte for byte; the manifest is left out so the manifest patcher
can write its own version.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from ..errors import OperationCancelled
from ..utils import ensure_dir, is_empty_dir


class DirectoryMaterializer:
    """Creates or empties a project directory and fills it from a template.

    Args:
        vcs_dir: Name of the version-control metadata directory that
            survives an overwrite.
    """

    def __init__(self, vcs_dir: str = ".git") -> None:
        self.vcs_dir = vcs_dir

    # -- Public API --------------------------------------------------------

    def prepare(self, root: str | Path, overwrite: bool | None) -> Path:
        """Bring *root* into a state where the template can be copied into it.

        * ``overwrite`` true: remove everything except the VCS directory.
        * *root* missing: create it, parents included.
        * *root* non-empty without confirmation: raise.

        Raises:
            OperationCancelled: If *root* holds files and *overwrite* is not
                ``True``.
        """
        root = Path(root)
        if overwrite:
            self.empty_dir(root)
        elif not is_empty_dir(root):
            raise OperationCancelled("✖ Operation cancelled")
        if not root.exists():
            ensure_dir(root)
        return root

    def empty_dir(self, directory: str | Path) -> None:
        """Delete every entry in *directory* except the VCS directory."""
        directory = Path(directory)
        if not directory.exists():
            return
        for entry in directory.iterdir():
            if entry.name == self.vcs_dir:
                continue
            if entry.is_dir() and not entry.is_symlink():
                shutil.rmtree(entry)
            else:
                entry.unlink()

    def copy_template(
        self,
        template_dir: str | Path,
        root: str | Path,
        *,
        exclude: tuple[str, ...] = ("package.json",),
    ) -> list[Path]:
        """Copy every top-level entry of *template_dir* into *root*.

        Top-level names in *exclude* are skipped.

        Returns:
            Every file written, in copy order.
        """
        template_dir = Path(template_dir)
        root = Path(root)
        written: list[Path] = []
        for entry in sorted(template_dir.iterdir()):
            if entry.name in exclude:
                continue
            written.extend(self.copy(entry, root / entry.name))
        return written

    def copy(self, src: str | Path, dest: str | Path) -> list[Path]:
        """Copy a file or a directory tree from *src* to *dest*."""
        src = Path(src)
        dest = Path(dest)
        if src.is_dir():
            return self.copy_dir(src, dest)
        shutil.copyfile(src, dest)
        return [dest]

    def copy_dir(self, src_dir: str | Path, dest_dir: str | Path) -> list[Path]:
        """Recursively copy *src_dir* into *dest_dir*, creating it if needed."""
        src_dir = Path(src_dir)
        dest_dir = Path(dest_dir)
        dest_dir.mkdir(parents=True, exist_ok=True)
        written: list[Path] = []
        for entry in sorted(src_dir.iterdir()):
            written.extend(self.copy(entry, dest_dir / entry.name))
        return written
