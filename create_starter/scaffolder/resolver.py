"""Template lookup.

Maps the user's answers to a template identifier and the identifier to a
directory under the packaged templates root.  There is no fallback search:
an identifier either has a directory or it is an error.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from ..errors import TemplateNotFoundError

if TYPE_CHECKING:
    from ..prompter import ProjectAnswers


class TemplateResolver:
    """Resolves template identifiers against a templates root directory."""

    def __init__(self, templates_dir: str | Path) -> None:
        self.templates_dir = Path(templates_dir)

    @staticmethod
    def template_name(answers: ProjectAnswers, template: str | None = None) -> str:
        """Return the effective template identifier.

        Variant name wins, then the framework name, then the raw
        ``--template`` value.
        """
        if answers.variant:
            return answers.variant
        if answers.framework is not None:
            return answers.framework.name
        if template:
            return template
        raise TemplateNotFoundError(None)

    def resolve(self, identifier: str) -> Path:
        """Return the directory holding template *identifier*.

        Raises:
            TemplateNotFoundError: If the directory does not exist or the
                identifier tries to leave the templates root.
        """
        path = self.templates_dir / identifier
        if not _is_plain_name(identifier) or not path.is_dir():
            raise TemplateNotFoundError(identifier, path)
        return path

    def available(self) -> list[str]:
        """Sorted identifiers of every template directory on disk."""
        if not self.templates_dir.is_dir():
            return []
        return sorted(p.name for p in self.templates_dir.iterdir() if p.is_dir())


def _is_plain_name(identifier: str) -> bool:
    """True for a single path component other than ``.`` and ``..``."""
    return identifier not in ("", ".", "..") and Path(identifier).name == identifier
