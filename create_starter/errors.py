"""Error kinds raised by the scaffolding flow."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every error create-starter raises itself."""


class OperationCancelled(ScaffoldError):
    """Raised when the user declines to overwrite a non-empty directory."""

    def __init__(self, message: str = "Operation cancelled") -> None:
        super().__init__(message)


class TemplateNotFoundError(ScaffoldError):
    """Raised when a template identifier does not map to a packaged template."""

    def __init__(self, template: str | None, path: Path | None = None) -> None:
        self.template = template
        self.path = path
        if template is None:
            message = "No template selected"
        elif path is None:
            message = f"Unknown template: {template}"
        else:
            message = f"Template '{template}' not found at {path}"
        super().__init__(message)
