"""Shared utility functions for create-starter.

Provides the Rich console used for every line of user-facing output, JSON
I/O for package manifests, and the small file-system predicates the
materializer and prompter share.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from rich.console import Console

console = Console()

# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> dict[str, Any]:
    """Load and parse a JSON file whose top level is an object.

    Args:
        path: Path to the JSON file.

    Returns:
        Parsed dictionary, keys in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the top-level value is not an object.
    """
    file_path = Path(path)
    raw = file_path.read_text(encoding="utf-8")
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError(f"{file_path} does not contain a JSON object")
    return data


def dump_json(data: dict[str, Any] | list[Any]) -> str:
    """Serialise *data* the way package managers print manifests (2-space indent)."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> Path:
    """Save data as pretty-printed JSON.

    Parent directories are created automatically.

    Args:
        data: Serialisable data (dict or list).
        path: Destination file path.

    Returns:
        The path that was written.
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(dump_json(data), encoding="utf-8")
    return file_path


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Args:
        path: Directory path.

    Returns:
        The resolved ``Path`` object.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path.resolve()


def is_empty_dir(path: str | Path) -> bool:
    """Return ``True`` if *path* is missing or is a directory with no entries."""
    dir_path = Path(path)
    if not dir_path.exists():
        return True
    if not dir_path.is_dir():
        return False
    return next(dir_path.iterdir(), None) is None


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_error(message: str, out: Console | None = None) -> None:
    """Print a red error message. *message* may contain Rich markup."""
    (out or console).print(f"[bold red]{message}[/bold red]", soft_wrap=True)
