"""Completion report printed after a project is scaffolded.

The package manager that launched the tool is read from the
``npm_config_user_agent`` string (``"<name>/<version> ..."``) and only
affects which commands are suggested.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from .utils import console as default_console

DEFAULT_PACKAGE_MANAGER = "npm"


@dataclass(frozen=True)
class PackageManagerInfo:
    """Name and version parsed from a user-agent string."""

    name: str
    version: str | None = None


def pkg_from_user_agent(user_agent: str | None) -> PackageManagerInfo | None:
    """Parse the leading ``name/version`` segment of *user_agent*.

    Examples::

        pkg_from_user_agent("pnpm/8.6.0 npm/? node/v18.16.0") -> ("pnpm", "8.6.0")
        pkg_from_user_agent(None) -> None
    """
    if not user_agent or not user_agent.strip():
        return None
    segment = user_agent.split()[0]
    name, _, version = segment.partition("/")
    return PackageManagerInfo(name=name, version=version or None)


def detect_package_manager(
    user_agent: str | None, default: str = DEFAULT_PACKAGE_MANAGER
) -> str:
    """Return the package manager name, falling back to *default*."""
    info = pkg_from_user_agent(user_agent)
    return info.name if info and info.name else default


def completion_commands(root: Path, cwd: Path, package_manager: str) -> list[str]:
    """Commands the user should run next, in order."""
    commands: list[str] = []
    if Path(root) != Path(cwd):
        commands.append(f"cd {os.path.relpath(root, cwd)}")
    if package_manager == "yarn":
        commands.extend(["yarn", "yarn dev"])
    else:
        commands.extend([f"{package_manager} install", f"{package_manager} run dev"])
    return commands


def print_completion(
    root: Path,
    cwd: Path,
    package_manager: str,
    console: Console | None = None,
) -> list[str]:
    """Print the "Done. Now run:" block and return the commands shown."""
    out = console or default_console
    commands = completion_commands(root, cwd, package_manager)
    out.print("\n[bold green]Done.[/bold green] Now run:\n")
    for command in commands:
        out.print(f"  [bold]{escape(command)}[/bold]", soft_wrap=True)
    out.print()
    return commands
