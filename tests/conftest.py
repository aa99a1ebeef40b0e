"""Shared pytest fixtures for the create-starter test suite.

Provides reusable fixtures for:
- A throwaway templates root with a text, binary and nested template
- ScaffoldConfig instances rooted in tmp_path
- A recording Rich console and scripted prompt input
"""

from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Any, Callable

import pytest
from rich.console import Console

from create_starter.config import ScaffoldConfig


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

SAMPLE_MANIFEST: dict[str, Any] = {
    "name": "sample-template",
    "private": True,
    "version": "0.0.0",
    "type": "module",
    "scripts": {"dev": "vite", "build": "vite build"},
    "dependencies": {"vue": "^3.4.21"},
    "description": "Démo ✓",
}

SAMPLE_BINARY = bytes(range(256)) + b"\x00\xff\r\n"


@pytest.fixture
def templates_root(tmp_path: Path) -> Path:
    """A templates root holding a single ``sample`` template.

    The template mixes text, binary, hidden and nested files so copy tests
    can check structure and bytes in one go.
    """
    root = tmp_path / "templates"
    sample = root / "sample"
    files: dict[str, bytes] = {
        "index.html": b"<!doctype html>\n<div id=\"app\"></div>\n",
        ".gitignore": b"node_modules\ndist\n",
        "public/favicon.ico": SAMPLE_BINARY,
        "src/main.js": b"import { createApp } from 'vue'\r\n",
        "src/components/Hello.vue": b"<template>{{ msg }}</template>\n",
        "src/empty.txt": b"",
    }
    for rel_path, content in files.items():
        file_path = sample / rel_path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_bytes(content)
    (sample / "package.json").write_text(
        json.dumps(SAMPLE_MANIFEST, indent=2), encoding="utf-8"
    )
    return root


@pytest.fixture
def sample_template(templates_root: Path) -> Path:
    return templates_root / "sample"


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Working directory projects are created in."""
    cwd = tmp_path / "work"
    cwd.mkdir()
    return cwd


@pytest.fixture
def make_config(workdir: Path, templates_root: Path) -> Callable[..., ScaffoldConfig]:
    """Factory for configs rooted at ``workdir`` using the sample templates."""

    def factory(**overrides: Any) -> ScaffoldConfig:
        values: dict[str, Any] = {"cwd": workdir, "templates_dir": templates_root}
        values.update(overrides)
        return ScaffoldConfig(**values)

    return factory


# ---------------------------------------------------------------------------
# Console & input
# ---------------------------------------------------------------------------

@pytest.fixture
def recording_console() -> Console:
    """A wide, colourless console writing to an in-memory buffer."""
    return Console(file=io.StringIO(), width=240, color_system=None, force_terminal=False)


def console_output(console: Console) -> str:
    return console.file.getvalue()


def answers_stream(*lines: str) -> io.StringIO:
    """Build an input stream that feeds one prompt answer per line."""
    return io.StringIO("".join(f"{line}\n" for line in lines))
