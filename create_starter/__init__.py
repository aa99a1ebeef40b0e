"""create-starter: scaffold a new project from a packaged template.

Running ``create-starter [project-name] [--template NAME]`` asks for anything
not given on the command line, copies the matching template tree into a new
directory and renames the project in its ``package.json``.

See ``pipeline.py`` for the entry point.
"""

__all__ = [
    "pipeline",
]
