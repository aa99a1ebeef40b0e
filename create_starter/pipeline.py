"""create-starter pipeline.

Runs the scaffolding stages in order, each feeding the next:

1. Prompt   -- collect project name, overwrite confirmation, framework, variant.
2. Resolve  -- pick the template identifier and its directory.
3. Prepare  -- create or empty the target directory.
4. Copy     -- copy every template file except the manifest.
5. Patch    -- write the manifest with the new project name.
6. Report   -- print the next commands for the detected package manager.

Usage::

    create-starter my-app
    create-starter my-app --template vue
    python -m create_starter
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.markup import escape

from create_starter.config import ScaffoldConfig
from create_starter.prompter import ProjectAnswers, Prompter
from create_starter.reporter import detect_package_manager, print_completion
from create_starter.scaffolder import DirectoryMaterializer, TemplateResolver, patch_manifest
from create_starter.utils import console as default_console
from create_starter.utils import print_error

# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


class ScaffoldPipeline:
    """Drives one scaffolding run from prompts to the completion report.

    Attributes:
        config: Working directory, environment and template settings.
        template: Raw ``--template`` value, if any.
        console: Console every stage prints to.
        stream: Input stream for prompts; ``None`` reads stdin.
    """

    def __init__(
        self,
        config: ScaffoldConfig,
        *,
        template: str | None = None,
        console: Console | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self.config = config
        self.template = template
        self.console = console or default_console
        self.stream = stream
        self.resolver = TemplateResolver(config.templates_dir)
        self.materializer = DirectoryMaterializer(vcs_dir=config.vcs_dir)

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def collect(self, project_name: str | None) -> ProjectAnswers:
        prompter = Prompter(
            self.config,
            template=self.template,
            console=self.console,
            stream=self.stream,
        )
        return prompter.collect(project_name)

    def scaffold(self, answers: ProjectAnswers) -> Path:
        """Materialize the project described by *answers* and return its root.

        The template is resolved before the target directory is touched so a
        bad identifier never leaves an empty project folder behind.
        """
        identifier = self.resolver.template_name(answers, self.template)
        template_dir = self.resolver.resolve(identifier)

        root = self.config.project_root(answers.project_name)
        self.materializer.prepare(root, answers.overwrite)

        self.console.print(f"\nScaffolding project in {escape(str(root))}...", soft_wrap=True)
        self.materializer.copy_template(
            template_dir, root, exclude=(self.config.manifest_name,)
        )
        patch_manifest(template_dir, root, answers.project_name, self.config.manifest_name)
        return root

    def report(self, root: Path) -> list[str]:
        manager = detect_package_manager(
            self.config.user_agent, self.config.default_package_manager
        )
        return print_completion(root, self.config.cwd, manager, console=self.console)

    # ------------------------------------------------------------------
    # Main entry point
    # ------------------------------------------------------------------

    def run(self, project_name: str | None = None) -> int:
        """Execute every stage and return the process exit code.

        Any error is printed and turned into exit code 1.  Whatever was
        already written to disk is left in place.
        """
        try:
            answers = self.collect(project_name)
            root = self.scaffold(answers)
            self.report(root)
        except (KeyboardInterrupt, EOFError):
            self.console.print()
            print_error("✖ Operation cancelled", self.console)
            return 1
        except Exception as exc:
            print_error(escape(str(exc) or type(exc).__name__), self.console)
            return 1
        return 0


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-starter",
        description="Scaffold a new project from a packaged template",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-starter\n"
            "  create-starter my-app\n"
            "  create-starter my-app --template vue\n"
        ),
    )
    parser.add_argument(
        "project_name",
        nargs="?",
        default=None,
        metavar="project-name",
        help="Set project name",
    )
    parser.add_argument(
        "--template", "-t",
        default=None,
        metavar="NAME",
        help="Name of the template to use",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``create-starter`` and ``python -m create_starter``."""
    args = build_parser().parse_args(argv)
    config = ScaffoldConfig.from_env()
    pipeline = ScaffoldPipeline(config, template=args.template)
    sys.exit(pipeline.run(args.project_name))


if __name__ == "__main__":
    main()
