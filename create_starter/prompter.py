"""Interactive prompts that collect a :class:`ProjectAnswers`.

The questions are an ordered list of :class:`PromptStep` objects.  Each step
carries a ``when`` predicate over the answers collected so far; steps whose
predicate is false are skipped.  Nothing is written to disk here.

Quick usage::

    prompter = Prompter(ScaffoldConfig.from_env(), template=args.template)
    answers = prompter.collect(args.project_name)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, TextIO

from pydantic import BaseModel, ConfigDict, Field
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from .catalog import FRAMEWORKS, Framework, Variant, list_templates
from .config import ScaffoldConfig
from .errors import OperationCancelled
from .scaffolder.resolver import TemplateResolver
from .utils import console as default_console
from .utils import is_empty_dir

Answers = dict[str, Any]


def _always(answers: Answers) -> bool:
    return True


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class ProjectAnswers(BaseModel):
    """Everything the user chose for this invocation."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., min_length=1)
    overwrite: bool | None = Field(
        default=None, description="None when the target was missing or empty"
    )
    framework: Framework | None = Field(default=None)
    variant: str | None = Field(default=None)


@dataclass(frozen=True)
class PromptStep:
    """A single question.

    Attributes:
        name: Key the answer is stored under.
        ask: Callable that interacts with the user and returns the answer.
        when: Predicate over earlier answers; the step runs only if it is true.
    """

    name: str
    ask: Callable[[Answers], Any]
    when: Callable[[Answers], bool] = _always


# ---------------------------------------------------------------------------
# Prompter
# ---------------------------------------------------------------------------


class Prompter:
    """Asks the scaffolding questions in order and builds ``ProjectAnswers``.

    Args:
        config: Supplies the working directory and default project name.
        template: Raw ``--template`` value, if any.  A known identifier skips
            the framework and variant questions.
        frameworks: Catalog to choose from.
        console: Console used for output; defaults to the shared one.
        stream: Input stream; ``None`` reads from stdin.
    """

    def __init__(
        self,
        config: ScaffoldConfig,
        *,
        template: str | None = None,
        frameworks: tuple[Framework, ...] = FRAMEWORKS,
        console: Console | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self.config = config
        self.template = template
        self.frameworks = frameworks
        # Catalog entries plus whatever the templates root actually holds.
        self.templates = sorted(
            set(list_templates(frameworks))
            | set(TemplateResolver(config.templates_dir).available())
        )
        self.console = console or default_console
        self.stream = stream

    # -- Public API --------------------------------------------------------

    def steps(self) -> list[PromptStep]:
        """Return the questions in the order they are asked."""
        return [
            PromptStep("project_name", self._ask_project_name, self._needs_project_name),
            PromptStep("overwrite", self._ask_overwrite, self._target_not_empty),
            PromptStep("framework", self._ask_framework, self._needs_framework),
            PromptStep("variant", self._ask_variant, self._has_variants),
        ]

    def collect(self, project_name: str | None = None) -> ProjectAnswers:
        """Run every applicable step and return the frozen answers.

        Raises:
            OperationCancelled: If the user declines to overwrite a non-empty
                target directory.
        """
        answers: Answers = {}
        if project_name:
            answers["project_name"] = project_name
        for step in self.steps():
            if step.when(answers):
                answers[step.name] = step.ask(answers)
        return ProjectAnswers(**answers)

    # -- Predicates --------------------------------------------------------

    def _needs_project_name(self, answers: Answers) -> bool:
        return "project_name" not in answers

    def _target_not_empty(self, answers: Answers) -> bool:
        return not is_empty_dir(self.config.project_root(answers["project_name"]))

    def _needs_framework(self, answers: Answers) -> bool:
        return self.template not in self.templates

    def _has_variants(self, answers: Answers) -> bool:
        framework = answers.get("framework")
        return framework is not None and bool(framework.variants)

    # -- Questions ---------------------------------------------------------

    def _ask_project_name(self, answers: Answers) -> str:
        default = self.config.default_project_name
        value = Prompt.ask(
            "Project name:",
            console=self.console,
            default=default,
            stream=self.stream,
        )
        return value.strip() or default

    def _ask_overwrite(self, answers: Answers) -> bool:
        name = escape(answers["project_name"])
        confirmed = Confirm.ask(
            f'Target directory "{name}" is not empty. Remove existing files and continue?',
            console=self.console,
            default=False,
            stream=self.stream,
        )
        if not confirmed:
            raise OperationCancelled("✖ Operation cancelled")
        return True

    def _ask_framework(self, answers: Answers) -> Framework:
        if isinstance(self.template, str):
            title = (
                f'"{escape(self.template)}" isn\'t a valid template. '
                "Please choose from below: "
            )
        else:
            title = "Select a framework:"
        return self._choose(title, list(self.frameworks))

    def _ask_variant(self, answers: Answers) -> str:
        variant: Variant = self._choose("Select a variant:", list(answers["framework"].variants))
        return variant.name

    def _choose(self, title: str, options: list[Any]) -> Any:
        """Show a numbered menu of catalog entries and return the chosen one."""
        self.console.print(title)
        for index, option in enumerate(options, start=1):
            self.console.print(f"  {index}. {option.label}")
        choices = [str(index) for index in range(1, len(options) + 1)]
        picked = Prompt.ask(
            "Choice",
            console=self.console,
            choices=choices,
            show_choices=False,
            default="1",
            stream=self.stream,
        )
        return options[int(picked) - 1]
