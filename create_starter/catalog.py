"""Framework and variant catalog.

The catalog is static data: every entry only carries a name, a display label
and a :class:`Color` tag, so there is nothing to dispatch on at runtime.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from rich.markup import escape


class Color(str, Enum):
    """Styling tag for catalog labels. Values are Rich style names."""

    RESET = "reset"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    CYAN = "cyan"
    MAGENTA = "magenta"
    RED = "red"

    def paint(self, text: str) -> str:
        """Wrap *text* in Rich markup for this color."""
        if self is Color.RESET:
            return escape(text)
        return f"[{self.value}]{escape(text)}[/{self.value}]"


class Variant(BaseModel):
    """A sub-choice under a framework, typically a language flavour."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Template identifier")
    display: str = Field(default="")
    color: Color = Field(default=Color.RESET)

    @property
    def label(self) -> str:
        return self.color.paint(self.display or self.name)


class Framework(BaseModel):
    """A top-level project type offered to the user."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    display: str = Field(default="")
    color: Color = Field(default=Color.RESET)
    variants: tuple[Variant, ...] = Field(default=())

    @property
    def label(self) -> str:
        return self.color.paint(self.display or self.name)

    def template_names(self) -> list[str]:
        """Template identifiers this framework can produce."""
        if self.variants:
            return [variant.name for variant in self.variants]
        return [self.name]


FRAMEWORKS: tuple[Framework, ...] = (
    Framework(
        name="vue",
        display="vue",
        color=Color.GREEN,
        variants=(
            Variant(name="vue", display="Javascript", color=Color.YELLOW),
        ),
    ),
)


def list_templates(frameworks: tuple[Framework, ...] = FRAMEWORKS) -> list[str]:
    """Flatten *frameworks* into the list of selectable template identifiers."""
    names: list[str] = []
    for framework in frameworks:
        names.extend(framework.template_names())
    return names


TEMPLATES: list[str] = list_templates()
