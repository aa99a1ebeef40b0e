"""create-starter configuration.

Everything the scaffolding flow would otherwise read from ambient process
state (working directory, environment, packaged template location) lives on a
single Pydantic v2 model so it can be validated at construction time and
passed explicitly through the pipeline.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

_DEFAULT_TEMPLATES_DIR = Path(__file__).parent / "scaffolder" / "templates"


class ScaffoldConfig(BaseModel):
    """Global create-starter configuration.

    Instances are typically created once by the CLI entry point via
    :meth:`from_env` and then handed to ``ScaffoldPipeline``.
    """

    cwd: Path = Field(default_factory=Path.cwd)
    user_agent: str | None = Field(
        default=None, description="Raw package-manager user agent, e.g. 'pnpm/8.6.0 npm/? node/v18'"
    )
    templates_dir: Path = Field(default=_DEFAULT_TEMPLATES_DIR)
    default_project_name: str = Field(default="def-project", min_length=1)
    manifest_name: str = Field(default="package.json", min_length=1)
    vcs_dir: str = Field(default=".git")
    default_package_manager: str = Field(default="npm", min_length=1)

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    def project_root(self, project_name: str) -> Path:
        """Return the directory a project called *project_name* is written to.

        The result is always under ``cwd``; an absolute name is re-rooted there.
        """
        name = Path(project_name)
        if name.is_absolute():
            name = name.relative_to(name.anchor)
        return self.cwd / name

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls, cwd: Path | None = None) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from the current process.

        Recognised variables (all optional):
            npm_config_user_agent, CREATE_STARTER_TEMPLATES_DIR.
        """
        kwargs: dict[str, object] = {
            "cwd": cwd or Path.cwd(),
            "user_agent": os.environ.get("npm_config_user_agent") or None,
        }
        if os.environ.get("CREATE_STARTER_TEMPLATES_DIR"):
            kwargs["templates_dir"] = Path(os.environ["CREATE_STARTER_TEMPLATES_DIR"])
        return cls(**kwargs)
