"""Unit tests for ScaffoldConfig (create_starter.config).

Tests cover:
- Defaults (working directory, packaged templates, manifest name)
- project_root derivation
- from_env reading the user agent and the templates override
- Validation of empty names
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from create_starter.config import ScaffoldConfig


class TestDefaults:
    @pytest.mark.unit
    def test_default_values(self):
        config = ScaffoldConfig()
        assert config.cwd == Path.cwd()
        assert config.user_agent is None
        assert config.default_project_name == "def-project"
        assert config.manifest_name == "package.json"
        assert config.vcs_dir == ".git"
        assert config.default_package_manager == "npm"

    @pytest.mark.unit
    def test_default_templates_dir_is_packaged(self):
        config = ScaffoldConfig()
        assert config.templates_dir.name == "templates"
        assert config.templates_dir.parent.name == "scaffolder"
        assert (config.templates_dir / "vue" / "package.json").is_file()

    @pytest.mark.unit
    def test_empty_manifest_name_rejected(self):
        with pytest.raises(ValidationError):
            ScaffoldConfig(manifest_name="")

    @pytest.mark.unit
    def test_empty_default_project_name_rejected(self):
        with pytest.raises(ValidationError):
            ScaffoldConfig(default_project_name="")


class TestProjectRoot:
    @pytest.mark.unit
    def test_joins_cwd_and_name(self, tmp_path: Path):
        config = ScaffoldConfig(cwd=tmp_path)
        assert config.project_root("my-app") == tmp_path / "my-app"

    @pytest.mark.unit
    def test_nested_name(self, tmp_path: Path):
        config = ScaffoldConfig(cwd=tmp_path)
        assert config.project_root("apps/web") == tmp_path / "apps" / "web"

    @pytest.mark.unit
    def test_absolute_name_stays_under_cwd(self, tmp_path: Path):
        cwd = tmp_path / "work"
        config = ScaffoldConfig(cwd=cwd)
        elsewhere = tmp_path / "elsewhere"
        root = config.project_root(str(elsewhere))
        assert root == cwd / elsewhere.relative_to(elsewhere.anchor)
        assert root.is_relative_to(cwd)


class TestFromEnv:
    @pytest.mark.unit
    def test_reads_user_agent(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("npm_config_user_agent", "pnpm/8.6.0 npm/? node/v18.16.0")
        config = ScaffoldConfig.from_env(cwd=tmp_path)
        assert config.user_agent == "pnpm/8.6.0 npm/? node/v18.16.0"
        assert config.cwd == tmp_path

    @pytest.mark.unit
    def test_missing_user_agent_is_none(self, monkeypatch):
        monkeypatch.delenv("npm_config_user_agent", raising=False)
        config = ScaffoldConfig.from_env()
        assert config.user_agent is None
        assert config.cwd == Path.cwd()

    @pytest.mark.unit
    def test_empty_user_agent_is_none(self, monkeypatch):
        monkeypatch.setenv("npm_config_user_agent", "")
        assert ScaffoldConfig.from_env().user_agent is None

    @pytest.mark.unit
    def test_templates_dir_override(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("CREATE_STARTER_TEMPLATES_DIR", str(tmp_path))
        assert ScaffoldConfig.from_env().templates_dir == tmp_path

    @pytest.mark.unit
    def test_templates_dir_default_without_override(self, monkeypatch):
        monkeypatch.delenv("CREATE_STARTER_TEMPLATES_DIR", raising=False)
        assert ScaffoldConfig.from_env().templates_dir == ScaffoldConfig().templates_dir
