"""Unit tests for ScaffoldConfig (create_ts_project.config).

Tests cover:
- Defaults, including the bundled template directory
- Derived paths (target_path)
- Validation of required string fields
- from_env overrides
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from create_ts_project.config import DEFAULT_TEMPLATE_DIR, ScaffoldConfig


class TestScaffoldConfigDefaults:
    @pytest.mark.unit
    def test_defaults(self):
        config = ScaffoldConfig()
        assert config.default_target_dir == "ts-project"
        assert config.descriptor_name == "package.json"
        assert config.vcs_dir == ".git"
        assert config.fallback_package_manager == "npm"
        assert config.run_script == "dev"

    @pytest.mark.unit
    def test_cwd_captured_at_construction(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = ScaffoldConfig()
        monkeypatch.chdir(tmp_path.parent)
        assert config.cwd == Path.cwd() / tmp_path.name

    @pytest.mark.unit
    def test_bundled_template_ships_descriptor(self):
        config = ScaffoldConfig()
        assert config.template_dir == DEFAULT_TEMPLATE_DIR
        assert (config.template_dir / config.descriptor_name).is_file()

    @pytest.mark.unit
    def test_empty_default_target_rejected(self):
        with pytest.raises(ValidationError):
            ScaffoldConfig(default_target_dir="")

    @pytest.mark.unit
    def test_empty_fallback_manager_rejected(self):
        with pytest.raises(ValidationError):
            ScaffoldConfig(fallback_package_manager="")


class TestDerivedPaths:
    @pytest.mark.unit
    def test_target_path_is_anchored_at_cwd(self, tmp_path: Path):
        config = ScaffoldConfig(cwd=tmp_path)
        assert config.target_path("my-app") == tmp_path / "my-app"

    @pytest.mark.unit
    def test_absolute_target_path_wins(self, tmp_path: Path):
        config = ScaffoldConfig(cwd=tmp_path / "cwd")
        assert config.target_path(str(tmp_path / "elsewhere")) == tmp_path / "elsewhere"


class TestFromEnv:
    @pytest.mark.unit
    def test_without_overrides(self):
        with patch.dict(os.environ, {}, clear=True):
            config = ScaffoldConfig.from_env()
        assert config.template_dir == DEFAULT_TEMPLATE_DIR

    @pytest.mark.unit
    def test_template_dir_override(self, tmp_path: Path):
        with patch.dict(os.environ, {"CREATE_TS_PROJECT_TEMPLATE_DIR": str(tmp_path)}):
            config = ScaffoldConfig.from_env()
        assert config.template_dir == tmp_path

    @pytest.mark.unit
    def test_blank_override_ignored(self):
        with patch.dict(os.environ, {"CREATE_TS_PROJECT_TEMPLATE_DIR": ""}):
            config = ScaffoldConfig.from_env()
        assert config.template_dir == DEFAULT_TEMPLATE_DIR
