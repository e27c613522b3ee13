# tests/test_config_utils.py
"""
Tests for config_utils.py - Configuration loading with YAML support
"""
import pytest
import yaml
from pathlib import Path

from narrator.config_utils import (
    ConfigLoader,
    NarratorConfig,
    create_config_template,
    get_config,
)
from narrator.errors import ConfigurationError
from narrator.models import RenderMode


class TestNarratorConfig:
    """Tests for NarratorConfig dataclass"""

    def test_default_values(self, tmp_path, monkeypatch):
        """Config should have sensible defaults"""
        monkeypatch.chdir(tmp_path)
        config = NarratorConfig()

        assert config.project_root == tmp_path
        assert config.site_alias == "@site/"
        assert config.website_dir == "website"
        assert config.immediate_window == 100
        assert config.context_window == 200
        assert config.default_mode is RenderMode.DOC
        assert config.exclude == ["CLAUDE.md"]

    def test_docs_path(self, tmp_path):
        config = NarratorConfig(project_root=tmp_path, docs_dir="content")
        assert config.docs_path == tmp_path / "content"

    def test_mode_string_coerced(self, tmp_path):
        config = NarratorConfig(project_root=tmp_path, default_mode="presentation")
        assert config.default_mode is RenderMode.PRESENTATION

    def test_validate(self, tmp_path):
        config = NarratorConfig(project_root=tmp_path, immediate_window=300, context_window=200)
        assert "context_window must be at least immediate_window" in config.validate()

        assert NarratorConfig(project_root=tmp_path).validate() == []


class TestConfigLoader:
    """Tests for ConfigLoader"""

    def test_no_config_files(self, tmp_path):
        config = get_config(tmp_path)
        assert config.project_root == tmp_path
        assert config._sources == {}

    def test_yaml_overrides(self, tmp_path):
        (tmp_path / "narrator.yaml").write_text(
            "site_alias: '~/'\n"
            "context_window: 300\n"
            "default_mode: presentation\n"
            "voice: alloy\n"
        )
        config = get_config(tmp_path)

        assert config.site_alias == "~/"
        assert config.context_window == 300
        assert config.default_mode is RenderMode.PRESENTATION
        assert config.extra == {"voice": "alloy"}
        assert config._sources["context_window"] == "narrator.yaml"

    def test_relative_project_root(self, tmp_path):
        (tmp_path / "repo").mkdir()
        (tmp_path / "narrator.yaml").write_text("project_root: repo\n")
        config = get_config(tmp_path)
        assert config.project_root == (tmp_path / "repo").resolve()

    def test_global_config_lowest_priority(self, tmp_path):
        global_dir = Path.home() / ".narrator"
        global_dir.mkdir()
        (global_dir / "config.yaml").write_text("docs_dir: global/docs\nwebsite_dir: site\n")
        (tmp_path / "narrator.yaml").write_text("docs_dir: local/docs\n")

        config = get_config(tmp_path)
        assert config.docs_dir == "local/docs"
        assert config.website_dir == "site"
        assert config._sources["website_dir"] == "global"

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        (tmp_path / "narrator.yaml").write_text("docs_dir: from/yaml\n")
        monkeypatch.setenv("NARRATOR_DOCS_DIR", "from/env")
        monkeypatch.setenv("NARRATOR_MODE", "PRESENTATION")
        monkeypatch.setenv("NARRATOR_PROJECT_ROOT", str(tmp_path / "elsewhere"))

        config = get_config(tmp_path)
        assert config.docs_dir == "from/env"
        assert config.default_mode is RenderMode.PRESENTATION
        assert config.project_root == tmp_path / "elsewhere"
        assert config._sources["docs_dir"] == "env:NARRATOR_DOCS_DIR"

    def test_invalid_yaml(self, tmp_path):
        (tmp_path / "narrator.yaml").write_text("docs_dir: [unclosed\n")
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader(tmp_path).load()
        assert "narrator.yaml" in str(exc_info.value)

    def test_non_mapping_yaml(self, tmp_path):
        (tmp_path / "narrator.yaml").write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError):
            get_config(tmp_path)

    def test_invalid_value(self, tmp_path):
        (tmp_path / "narrator.yaml").write_text("context_window: wide\n")
        with pytest.raises(ConfigurationError):
            get_config(tmp_path)

    def test_invalid_mode(self, tmp_path):
        (tmp_path / "narrator.yaml").write_text("default_mode: podcast\n")
        with pytest.raises(ConfigurationError):
            get_config(tmp_path)


class TestConfigTemplate:
    """Tests for create_config_template()"""

    @pytest.mark.parametrize("include_comments", [True, False])
    def test_template_round_trips(self, tmp_path, include_comments):
        """Template loads back to the defaults"""
        template = create_config_template(include_comments)
        assert isinstance(yaml.safe_load(template), dict)

        (tmp_path / "narrator.yaml").write_text(template)
        config = get_config(tmp_path)
        defaults = NarratorConfig(project_root=tmp_path)

        assert config.site_alias == defaults.site_alias
        assert config.docs_dir == defaults.docs_dir
        assert config.visual_marker == defaults.visual_marker
        assert config.default_mode is defaults.default_mode
        assert config.extra == {}
