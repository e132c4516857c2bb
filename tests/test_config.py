"""Tests for configuration loading."""

from pathlib import Path

import pydantic
import pytest
import yaml

from kdp_layout.config import AppConfig, LayoutConfig, load_config

PROJECT_CONFIG = Path(__file__).parent.parent / "config.yaml"


class TestAppConfigDefaults:
    """Test that AppConfig provides sensible defaults."""

    def test_default_config_creates_successfully(self) -> None:
        config = AppConfig()
        assert config.app.name == "KDP Book Layout"
        assert config.app.language == "en"

    def test_default_layout_config(self) -> None:
        config = AppConfig()
        assert config.layout.words_per_page == 250
        assert config.layout.toc_skips_empty_chapters is False
        assert config.layout.spine_text_min_width == 0.25

    def test_default_cover_config(self) -> None:
        config = AppConfig()
        assert config.cover.paper_type == "white"
        assert config.cover.dpi == 300
        assert config.cover.bleed is True

    def test_default_settings(self) -> None:
        settings = AppConfig().default_settings()
        assert settings.trim_size == "6x9"
        assert settings.margin_outside == 0.5
        assert settings.font_family == "Times New Roman"
        assert settings.line_spacing == 1.15


class TestLoadConfig:
    """Test loading config from YAML files."""

    def test_load_from_yaml(self, tmp_path: Path) -> None:
        yaml_data = {
            "app": {"name": "Test App", "version": "0.1.0"},
            "layout": {"words_per_page": 300},
            "defaults": {"trim_size": "5x8", "font_size": 11},
        }
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump(yaml_data))

        config = load_config(config_file)
        assert config.app.name == "Test App"
        assert config.layout.words_per_page == 300
        assert config.defaults.trim_size == "5x8"
        assert config.defaults.font_size == 11
        # Other fields keep defaults
        assert config.cover.dpi == 300
        assert config.defaults.include_toc is True

    def test_load_missing_yaml_uses_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "nonexistent.yaml")
        assert config.app.name == "KDP Book Layout"

    def test_empty_yaml_uses_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")
        config = load_config(config_file)
        assert config.layout.words_per_page == 250

    def test_env_vars_override(self, tmp_path: Path, monkeypatch: object) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("{}")

        monkeypatch.setenv("KDP_WORDS_PER_PAGE", "300")  # type: ignore[attr-defined]
        monkeypatch.setenv("KDP_PAPER_TYPE", "cream")  # type: ignore[attr-defined]

        config = load_config(config_file)
        assert config.layout.words_per_page == 300
        assert config.cover.paper_type == "cream"

    @pytest.mark.parametrize("value", ["many", "0", "-5"])
    def test_invalid_words_per_page_env_rejected(
        self, tmp_path: Path, monkeypatch: object, value: str
    ) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("{}")
        monkeypatch.setenv("KDP_WORDS_PER_PAGE", value)  # type: ignore[attr-defined]

        with pytest.raises(pydantic.ValidationError, match="words_per_page"):
            load_config(config_file)

    def test_non_positive_words_per_page_yaml_rejected(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump({"layout": {"words_per_page": 0}}))
        with pytest.raises(pydantic.ValidationError, match="words_per_page"):
            load_config(config_file)

    def test_layout_config_validates_assignment(self) -> None:
        config = LayoutConfig()
        with pytest.raises(pydantic.ValidationError):
            config.words_per_page = -1
        assert config.words_per_page == 250

    def test_load_project_config_yaml(self, monkeypatch: object) -> None:
        """Test loading the shipped config.yaml."""
        monkeypatch.delenv("KDP_WORDS_PER_PAGE", raising=False)  # type: ignore[attr-defined]
        monkeypatch.delenv("KDP_PAPER_TYPE", raising=False)  # type: ignore[attr-defined]
        config = load_config(PROJECT_CONFIG)
        assert config.app.name == "KDP Book Layout"
        assert config.layout.words_per_page == 250
        assert config.defaults == AppConfig().defaults
