"""Configuration loader for the KDP book layout engine."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from kdp_layout.models.settings import FormattingSettings


class AppInfo(BaseModel):
    """Application metadata."""

    name: str = "KDP Book Layout"
    version: str = "1.0.0"
    language: str = "en"


class LayoutConfig(BaseModel):
    """Pagination heuristics."""

    model_config = ConfigDict(validate_assignment=True)

    # Rough print baseline; independent of trim size and typography
    words_per_page: int = Field(default=250, gt=0)
    # Drop empty chapters from the TOC too, so it matches the emitted pages
    toc_skips_empty_chapters: bool = False
    spine_text_min_width: float = 0.25


class CoverConfig(BaseModel):
    """Full-wrap cover geometry defaults."""

    model_config = ConfigDict(validate_assignment=True)

    paper_type: str = "white"
    dpi: int = 300
    bleed: bool = True


class AppConfig(BaseModel):
    """Root application configuration."""

    app: AppInfo = Field(default_factory=AppInfo)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    cover: CoverConfig = Field(default_factory=CoverConfig)
    defaults: FormattingSettings = Field(default_factory=FormattingSettings)

    def default_settings(self) -> FormattingSettings:
        """Formatting settings a new project starts with."""
        return self.defaults


def load_config(config_path: str | Path = "config.yaml") -> AppConfig:
    """Load configuration from YAML file and environment variables.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Fully populated AppConfig instance.
    """
    load_dotenv()

    yaml_data: dict = {}
    config_file = Path(config_path)
    if config_file.exists():
        with open(config_file) as f:
            yaml_data = yaml.safe_load(f) or {}

    config = AppConfig(**yaml_data)

    # Environment overrides; assignment is validated like the YAML values
    words_per_page = os.getenv("KDP_WORDS_PER_PAGE")
    if words_per_page:
        config.layout.words_per_page = words_per_page
    paper_type = os.getenv("KDP_PAPER_TYPE")
    if paper_type:
        config.cover.paper_type = paper_type

    return config
