"""Application configuration loaded from YAML."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from .engine.models import GameConfig
from .providers.models import ProviderConfig


class AppConfig(BaseModel):
    """Top-level configuration: board dimensions plus word provider."""
    game: GameConfig = Field(default_factory=GameConfig)
    provider: ProviderConfig = Field(default_factory=ProviderConfig)


def load_config(config_path: str | Path) -> AppConfig:
    """Load application configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return AppConfig(**data)
