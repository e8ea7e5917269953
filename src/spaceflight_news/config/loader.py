"""YAML configuration loading utilities."""

from pathlib import Path

import yaml

from spaceflight_news.config.models import SpaceflightNewsConfig


def load_config(path: Path | str) -> SpaceflightNewsConfig:
    """Load configuration from YAML file.

    An empty file yields the defaults.

    Args:
        path: Path to YAML config file.

    Returns:
        Validated SpaceflightNewsConfig.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        pydantic.ValidationError: If config is invalid.
    """
    path = Path(path)
    with path.open() as f:
        raw = yaml.safe_load(f)

    return SpaceflightNewsConfig.model_validate(raw or {})


def get_default_config_path() -> Path:
    """Get path to default config file."""
    return Path(__file__).parent.parent.parent.parent / "configs" / "default.yaml"
