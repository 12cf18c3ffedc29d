"""Application configuration loading from YAML."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from flybrief.fetch.open_weather_map import DEFAULT_URL
from flybrief.models import FlyingSite
from flybrief.notify.telegram import TelegramConfig, get_chat_ids

CONFIG_DIR = Path(__file__).resolve().parent.parent.parent / "config"
DEFAULT_CONFIG_FILE = "sites.yaml"


class AppConfig(BaseModel):
    """Top-level notifier configuration."""

    weather_api_url: str = DEFAULT_URL
    weather_api_token: str
    telegram: TelegramConfig
    sites: list[FlyingSite] = Field(min_length=1)


def resolve_config_path(path: str | Path | None = None) -> Path:
    """Pick the config file.

    Resolution order:
    1. Explicit path
    2. FLYBRIEF_CONFIG environment variable
    3. config/sites.yaml in the repository
    """
    if path:
        return Path(path)
    env_path = os.environ.get("FLYBRIEF_CONFIG")
    if env_path:
        return Path(env_path)
    return CONFIG_DIR / DEFAULT_CONFIG_FILE


def _apply_env_overrides(data: dict) -> dict:
    """Let secrets come from the environment instead of the YAML file."""
    if os.environ.get("FLYBRIEF_WEATHER_API_URL"):
        data["weather_api_url"] = os.environ["FLYBRIEF_WEATHER_API_URL"]
    if os.environ.get("FLYBRIEF_WEATHER_API_TOKEN"):
        data["weather_api_token"] = os.environ["FLYBRIEF_WEATHER_API_TOKEN"]

    telegram = dict(data.get("telegram") or {})
    if os.environ.get("FLYBRIEF_TELEGRAM_BOT_TOKEN"):
        telegram["bot_token"] = os.environ["FLYBRIEF_TELEGRAM_BOT_TOKEN"]
    chat_ids = get_chat_ids()
    if chat_ids:
        telegram["chat_ids"] = chat_ids
    data["telegram"] = telegram
    return data


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate the notifier configuration.

    Raises:
        FileNotFoundError: If the config file does not exist.
        pydantic.ValidationError: If the content is invalid.
    """
    config_path = resolve_config_path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config not found: {config_path}")

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    return AppConfig.model_validate(_apply_env_overrides(data))
