"""
Runtime configuration for the MCP4VAPI tool server.

Values are resolved in this order (later wins):

1. Defaults on :class:`Settings`
2. ``config.yaml`` at the project root (``server``, ``webhooks``, ``logging``)
3. Environment variables, including a ``.env`` file loaded via python-dotenv

Environment variables
---------------------
    WEB_SEARCH_WEBHOOK_URL    webhook for the web_search tool
    NEWS_SEARCH_WEBHOOK_URL   webhook for the news_search tool
    WEATHER_WEBHOOK_URL       webhook for the weather_lookup tool
    WEBHOOK_TIMEOUT           seconds to wait for a webhook response
    BRAVE_SEARCH_API_KEY      optional key forwarded to the webhooks
    WEBHOOK_API_KEY_HEADER    header name the key is sent in
    MCP_HOST / MCP_PORT       HTTP bind address
    MCP_TRANSPORT             "http" (default) or "stdio"
    LOG_LEVEL                 logging level name
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

_PROJECT_ROOT = Path(__file__).resolve().parents[2]
_CONFIG_PATH = _PROJECT_ROOT / "config.yaml"

# env var -> Settings field
_ENV_OVERRIDES: Dict[str, str] = {
    "WEB_SEARCH_WEBHOOK_URL": "web_search_url",
    "NEWS_SEARCH_WEBHOOK_URL": "news_search_url",
    "WEATHER_WEBHOOK_URL": "weather_url",
    "WEBHOOK_TIMEOUT": "request_timeout",
    "BRAVE_SEARCH_API_KEY": "api_key",
    "WEBHOOK_API_KEY_HEADER": "api_key_header",
    "MCP_HOST": "host",
    "MCP_PORT": "port",
    "MCP_TRANSPORT": "transport",
    "LOG_LEVEL": "log_level",
}

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigError(ValueError):
    """Raised when config.yaml or the environment holds unusable values."""


class Settings(BaseModel):
    """Immutable server settings, built once at process start."""

    server_name: str = Field(default="MCP4VAPI", description="MCP server identity")
    server_version: str = Field(default="1.0.0", description="MCP server version")

    web_search_url: Optional[str] = Field(None, description="Webhook for web_search")
    news_search_url: Optional[str] = Field(None, description="Webhook for news_search")
    weather_url: Optional[str] = Field(None, description="Webhook for weather_lookup")
    request_timeout: float = Field(default=30.0, gt=0, description="Webhook timeout in seconds")

    api_key: Optional[str] = Field(None, description="Secret forwarded to the webhooks when set")
    api_key_header: str = Field(default="X-Api-Key", description="Header carrying api_key")

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, gt=0, lt=65536)
    transport: str = Field(default="http", pattern="^(http|stdio)$")
    log_level: str = Field(default="INFO")

    model_config = {"frozen": True}

    @field_validator("log_level", mode="before")
    @classmethod
    def _known_level(cls, value: Any) -> str:
        name = str(value).strip().upper()
        if name not in _LOG_LEVELS:
            raise ValueError(f"unknown logging level {value!r}")
        return name


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with open(path, "r") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Could not parse {path.name}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path.name} must contain a mapping at the top level")
    return data


def _flatten(data: Dict[str, Any]) -> Dict[str, Any]:
    """Map the sectioned YAML layout onto flat Settings fields."""
    server = data.get("server") or {}
    webhooks = data.get("webhooks") or {}
    logging_cfg = data.get("logging") or {}

    values: Dict[str, Any] = {
        "server_name": server.get("name"),
        "server_version": server.get("version"),
        "host": server.get("host"),
        "port": server.get("port"),
        "transport": server.get("transport"),
        "web_search_url": webhooks.get("web_search_url"),
        "news_search_url": webhooks.get("news_search_url"),
        "weather_url": webhooks.get("weather_url"),
        "request_timeout": webhooks.get("timeout"),
        "api_key_header": webhooks.get("api_key_header"),
        "log_level": logging_cfg.get("level"),
    }
    return {k: v for k, v in values.items() if v is not None}


def load_settings(
    config_path: Optional[Path] = None,
    environ: Optional[Dict[str, str]] = None,
) -> Settings:
    """
    Build :class:`Settings` from YAML plus environment overrides.

    Parameters
    ----------
    config_path : Path | None
        YAML file to read (default: ``config.yaml`` at the project root).
    environ : dict | None
        Environment mapping (default: ``os.environ`` after loading ``.env``).

    Raises
    ------
    ConfigError
        If the YAML is malformed or a value fails validation.
    """
    if environ is None:
        load_dotenv(_PROJECT_ROOT / ".env")
        environ = dict(os.environ)

    values = _flatten(_load_yaml(config_path or _CONFIG_PATH))
    for env_name, field_name in _ENV_OVERRIDES.items():
        raw = environ.get(env_name, "").strip()
        if raw:
            values[field_name] = raw

    try:
        return Settings(**values)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings (loaded once)."""
    return load_settings()
