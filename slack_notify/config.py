"""
Slack Notify Configuration

Settings are read once from an optional YAML file, then overridden by
environment variables (a .env file is loaded by the CLI).

Env vars:
- SLACK_WEBHOOK_ENDPOINT
- SLACK_CHANNEL_NAME (comma separated for several channels)
- SLACK_BOT_USERNAME (optional, default "Slack Bot")
- SLACK_BOT_IMAGE (optional, default bundled icon)
- SLACK_ASSETS_URL (optional, where the bundled icon is served, default SITE_URL)
- SITE_URL
- SITE_NAME
- SLACK_STATE_DB (optional, default slack_state.db)
- SLACK_MAX_WORKERS (optional, default 1 = send sequentially)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from .channels import resolve_channels

logger = logging.getLogger(__name__)

DEFAULT_BOT_NAME = "Slack Bot"
DEFAULT_BOT_ICON_PATH = "assets/images/default-bot-icon.png"
DEFAULT_TIMEOUT = 30
DEFAULT_STATE_DB = "slack_state.db"

# YAML key -> env var
_ENV_OVERRIDES = {
    "webhook_endpoint": "SLACK_WEBHOOK_ENDPOINT",
    "channel_name": "SLACK_CHANNEL_NAME",
    "bot_username": "SLACK_BOT_USERNAME",
    "bot_image": "SLACK_BOT_IMAGE",
    "assets_url": "SLACK_ASSETS_URL",
    "site_url": "SITE_URL",
    "site_name": "SITE_NAME",
    "state_db": "SLACK_STATE_DB",
    "max_workers": "SLACK_MAX_WORKERS",
}


class ConfigurationError(ValueError):
    """Raised when required settings are missing."""


def default_bot_icon(assets_url: str = "") -> str:
    """URL of the bundled bot icon, served from ``assets_url``."""
    if not assets_url:
        logger.warning(
            f"No assets_url or site_url configured, default bot icon is the relative path {DEFAULT_BOT_ICON_PATH}"
        )
        return DEFAULT_BOT_ICON_PATH
    return f"{assets_url.rstrip('/')}/{DEFAULT_BOT_ICON_PATH}"


@dataclass(frozen=True)
class SiteInfo:
    """Site identity appended to plain messages."""
    url: str = ""
    name: str = ""

    def get_site_url(self) -> str:
        return self.url

    def get_site_name(self) -> str:
        return self.name


@dataclass(frozen=True)
class DispatchConfig:
    """Resolved delivery settings, fixed for the lifetime of a notifier."""
    endpoint: str
    channels: Tuple[str, ...]
    bot_name: str = DEFAULT_BOT_NAME
    bot_icon: str = DEFAULT_BOT_ICON_PATH
    timeout: float = DEFAULT_TIMEOUT
    max_workers: int = 1

    def __post_init__(self):
        # Frozen: normalise through object.__setattr__
        if not self.channels:
            object.__setattr__(self, "channels", ("",))
        else:
            object.__setattr__(self, "channels", tuple(self.channels))
        if not self.bot_name:
            object.__setattr__(self, "bot_name", DEFAULT_BOT_NAME)
        if not self.bot_icon:
            object.__setattr__(self, "bot_icon", default_bot_icon())
        object.__setattr__(self, "max_workers", max(1, int(self.max_workers)))

    @classmethod
    def from_raw(
        cls,
        endpoint: Optional[str],
        channel_name: Optional[str],
        bot_username: Optional[str] = None,
        bot_image: Optional[str] = None,
        assets_url: str = "",
        timeout: float = DEFAULT_TIMEOUT,
        max_workers: int = 1,
    ) -> "DispatchConfig":
        """
        Build a config from raw option strings.

        Empty bot name/icon fall back to the defaults. The channel string is
        resolved here, once, rather than on every send.
        """
        return cls(
            endpoint=endpoint or "",
            channels=tuple(resolve_channels(channel_name)),
            bot_name=bot_username or DEFAULT_BOT_NAME,
            bot_icon=bot_image or default_bot_icon(assets_url),
            timeout=timeout,
            max_workers=max_workers,
        )


@dataclass(frozen=True)
class Settings:
    """Raw option values as entered by the site owner."""
    webhook_endpoint: str = ""
    channel_name: str = ""
    bot_username: str = ""
    bot_image: str = ""
    assets_url: str = ""
    site_url: str = ""
    site_name: str = ""
    state_db: str = DEFAULT_STATE_DB
    max_workers: int = 1

    def require_endpoint(self) -> None:
        if not self.webhook_endpoint:
            raise ConfigurationError(
                "Slack webhook endpoint is not configured (set SLACK_WEBHOOK_ENDPOINT or webhook_endpoint)"
            )

    def dispatch_config(self) -> DispatchConfig:
        return DispatchConfig.from_raw(
            endpoint=self.webhook_endpoint,
            channel_name=self.channel_name,
            bot_username=self.bot_username,
            bot_image=self.bot_image,
            assets_url=self.assets_url or self.site_url,
            max_workers=self.max_workers,
        )

    def site_info(self) -> SiteInfo:
        return SiteInfo(url=self.site_url, name=self.site_name)


def _read_yaml(path: Path) -> Dict[str, Any]:
    with open(path, "r") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}")
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} must contain a mapping of settings")
    # Accept either a top-level mapping or one nested under "slack"
    if isinstance(data.get("slack"), dict):
        data = data["slack"]
    return data


def load_settings(path: Optional[str] = "config.yaml") -> Settings:
    """
    Load settings from a YAML file (if present) and the environment.

    Args:
        path: YAML config path; a missing file is not an error

    Returns:
        Settings with environment variables taking precedence
    """
    values: Dict[str, Any] = {}

    if path and Path(path).is_file():
        values.update(_read_yaml(Path(path)))
        logger.debug(f"Loaded settings from {path}")

    for key, env_var in _ENV_OVERRIDES.items():
        env_value = os.getenv(env_var)
        if env_value is not None and env_value != "":
            values[key] = env_value

    try:
        max_workers = int(values.get("max_workers", 1) or 1)
    except (TypeError, ValueError):
        raise ConfigurationError(f"max_workers must be an integer, got {values.get('max_workers')!r}")

    return Settings(
        webhook_endpoint=str(values.get("webhook_endpoint") or ""),
        channel_name=str(values.get("channel_name") or ""),
        bot_username=str(values.get("bot_username") or ""),
        bot_image=str(values.get("bot_image") or ""),
        assets_url=str(values.get("assets_url") or ""),
        site_url=str(values.get("site_url") or ""),
        site_name=str(values.get("site_name") or ""),
        state_db=str(values.get("state_db") or DEFAULT_STATE_DB),
        max_workers=max_workers,
    )
