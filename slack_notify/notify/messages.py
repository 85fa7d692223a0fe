"""Message variants and their Slack webhook payloads.

Plain message payload:
    {"channel", "username", "icon_url", "text"}

Post message payload adds a single attachment:
    {"fallback", "author_name", "title", "title_link", "text"}
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from ..config import DispatchConfig
from .notifier import SiteInfoProvider


@dataclass(frozen=True)
class PlainMessage:
    text: str


@dataclass(frozen=True)
class PostMessage:
    """Announcement of a published post."""
    action_text: str
    title: str
    url: str
    author: str
    summary: str = ""


Message = Union[PlainMessage, PostMessage]


def format_site_text(text: str, site: Optional[SiteInfoProvider]) -> str:
    """Append the site link in Slack markup: ``<text> @ *<url|name>*``."""
    url = site.get_site_url() if site is not None else ""
    name = site.get_site_name() if site is not None else ""
    return f"{text} @ *<{url}|{name}>*"


def build_payload(
    config: DispatchConfig,
    message: Message,
    channel: str,
    site: Optional[SiteInfoProvider] = None,
) -> Dict[str, Any]:
    """Build the payload for one channel. Pure: no I/O, no mutation."""
    payload: Dict[str, Any] = {
        "channel": channel,
        "username": config.bot_name,
        "icon_url": config.bot_icon,
    }

    if isinstance(message, PostMessage):
        payload["text"] = message.action_text
        payload["attachments"] = [
            {
                "fallback": f"{message.title} - {message.author}",
                "author_name": message.author,
                "title": message.title,
                "title_link": message.url,
                "text": message.summary,
            }
        ]
    elif isinstance(message, PlainMessage):
        payload["text"] = format_site_text(message.text, site)
    else:
        raise TypeError(f"Unsupported message type: {type(message).__name__}")

    return payload


def encode_payload(payload: Dict[str, Any]) -> str:
    return json.dumps(payload, separators=(",", ":"))
