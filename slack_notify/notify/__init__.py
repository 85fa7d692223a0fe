"""Slack webhook notifier."""

from .notifier import DispatchResult, FailureFlagSink, HttpClient, SiteInfoProvider
from .messages import Message, PlainMessage, PostMessage, build_payload
from .slack import SlackNotifier

__all__ = [
    "DispatchResult",
    "FailureFlagSink",
    "HttpClient",
    "SiteInfoProvider",
    "Message",
    "PlainMessage",
    "PostMessage",
    "build_payload",
    "SlackNotifier",
]
