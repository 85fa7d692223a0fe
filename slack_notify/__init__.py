"""
Slack Notify
Fan a message out to one or more Slack channels through an incoming webhook.
"""

from .channels import resolve_channels
from .config import DispatchConfig, Settings, SiteInfo, load_settings
from .notify import SlackNotifier, DispatchResult, PlainMessage, PostMessage
from .state import SqliteStateStore

__all__ = [
    'resolve_channels',
    'DispatchConfig',
    'Settings',
    'SiteInfo',
    'load_settings',
    'SlackNotifier',
    'DispatchResult',
    'PlainMessage',
    'PostMessage',
    'SqliteStateStore',
]
