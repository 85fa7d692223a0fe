"""Send Slack notifications from the command line.

Usage:
    slack-notify send "Deploy finished"
    slack-notify post --action "New post published" --title "Hello World" \
        --url https://example.com/hello --author Alice --summary "First post"
    slack-notify status
    slack-notify clear

Notes:
- Settings come from config.yaml and/or SLACK_* env vars (.env is loaded).
- A failed delivery raises the connectivity flag in the state DB; `status`
  reports it and `clear` dismisses it.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from colorama import Fore, init
from dotenv import load_dotenv

from .config import ConfigurationError, load_settings
from .notify import SlackNotifier
from .state import SqliteStateStore

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Slack webhook notifier")
    parser.add_argument("--config", type=str, default="config.yaml", help="Path to YAML settings (optional)")
    parser.add_argument("--state-db", type=str, default=None, help="SQLite state DB path (overrides settings)")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    send = sub.add_parser("send", help="Send a plain text message")
    send.add_argument("text", type=str, help="Message text")

    post = sub.add_parser("post", help="Announce a post")
    post.add_argument("--action", type=str, required=True, help="Notification text, e.g. 'New post published'")
    post.add_argument("--title", type=str, required=True, help="Post title")
    post.add_argument("--url", type=str, required=True, help="Post link")
    post.add_argument("--author", type=str, required=True, help="Post author")
    post.add_argument("--summary", type=str, default="", help="Post summary")

    sub.add_parser("status", help="Show whether a connectivity failure was recorded")
    sub.add_parser("clear", help="Clear the recorded connectivity failure")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    init(autoreset=True)

    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = load_settings(args.config)
    except (ConfigurationError, OSError) as e:
        print(f"{Fore.RED}❌ Configuration error: {e}")
        return EXIT_CONFIG

    state = SqliteStateStore(args.state_db or settings.state_db)

    if args.command == "status":
        if state.connectivity_failed():
            print(f"{Fore.RED}⚠️  Slack connectivity problem recorded. Check the webhook endpoint.")
            return EXIT_FAILED
        print(f"{Fore.GREEN}✅ No connectivity problem recorded")
        return EXIT_OK

    if args.command == "clear":
        state.clear_connectivity_failure()
        print(f"{Fore.GREEN}✅ Connectivity notice cleared")
        return EXIT_OK

    try:
        settings.require_endpoint()
    except ConfigurationError as e:
        print(f"{Fore.RED}❌ {e}")
        return EXIT_CONFIG

    notifier = SlackNotifier(
        settings.dispatch_config(),
        site=settings.site_info(),
        failure_flag=state,
    )

    if args.command == "send":
        result = notifier.send_message(args.text)
    else:
        result = notifier.send_post_message(args.action, args.title, args.url, args.author, args.summary)

    channels = ", ".join(notifier.channels)
    if result:
        print(f"{Fore.GREEN}✅ Sent to {channels}")
        return EXIT_OK

    print(f"{Fore.RED}❌ Delivery failed for at least one of: {channels}")
    return EXIT_FAILED


if __name__ == "__main__":
    raise SystemExit(main())
