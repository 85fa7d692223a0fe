"""
Slack Notify - Main Entry Point

Send a message or post announcement to the configured Slack channels.
"""

from slack_notify.cli import main

if __name__ == '__main__':
    raise SystemExit(main())
