"""Slack notifier (incoming webhook).

Sends one webhook request per configured channel and reduces the outcomes to
a single verdict. Any failed channel marks the whole dispatch as failed and
raises the connectivity flag once.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from threading import Lock
from typing import List, Optional

import requests

from ..config import DispatchConfig
from .messages import Message, PlainMessage, PostMessage, build_payload, encode_payload
from .notifier import DispatchResult, FailureFlagSink, HttpClient, SiteInfoProvider

logger = logging.getLogger(__name__)


class SlackNotifier:
    """Fan a message out to every configured Slack channel."""

    def __init__(
        self,
        config: DispatchConfig,
        site: Optional[SiteInfoProvider] = None,
        failure_flag: Optional[FailureFlagSink] = None,
        http: Optional[HttpClient] = None,
    ):
        """
        Initialize the notifier.

        Args:
            config: Resolved delivery settings (endpoint, channels, bot identity)
            site: Site identity used by plain messages
            failure_flag: Sink told about connectivity failures
            http: requests-compatible client (default: the requests module)
        """
        self.config = config
        self.site = site
        self.failure_flag = failure_flag
        self.http = http if http is not None else requests

    @property
    def channels(self) -> List[str]:
        return list(self.config.channels)

    def send_message(self, text: str) -> DispatchResult:
        """Send a plain text message, suffixed with the site link."""
        return self.send(PlainMessage(text=text))

    def send_post_message(
        self,
        action_text: str,
        title: str,
        url: str,
        author: str,
        summary: str,
    ) -> DispatchResult:
        """Send a post announcement with a single attachment."""
        return self.send(
            PostMessage(action_text=action_text, title=title, url=url, author=author, summary=summary)
        )

    def send(self, message: Message) -> DispatchResult:
        if self.config.max_workers > 1 and len(self.config.channels) > 1:
            all_ok = self._send_parallel(message)
        else:
            all_ok = self._send_sequential(message)

        if not all_ok:
            logger.error(f"Slack notification failed for at least one of {len(self.config.channels)} channel(s)")
            self._signal_failure()

        return DispatchResult(all_succeeded=all_ok)

    def _send_sequential(self, message: Message) -> bool:
        all_ok = True
        for channel in self.config.channels:
            # No short-circuit: every channel gets its attempt
            if not self._send_to_channel(message, channel):
                all_ok = False
        return all_ok

    def _send_parallel(self, message: Message) -> bool:
        all_ok = True
        lock = Lock()

        def _task(channel: str) -> None:
            nonlocal all_ok
            ok = self._send_to_channel(message, channel)
            if not ok:
                with lock:
                    all_ok = False

        with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
            futures = [executor.submit(_task, channel) for channel in self.config.channels]
            for future in as_completed(futures):
                future.result()

        return all_ok

    def _send_to_channel(self, message: Message, channel: str) -> bool:
        payload = build_payload(self.config, message, channel, self.site)

        try:
            response = self.http.post(
                self.config.endpoint,
                data={"payload": encode_payload(payload)},
                timeout=self.config.timeout,
            )
        except (requests.exceptions.RequestException, OSError) as e:
            logger.error(f"Slack webhook error for {channel}: {e}")
            return False

        # HTTP error codes are not treated as delivery failures
        status = getattr(response, "status_code", None)
        if isinstance(status, int) and status >= 400:
            logger.warning(f"Slack webhook returned HTTP {status} for {channel}")
        else:
            logger.debug(f"Slack message sent to {channel}")

        return True

    def _signal_failure(self) -> None:
        if self.failure_flag is None:
            return
        try:
            self.failure_flag.signal_connectivity_failure()
        except Exception as e:
            logger.error(f"Could not record connectivity failure: {e}")
