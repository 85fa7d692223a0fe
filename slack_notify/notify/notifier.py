"""Notifier collaborator interfaces + dispatch result."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


class SiteInfoProvider(Protocol):
    def get_site_url(self) -> str:
        ...

    def get_site_name(self) -> str:
        ...


class FailureFlagSink(Protocol):
    def signal_connectivity_failure(self) -> None:
        ...


class HttpClient(Protocol):
    """Anything shaped like ``requests`` (the module or a Session)."""

    def post(self, url: str, data: Any = None, timeout: float = ..., **kwargs: Any) -> Any:
        ...


@dataclass(frozen=True)
class DispatchResult:
    all_succeeded: bool

    def __bool__(self) -> bool:
        return self.all_succeeded
