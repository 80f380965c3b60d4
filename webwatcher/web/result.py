"""Check results produced by watchers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from webwatcher.web.http import HttpRequest, HttpResponse

if TYPE_CHECKING:
    from webwatcher.web.watcher import WebWatcher


def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class WatcherCheckResult:
    """Outcome of a single watcher execution."""

    watcher_name: str
    watcher_type: str
    is_valid: bool
    description: str = ""
    watcher_group: str | None = None
    timestamp: str = field(default_factory=_utcnow)


@dataclass(frozen=True)
class WebWatcherCheckResult(WatcherCheckResult):
    """Web check outcome, keeping the exact request/response pair for diagnostics.

    ``response`` is ``None`` only when the check timed out before anything came back.
    """

    uri: str = ""
    request: HttpRequest | None = None
    response: HttpResponse | None = None

    @classmethod
    def create(
        cls,
        watcher: WebWatcher,
        is_valid: bool,
        uri: str,
        request: HttpRequest,
        response: HttpResponse | None,
        description: str = "",
    ) -> WebWatcherCheckResult:
        return cls(
            watcher_name=watcher.name,
            watcher_type=watcher.watcher_type,
            watcher_group=watcher.group,
            is_valid=is_valid,
            description=description,
            uri=uri,
            request=request,
            response=response,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "watcher_name": self.watcher_name,
            "watcher_type": self.watcher_type,
            "watcher_group": self.watcher_group,
            "is_valid": self.is_valid,
            "description": self.description,
            "timestamp": self.timestamp,
            "uri": self.uri,
            "request": self.request.model_dump(mode="json") if self.request else None,
            "response": self.response.model_dump(mode="json") if self.response else None,
        }
