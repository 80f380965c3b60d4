"""HTTP executor used by the Web watcher.

``HttpService`` is the contract the watcher depends on; ``HttpxService`` is the
default implementation on top of a single shared ``httpx.AsyncClient``.
Timeouts surface as ``httpx.TimeoutException`` and are classified by the caller.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

import httpx

from webwatcher.config import settings
from webwatcher.web.http import HttpMethod, HttpRequest, HttpResponse, full_url

logger = logging.getLogger(__name__)


@runtime_checkable
class HttpService(Protocol):
    async def execute(
        self, base_url: str, request: HttpRequest, timeout: float | None = None,
    ) -> HttpResponse:
        ...


class HttpxService:
    """Async httpx executor. One client per service, safe to share across checks."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        timeout: float | None = None,
        user_agent: str | None = None,
        follow_redirects: bool | None = None,
    ) -> None:
        if client is None:
            client = httpx.AsyncClient(
                timeout=timeout or settings.watcher_default_timeout,
                follow_redirects=(
                    settings.watcher_follow_redirects if follow_redirects is None else follow_redirects
                ),
                headers={"User-Agent": user_agent or settings.watcher_user_agent},
            )
        self._client = client

    async def execute(
        self, base_url: str, request: HttpRequest, timeout: float | None = None,
    ) -> HttpResponse:
        url = full_url(base_url, request.endpoint)
        kwargs: dict[str, Any] = {"headers": dict(request.headers)}
        if timeout is not None and timeout > 0:
            kwargs["timeout"] = timeout
        if request.method in (HttpMethod.POST, HttpMethod.PUT):
            kwargs["json"] = request.data if request.data is not None else {}

        logger.debug("%s %s", request.method.value, url)
        resp = await self._client.request(request.method.value, url, **kwargs)

        headers: dict[str, str] = {}
        for name, value in resp.headers.multi_items():
            headers.setdefault(name, value)

        factory = HttpResponse.valid if resp.is_success else HttpResponse.invalid
        return factory(resp.status_code, resp.reason_phrase, headers, resp.text)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> HttpxService:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
