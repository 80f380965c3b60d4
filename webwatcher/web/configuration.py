"""Web watcher configuration and its fluent assemblers.

``Builder`` is used for direct construction and ends with ``build()``.
``Configurator`` is what ``WebWatcher.create`` hands to a user callback; it has
the same methods minus ``build()``. Both share one validation implementation
and convert into each other explicitly.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, replace
from datetime import timedelta
from typing import Any, TypeVar

import httpx

from webwatcher.errors import ArgumentNullError, InvalidArgumentError, UriFormatError
from webwatcher.web.http import HttpRequest, HttpResponse
from webwatcher.web.service import HttpService, HttpxService

logger = logging.getLogger(__name__)

EnsureThat = Callable[[HttpResponse], bool]
EnsureThatAsync = Callable[[HttpResponse], Awaitable[bool]]
HttpServiceProvider = Callable[[], HttpService]

_UNSET: Any = object()


def _default_http_service() -> HttpService:
    return HttpxService()


def _parse_uri(url: str) -> httpx.URL:
    if url is None:
        raise ArgumentNullError("url", "URL can not be null.")
    if not isinstance(url, str):
        raise InvalidArgumentError("url", f"URL must be a string, got {type(url).__name__}.")
    if not url.strip():
        raise InvalidArgumentError("url", "URL can not be empty.")
    try:
        uri = httpx.URL(url.strip())
    except httpx.InvalidURL as exc:
        raise UriFormatError(url, str(exc)) from exc
    if uri.scheme not in ("http", "https") or not uri.host:
        raise UriFormatError(url, "an absolute http(s) URI is required")
    return uri


@dataclass(frozen=True)
class WebWatcherConfiguration:
    """Immutable settings for one Web watcher, reused by every execution."""

    uri: httpx.URL
    request: HttpRequest
    http_service_provider: HttpServiceProvider = _default_http_service
    timeout: float | None = None
    skip_status_code_validation: bool = False
    ensure_that: EnsureThat | None = None
    ensure_that_async: EnsureThatAsync | None = None

    def __post_init__(self) -> None:
        if self.uri is None:
            raise ArgumentNullError("uri", "URI can not be null.")
        if self.request is None:
            raise ArgumentNullError("request", "Request can not be null.")

    @property
    def url(self) -> str:
        return str(self.uri)

    @classmethod
    def create(cls, url: str, request: HttpRequest = _UNSET) -> Builder:
        """Start a fluent builder; an omitted request means a plain GET."""
        return Builder(url, HttpRequest.get() if request is _UNSET else request)


# ── Assemblers ───────────────────────────────────────────────────────────────

T = TypeVar("T", bound="_Assembler")


class _Assembler:
    """Validation and fluent setters shared by ``Builder`` and ``Configurator``."""

    def __init__(self, configuration: WebWatcherConfiguration) -> None:
        if configuration is None:
            raise ArgumentNullError("configuration", "Web Watcher configuration has not been provided.")
        self._configuration = configuration

    def _set(self: T, **changes: object) -> T:
        self._configuration = replace(self._configuration, **changes)
        return self

    def with_request(self: T, request: HttpRequest) -> T:
        if request is None:
            raise ArgumentNullError("request", "HTTP request can not be null.")
        return self._set(request=request)

    def with_timeout(self: T, timeout: float | timedelta) -> T:
        if timeout is None:
            raise ArgumentNullError("timeout", "Timeout can not be null.")
        seconds = timeout.total_seconds() if isinstance(timeout, timedelta) else float(timeout)
        if not math.isfinite(seconds) or seconds <= 0:
            raise InvalidArgumentError("timeout", "Timeout must be a finite number greater than zero.")
        return self._set(timeout=seconds)

    def skip_status_code_validation(self: T) -> T:
        return self._set(skip_status_code_validation=True)

    def ensure_that(self: T, ensure_that: EnsureThat) -> T:
        if ensure_that is None:
            raise ArgumentNullError("ensure_that", "Ensure that predicate can not be null.")
        if not callable(ensure_that):
            raise InvalidArgumentError("ensure_that", "Ensure that predicate must be callable.")
        return self._set(ensure_that=ensure_that)

    def ensure_that_async(self: T, ensure_that: EnsureThatAsync) -> T:
        if ensure_that is None:
            raise ArgumentNullError("ensure_that_async", "Ensure that async predicate can not be null.")
        if not callable(ensure_that):
            raise InvalidArgumentError("ensure_that_async", "Ensure that async predicate must be callable.")
        return self._set(ensure_that_async=ensure_that)

    def with_http_service_provider(self: T, provider: HttpServiceProvider) -> T:
        if provider is None:
            raise ArgumentNullError("http_service_provider", "HTTP service provider can not be null.")
        if not callable(provider):
            raise InvalidArgumentError("http_service_provider", "HTTP service provider must be callable.")
        return self._set(http_service_provider=provider)


class Builder(_Assembler):
    def __init__(self, url: str, request: HttpRequest) -> None:
        if request is None:
            raise ArgumentNullError("request", "Request can not be null.")
        super().__init__(WebWatcherConfiguration(uri=_parse_uri(url), request=request))

    @classmethod
    def _wrap(cls, configuration: WebWatcherConfiguration) -> Builder:
        builder = cls.__new__(cls)
        _Assembler.__init__(builder, configuration)
        return builder

    def build(self) -> WebWatcherConfiguration:
        """Snapshot the configuration; later builder calls do not affect it."""
        logger.debug("Built Web watcher configuration for %s", self._configuration.url)
        return self._configuration

    def as_configurator(self) -> Configurator:
        return Configurator(self._configuration)


class Configurator(_Assembler):
    """Callback flavor of the builder, without ``build()``."""

    def as_builder(self) -> Builder:
        return Builder._wrap(self._configuration)
