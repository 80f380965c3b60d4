"""Web watcher: performs one HTTP check and classifies the outcome.

Per execution: dispatch, then (timeout | error | response), then status check,
then ensure-that predicates (async first, then sync), then the result.
Timeouts, bad status codes and rejected predicates come back as invalid
results; anything else raised after dispatch, including by a predicate, is
escalated as ``WatcherExecutionError``.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

import httpx

from webwatcher.errors import ArgumentNullError, InvalidArgumentError, WatcherExecutionError
from webwatcher.web.configuration import Configurator, WebWatcherConfiguration
from webwatcher.web.http import HttpRequest, HttpResponse
from webwatcher.web.result import WebWatcherCheckResult

logger = logging.getLogger(__name__)

DEFAULT_NAME = "Web Watcher"

_TIMEOUT_ERRORS = (httpx.TimeoutException, asyncio.TimeoutError, TimeoutError)


class WebWatcher:
    """Checks a single Web endpoint. The HTTP service is created once, here."""

    watcher_type = "web"

    def __init__(
        self,
        name: str,
        configuration: WebWatcherConfiguration,
        group: str | None = None,
    ) -> None:
        if not name:
            raise InvalidArgumentError("name", "Watcher name can not be empty.")
        if configuration is None:
            raise ArgumentNullError("configuration", "Web Watcher configuration has not been provided.")

        self.name = name
        self.group = group
        self.configuration = configuration
        self._http_service = configuration.http_service_provider()

    async def execute(self) -> WebWatcherCheckResult:
        config = self.configuration
        base_url = config.url
        full_url = config.request.full_url(base_url)

        logger.debug("Watcher '%s': %s %s", self.name, config.request.method.value, full_url)
        try:
            response = await self._http_service.execute(base_url, config.request, config.timeout)
        except _TIMEOUT_ERRORS:
            logger.warning("Watcher '%s': connection timeout for %s", self.name, full_url)
            return self._result(
                False, None,
                f"A connection timeout occurred while trying to access the Web endpoint: '{full_url}'.",
            )
        except Exception as exc:
            raise self._escalate(full_url, exc) from exc

        try:
            if not self._has_valid_response(response):
                return self._result(
                    False, response,
                    f"Web endpoint: '{full_url}' has returned an invalid response "
                    f"with status code: {response.status_code}.",
                )
            return await self._ensure(full_url, response)
        except Exception as exc:
            raise self._escalate(full_url, exc) from exc

    def _escalate(self, full_url: str, exc: Exception) -> WatcherExecutionError:
        logger.error("Watcher '%s': error accessing %s: %s", self.name, full_url, exc)
        return WatcherExecutionError(
            f"There was an error while trying to access the Web endpoint: '{full_url}'.",
            endpoint=full_url,
            cause=exc,
        )

    async def _ensure(self, full_url: str, response: HttpResponse) -> WebWatcherCheckResult:
        config = self.configuration
        is_valid = True
        if config.ensure_that_async is not None:
            is_valid = bool(await config.ensure_that_async(response))
        if config.ensure_that is not None:
            is_valid = is_valid and bool(config.ensure_that(response))

        return self._result(
            is_valid, response,
            f"Web endpoint: '{full_url}' has returned a response with status code: {response.status_code}.",
        )

    def _has_valid_response(self, response: HttpResponse) -> bool:
        return response.is_valid or self.configuration.skip_status_code_validation

    def _result(
        self, is_valid: bool, response: HttpResponse | None, description: str,
    ) -> WebWatcherCheckResult:
        result = WebWatcherCheckResult.create(
            self, is_valid, self.configuration.url, self.configuration.request, response, description,
        )
        logger.info("Watcher '%s': %s", self.name, "valid" if is_valid else "invalid")
        return result

    async def aclose(self) -> None:
        """Release the HTTP service, if it holds anything."""
        close = getattr(self._http_service, "aclose", None)
        if close is not None:
            await close()

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def create(
        cls,
        url: str,
        request: HttpRequest | None = None,
        configurator: Callable[[Configurator], object] | None = None,
        *,
        name: str = DEFAULT_NAME,
        group: str | None = None,
    ) -> WebWatcher:
        """Build a watcher for ``url``; ``configurator`` may adjust the configuration."""
        builder = (
            WebWatcherConfiguration.create(url)
            if request is None
            else WebWatcherConfiguration.create(url, request)
        )
        if configurator is not None:
            config = builder.as_configurator()
            configurator(config)
            builder = config.as_builder()
        return cls(name, builder.build(), group)

    @classmethod
    def from_configuration(
        cls,
        configuration: WebWatcherConfiguration,
        *,
        name: str = DEFAULT_NAME,
        group: str | None = None,
    ) -> WebWatcher:
        return cls(name, configuration, group)
