"""Error taxonomy for Web watchers.

Construction problems fail fast as ``ConfigurationError`` subclasses.
Anything unexpected during an execution is escalated as ``WatcherExecutionError``.
Timeouts, bad status codes and failed predicates are not errors at all: they
come back as invalid check results.
"""

from __future__ import annotations


class WebWatcherError(Exception):
    """Base class for everything raised by this package."""


# ── Construction errors ──────────────────────────────────────────────────────


class ConfigurationError(WebWatcherError, ValueError):
    """Raised while assembling a watcher or its configuration."""


class ArgumentNullError(ConfigurationError):
    """Raised when a required argument is ``None``."""

    def __init__(self, argument: str, message: str | None = None) -> None:
        self.argument = argument
        super().__init__(message or f"{argument} can not be null.")


class InvalidArgumentError(ConfigurationError):
    """Raised when an argument is present but unusable (empty, zero, not callable)."""

    def __init__(self, argument: str, message: str) -> None:
        self.argument = argument
        super().__init__(message)


class UriFormatError(ConfigurationError):
    """Raised when the base URL is not an absolute http(s) URI."""

    def __init__(self, url: str, reason: str = "") -> None:
        self.url = url
        detail = f" ({reason})" if reason else ""
        super().__init__(f"Invalid URI: '{url}'{detail}.")


# ── Execution errors ─────────────────────────────────────────────────────────


class WatcherExecutionError(WebWatcherError):
    """Raised when a check could not be completed for an unexpected reason."""

    def __init__(self, message: str, endpoint: str, cause: BaseException | None = None) -> None:
        self.endpoint = endpoint
        self.cause = cause
        super().__init__(message)
