"""Request/response value types exchanged with an HTTP executor.

Both models are frozen, headers included (they are read-only mappings).
A request says what to call (method, endpoint relative to the watcher's base
URL, optional body, headers); a response is what the executor observed.
Header names compare case-insensitively.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class HttpMethod(str, Enum):
    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"


def full_url(base_url: str, endpoint: str | None) -> str:
    """Join a base URL and an endpoint with exactly one ``/`` between them.

    A blank endpoint means "the base URL as-is".
    """
    if not endpoint or not endpoint.strip():
        return base_url
    return f"{base_url.rstrip('/')}/{endpoint.lstrip('/')}"


def _fold_headers(headers: Mapping[str, str] | None) -> dict[str, str]:
    """Drop duplicate names that differ only by case; the last one wins."""
    folded: dict[str, tuple[str, str]] = {}
    for name, value in (headers or {}).items():
        folded[name.lower()] = (name, value)
    return dict(folded.values())


def _lookup(headers: Mapping[str, str], name: str) -> str | None:
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


# ── Request ──────────────────────────────────────────────────────────────────


class HttpRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    method: HttpMethod
    endpoint: str = ""
    data: Any = None
    headers: Mapping[str, str] = Field(default_factory=dict, validate_default=True)

    @field_validator("endpoint", mode="before")
    @classmethod
    def _endpoint_not_none(cls, value: str | None) -> str:
        return value or ""

    @field_validator("headers", mode="before")
    @classmethod
    def _fold(cls, value: Mapping[str, str] | None) -> dict[str, str]:
        return _fold_headers(value)

    @field_validator("headers")
    @classmethod
    def _freeze(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("headers")
    def _dump_headers(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)

    def header(self, name: str) -> str | None:
        return _lookup(self.headers, name)

    def full_url(self, base_url: str) -> str:
        return full_url(base_url, self.endpoint)

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def get(cls, endpoint: str = "", headers: dict[str, str] | None = None) -> HttpRequest:
        return cls(method=HttpMethod.GET, endpoint=endpoint, headers=headers)

    @classmethod
    def put(
        cls, endpoint: str = "", data: Any = None, headers: dict[str, str] | None = None,
    ) -> HttpRequest:
        return cls(method=HttpMethod.PUT, endpoint=endpoint, data=data, headers=headers)

    @classmethod
    def post(
        cls, endpoint: str = "", data: Any = None, headers: dict[str, str] | None = None,
    ) -> HttpRequest:
        return cls(method=HttpMethod.POST, endpoint=endpoint, data=data, headers=headers)

    @classmethod
    def delete(cls, endpoint: str = "", headers: dict[str, str] | None = None) -> HttpRequest:
        return cls(method=HttpMethod.DELETE, endpoint=endpoint, headers=headers)


# ── Response ─────────────────────────────────────────────────────────────────


class HttpResponse(BaseModel):
    """What the executor got back. ``is_valid`` is the transport-success flag (2xx)."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    is_valid: bool
    reason_phrase: str = ""
    headers: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    data: str = ""

    @field_validator("headers", mode="before")
    @classmethod
    def _fold(cls, value: Mapping[str, str] | None) -> dict[str, str]:
        return _fold_headers(value)

    @field_validator("headers")
    @classmethod
    def _freeze(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("headers")
    def _dump_headers(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)

    @field_validator("reason_phrase", "data", mode="before")
    @classmethod
    def _text_not_none(cls, value: str | None) -> str:
        return value or ""

    def header(self, name: str) -> str | None:
        return _lookup(self.headers, name)

    @classmethod
    def valid(
        cls,
        status_code: int,
        reason_phrase: str = "",
        headers: dict[str, str] | None = None,
        data: str = "",
    ) -> HttpResponse:
        return cls(
            status_code=status_code, is_valid=True,
            reason_phrase=reason_phrase, headers=headers, data=data,
        )

    @classmethod
    def invalid(
        cls,
        status_code: int,
        reason_phrase: str = "",
        headers: dict[str, str] | None = None,
        data: str = "",
    ) -> HttpResponse:
        return cls(
            status_code=status_code, is_valid=False,
            reason_phrase=reason_phrase, headers=headers, data=data,
        )
