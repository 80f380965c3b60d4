"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import AsyncMock

import pytest

from webwatcher.web.http import HttpResponse


@pytest.fixture
def ok_response() -> HttpResponse:
    return HttpResponse.valid(200, "Ok", {}, "")


@pytest.fixture
def make_service() -> Callable[..., AsyncMock]:
    """Build an AsyncMock HTTP service that returns ``response`` or raises ``side_effect``."""

    def _make(response: HttpResponse | None = None, side_effect: BaseException | None = None) -> AsyncMock:
        service = AsyncMock()
        if side_effect is not None:
            service.execute.side_effect = side_effect
        else:
            service.execute.return_value = response
        return service

    return _make
