"""Shared fixtures for the smoke tool tests."""

from __future__ import annotations

from typing import Any, Callable
from unittest.mock import MagicMock

import pytest

ENDPOINT = "https://example.appsync-api.ap-northeast-1.amazonaws.com/graphql"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("APPSYNC_ENDPOINT", "AUTH_TOKEN", "APPSYNC_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def endpoint(monkeypatch: pytest.MonkeyPatch) -> str:
    monkeypatch.setenv("APPSYNC_ENDPOINT", ENDPOINT)
    return ENDPOINT


@pytest.fixture
def make_response() -> Callable[..., MagicMock]:
    """Build a fake ``requests.Response`` usable as a context manager."""

    def _make(status_code: int = 200, reason: str = "OK", body: Any = None, text: str = "") -> MagicMock:
        response = MagicMock()
        response.status_code = status_code
        response.reason = reason
        response.text = text
        if isinstance(body, Exception):
            response.json.side_effect = body
        else:
            response.json.return_value = body
        response.__enter__.return_value = response
        response.__exit__.return_value = False
        return response

    return _make
