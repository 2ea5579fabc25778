"""Send GraphQL requests to the AppSync endpoint and render what comes back."""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional, Tuple

import requests

logger = logging.getLogger(__name__)

ENDPOINT_ENV = "APPSYNC_ENDPOINT"
TOKEN_ENV = "AUTH_TOKEN"
TIMEOUT_ENV = "APPSYNC_TIMEOUT_SECONDS"

# Lambda authorizer placeholder
DEFAULT_AUTH_TOKEN = "aaaa"


class AppSyncSmokeError(RuntimeError):
    """Base error for the smoke tools."""


class ConfigurationError(AppSyncSmokeError):
    """Required configuration is missing or malformed."""


class TransportError(AppSyncSmokeError):
    """The HTTP request could not be completed."""


def require_endpoint() -> str:
    endpoint = os.getenv(ENDPOINT_ENV, "").strip()
    if not endpoint:
        raise ConfigurationError(f"{ENDPOINT_ENV} is required")
    return endpoint


def auth_token() -> str:
    return os.getenv(TOKEN_ENV) or DEFAULT_AUTH_TOKEN


def request_timeout() -> Optional[float]:
    """Return the opt-in request timeout; ``None`` waits indefinitely."""
    raw_value = os.getenv(TIMEOUT_ENV)
    if raw_value is None:
        return None

    try:
        value = float(raw_value)
    except ValueError:
        raise ConfigurationError(
            f"{TIMEOUT_ENV} must be a number, got {raw_value!r}"
        ) from None

    if value <= 0:
        raise ConfigurationError(f"{TIMEOUT_ENV} must be > 0, got {raw_value!r}")

    return value


def build_payload(query: str, variables: Dict[str, Any]) -> Dict[str, Any]:
    return {"query": query, "variables": variables}


def send(
    endpoint: str,
    query: str,
    variables: Dict[str, Any],
    *,
    token: Optional[str] = None,
    timeout: Optional[float] = None,
) -> Tuple[str, Optional[Dict[str, Any]]]:
    """POST a GraphQL document and return ``(status_line, body)``.

    ``body`` is the decoded JSON object, or ``None`` when the response is
    not a JSON object. Failures to complete the request raise ``TransportError``.
    """
    headers = {
        "Content-Type": "application/json",
        "Authorization": token if token is not None else auth_token(),
    }
    logger.debug("POST %s variables=%s", endpoint, sorted(variables))

    try:
        with requests.post(
            endpoint,
            json=build_payload(query, variables),
            headers=headers,
            timeout=timeout if timeout is not None else request_timeout(),
        ) as response:
            status_line = f"{response.status_code} {response.reason}"
            try:
                body = response.json()
            except ValueError:
                logger.debug("Response body is not JSON: %r", response.text[:200])
                body = None
            if body is not None and not isinstance(body, dict):
                logger.debug("Response body is not a JSON object: %r", body)
                body = None
    except requests.RequestException as exc:
        raise TransportError(f"POST {endpoint} failed: {exc}") from exc

    logger.debug("Received %s", status_line)
    return status_line, body


def render_body(body: Any) -> str:
    return json.dumps(body, indent=2, ensure_ascii=False)


def print_banner(title: str) -> None:
    print(f"\n=== {title} ===")


def print_response(status_line: str, body: Any) -> None:
    print(f"Status: {status_line}")
    print(f"Response: {render_body(body)}")
