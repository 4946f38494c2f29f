"""API key extraction and client identification."""

import hmac
from collections.abc import Mapping

from settings import API_KEY_MIN_LENGTH
from web.api.errors import AuthenticationError, ForbiddenError

API_KEY_HEADERS = ["X-API-Key", "API-Key", "Authorization: Bearer <token>"]


def extract_bearer_token(auth_header: str | None) -> str | None:
    """Token from an ``Authorization: Bearer <token>`` header."""
    if not auth_header:
        return None
    parts = auth_header.split(" ")
    if len(parts) == 2 and parts[0].lower() == "bearer":
        return parts[1]
    return None


def extract_api_key(headers: Mapping[str, str]) -> str | None:
    """API key from X-API-Key, API-Key or a bearer token, in that order."""
    return headers.get("x-api-key") or headers.get("api-key") or extract_bearer_token(headers.get("authorization"))


def check_api_key(api_key: str | None, expected: str | None) -> str | None:
    """Validate the supplied key against the configured one.

    With no key configured the API is open and the supplied key (if any) is
    only used to identify the client.
    """
    if expected is None:
        return api_key
    if not api_key:
        raise AuthenticationError(
            "API key required. Please provide an API key in one of these headers: "
            "X-API-Key, API-Key, or Authorization: Bearer <token>"
        )
    if len(api_key) < API_KEY_MIN_LENGTH or not hmac.compare_digest(api_key, expected):
        raise ForbiddenError()
    return api_key


def resolve_client_id(api_key: str | None, remote_addr: str | None) -> str:
    """Rate limit identity: the API key when present, otherwise the network origin."""
    if api_key:
        return f"key:{api_key}"
    return f"ip:{remote_addr or 'unknown'}"
