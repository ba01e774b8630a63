"""Classification of GitHub failures into the provider error taxonomy."""

from __future__ import annotations

from typing import Any

import httpx

from projectpilot.core.contracts.exceptions import (
    AuthError,
    NotFoundError,
    ProviderError,
    RateLimitError,
    TransientError,
    UnknownError,
    ValidationError,
)
from projectpilot.core.providers.github._retrying_transport import is_rate_limited, retry_after_seconds

_STATUS_ERRORS: dict[int, type[ProviderError]] = {
    400: ValidationError,
    401: AuthError,
    403: AuthError,
    404: NotFoundError,
    410: NotFoundError,
    422: ValidationError,
}

_GRAPHQL_ERRORS: dict[str, type[ProviderError]] = {
    "UNAUTHORIZED": AuthError,
    "FORBIDDEN": AuthError,
    "INSUFFICIENT_SCOPES": AuthError,
    "NOT_FOUND": NotFoundError,
    "UNPROCESSABLE": ValidationError,
    "BAD_USER_INPUT": ValidationError,
    "ARGUMENT_ERROR": ValidationError,
    "RATE_LIMITED": RateLimitError,
    "SERVICE_UNAVAILABLE": TransientError,
    "INTERNAL": TransientError,
    "TIMEOUT": TransientError,
}


def _response_detail(response: httpx.Response) -> str:
    try:
        payload: Any = response.json()
    except ValueError:
        return response.text[:200] if response.text else f"HTTP {response.status_code}"
    if not isinstance(payload, dict):
        return str(payload)[:200]
    message = str(payload.get("message") or f"HTTP {response.status_code}")
    details = []
    for err in payload.get("errors") or []:
        if isinstance(err, dict):
            field = err.get("field")
            code = err.get("code") or err.get("message")
            details.append(f"{field}: {code}" if field else str(code))
        else:
            details.append(str(err))
    if details:
        message = f"{message} ({'; '.join(details)})"
    return message


def classify_response(response: httpx.Response, *, action: str) -> ProviderError:
    """Map a non-success HTTP response to a provider error."""
    status = response.status_code
    message = f"{action} failed: {_response_detail(response)}"
    if is_rate_limited(response):
        return RateLimitError(message, status_code=status, retry_after=retry_after_seconds(response))
    if status >= 500:
        return TransientError(message, status_code=status)
    error_cls = _STATUS_ERRORS.get(status, UnknownError)
    return error_cls(message, status_code=status)


def classify_transport_error(exc: httpx.TransportError, *, action: str) -> TransientError:
    return TransientError(f"{action} failed: {type(exc).__name__}: {exc}")


def classify_graphql_errors(errors: list[dict[str, Any]], *, action: str) -> ProviderError:
    """Map a GraphQL ``errors`` array to a provider error, using the first typed entry."""
    messages = "; ".join(str(err.get("message", err)) for err in errors) or "unknown GraphQL error"
    message = f"{action} failed: {messages}"
    for err in errors:
        error_cls = _GRAPHQL_ERRORS.get(str(err.get("type", "")).upper())
        if error_cls is not None:
            return error_cls(message)
    return UnknownError(message)
