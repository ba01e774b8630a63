from __future__ import annotations

import httpx
import pytest

from projectpilot.core.contracts.exceptions import (
    AuthError,
    NotFoundError,
    ProviderError,
    RateLimitError,
    TransientError,
    UnknownError,
    ValidationError,
)
from projectpilot.core.providers.github.errors import (
    classify_graphql_errors,
    classify_response,
    classify_transport_error,
)


@pytest.mark.parametrize(
    ("status", "headers", "expected"),
    [
        (400, {}, ValidationError),
        (401, {}, AuthError),
        (403, {}, AuthError),
        (403, {"x-ratelimit-remaining": "0"}, RateLimitError),
        (403, {"retry-after": "30"}, RateLimitError),
        (404, {}, NotFoundError),
        (410, {}, NotFoundError),
        (422, {}, ValidationError),
        (429, {}, RateLimitError),
        (500, {}, TransientError),
        (503, {}, TransientError),
        (418, {}, UnknownError),
    ],
)
def test_classify_response(status: int, headers: dict[str, str], expected: type[ProviderError]) -> None:
    error = classify_response(httpx.Response(status, headers=headers), action="Create issue")

    assert type(error) is expected
    assert error.status_code == status
    assert str(error).startswith("Create issue failed: ")


def test_classify_response_includes_rest_error_details() -> None:
    response = httpx.Response(
        422,
        json={
            "message": "Validation Failed",
            "errors": [{"resource": "Milestone", "field": "title", "code": "already_exists"}],
        },
    )

    error = classify_response(response, action="Create milestone")

    assert isinstance(error, ValidationError)
    assert str(error) == "Create milestone failed: Validation Failed (title: already_exists)"


def test_classify_response_rate_limit_carries_retry_after() -> None:
    error = classify_response(httpx.Response(429, headers={"retry-after": "12"}), action="List projects")

    assert isinstance(error, RateLimitError)
    assert error.retry_after == 12.0
    assert error.retryable


def test_classify_response_non_json_body() -> None:
    error = classify_response(httpx.Response(502, text="<html>Bad gateway</html>"), action="Fetch issue")

    assert isinstance(error, TransientError)
    assert "Bad gateway" in str(error)


def test_classify_transport_error_is_retryable() -> None:
    error = classify_transport_error(httpx.ReadTimeout("timed out"), action="Create issue")

    assert isinstance(error, TransientError)
    assert error.retryable
    assert "ReadTimeout" in str(error)


@pytest.mark.parametrize(
    ("error_type", "expected"),
    [
        ("NOT_FOUND", NotFoundError),
        ("FORBIDDEN", AuthError),
        ("UNPROCESSABLE", ValidationError),
        ("RATE_LIMITED", RateLimitError),
        ("SERVICE_UNAVAILABLE", TransientError),
        ("SOMETHING_NEW", UnknownError),
    ],
)
def test_classify_graphql_errors_by_type(error_type: str, expected: type[ProviderError]) -> None:
    error = classify_graphql_errors([{"type": error_type, "message": "boom"}], action="Create project")

    assert type(error) is expected
    assert str(error) == "Create project failed: boom"


def test_classify_graphql_errors_uses_first_typed_entry() -> None:
    errors = [
        {"message": "untyped"},
        {"type": "NOT_FOUND", "message": "Could not resolve to a Repository"},
    ]

    error = classify_graphql_errors(errors, action="List projects")

    assert isinstance(error, NotFoundError)
    assert "untyped; Could not resolve to a Repository" in str(error)
