"""Test utilities for asserting API responses and message codes."""

from typing import Any
from httpx import Response
from src.api.core.messages import MessageCode


def assert_success_response(
    response: Response,
    expected_message_code: MessageCode = MessageCode.SUCCESS,
    expected_status: int = 200,
    data_assertions: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Assert that response is successful with expected message code.

    Args:
        response: HTTP response to check
        expected_message_code: Expected message code
        expected_status: Expected HTTP status code
        data_assertions: Optional dict of assertions to run on response data

    Returns:
        Response data for further assertions
    """
    assert response.status_code == expected_status, (
        f"Expected status {expected_status}, got {response.status_code}. "
        f"Response: {response.text}"
    )

    json_data = response.json()

    assert json_data.get("message_code") == expected_message_code.value, (
        f"Expected message_code {expected_message_code.value}, "
        f"got {json_data.get('message_code')}"
    )
    assert "message" in json_data, "Success response should have message"

    if data_assertions:
        data = json_data.get("data")
        for field, expected_value in data_assertions.items():
            current = data
            # Nested field access like "word_count.original"
            for part in field.split("."):
                current = current[part]
            assert (
                current == expected_value
            ), f"Expected {field} to be {expected_value}, got {current}"

    return json_data.get("data")


def assert_error_response(
    response: Response,
    expected_message_code: MessageCode,
    expected_status: int,
    expected_error: str | None = None,
) -> dict[str, Any]:
    """Assert that response is an error with expected message code.

    Args:
        response: HTTP response to check
        expected_message_code: Expected error message code
        expected_status: Expected HTTP status code
        expected_error: Optional expected ``error`` text

    Returns:
        Response body for further assertions
    """
    assert response.status_code == expected_status, (
        f"Expected status {expected_status}, got {response.status_code}. "
        f"Response: {response.text}"
    )

    json_data = response.json()

    assert json_data.get("message_code") == expected_message_code.value, (
        f"Expected message_code {expected_message_code.value}, "
        f"got {json_data.get('message_code')}"
    )
    assert "error" in json_data, "Error response should have error"
    assert "details" in json_data, "Error response should have details"

    if expected_error:
        assert json_data.get("error") == expected_error, (
            f"Expected error '{expected_error}', " f"got '{json_data.get('error')}'"
        )

    return json_data


def assert_validation_error(response: Response) -> dict[str, Any]:
    """Assert that response is a request validation error."""
    json_data = assert_error_response(response, MessageCode.INVALID_INPUT, 400)
    assert json_data["details"].get("validation_errors"), "Expected field errors"
    return json_data


def assert_authentication_error(
    response: Response, expected_message_code: MessageCode = MessageCode.AUTH_REQUIRED
) -> dict[str, Any]:
    """Assert that response is an authentication error."""
    return assert_error_response(response, expected_message_code, 401)


def assert_internal_error(
    response: Response, expected_message_code: MessageCode
) -> dict[str, Any]:
    """Assert a 500 that hides the failure detail from the caller."""
    return assert_error_response(
        response,
        expected_message_code,
        500,
        expected_error="Internal server error",
    )
