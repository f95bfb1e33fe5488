"""
Error handling module.

This module provides the exception types used across Catalyst, helpers for
turning failed HTTP responses into readable messages, and the retry-with-backoff
wrapper used before every call to a generative AI endpoint.
"""

import time
import logging
from typing import Dict, Any, Optional, Callable

import requests

from catalyst.core.constants import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_INITIAL_DELAY,
    RATE_LIMIT_STATUS,
    RETRIES_EXHAUSTED_MESSAGE
)
from catalyst.core.logging_config import redact_url, truncate_for_logging

logger = logging.getLogger(__name__)

class APIError(Exception):
    """
    Exception raised for API errors.

    Attributes:
        message: Error message.
        status_code: HTTP status code.
        response: API response.
        endpoint: API endpoint.
        request_data: Request data.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response: Optional[Any] = None,
        endpoint: Optional[str] = None,
        request_data: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.response = response
        self.endpoint = redact_url(endpoint) if endpoint else endpoint
        self.request_data = request_data

        detailed_message = f"API Error: {message}"
        if status_code:
            detailed_message += f" (Status Code: {status_code})"
        if self.endpoint:
            detailed_message += f" (Endpoint: {self.endpoint})"

        super().__init__(detailed_message)


class RateLimitError(APIError):
    """Raised when an endpoint keeps answering 429 until the retry budget runs out."""


class ResponseFormatError(APIError):
    """Raised when a provider response is missing the fields we need."""


class ValidationError(Exception):
    """
    Exception raised for validation errors.

    Attributes:
        message: Error message.
        field: Field that failed validation.
        value: Value that failed validation.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None
    ):
        self.message = message
        self.field = field
        self.value = value

        detailed_message = f"Validation Error: {message}"
        if field:
            detailed_message += f" (Field: {field})"

        super().__init__(detailed_message)


class RequestInFlightError(ValidationError):
    """Raised when an action starts while a request of the same kind is outstanding."""


class ConfigurationError(Exception):
    """
    Exception raised for configuration errors.

    Attributes:
        message: Error message.
        component: Component that has a configuration error.
        missing_keys: Keys that are missing from the configuration.
    """

    def __init__(
        self,
        message: str,
        component: Optional[str] = None,
        missing_keys: Optional[list] = None
    ):
        self.message = message
        self.component = component
        self.missing_keys = missing_keys or []

        detailed_message = f"Configuration Error: {message}"
        if component:
            detailed_message += f" (Component: {component})"
        if missing_keys:
            detailed_message += f" (Missing Keys: {', '.join(missing_keys)})"

        super().__init__(detailed_message)


class CredentialError(Exception):
    """
    Exception raised when a bearer credential cannot be obtained.

    Attributes:
        message: Error message.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


def error_message(error: Exception) -> str:
    """
    Get the human-readable message of an exception.

    Catalyst exceptions carry a bare ``message`` next to their decorated
    ``str()``; anything else falls back to ``str(error)``.
    """
    return getattr(error, "message", None) or str(error) or error.__class__.__name__


def extract_error_message(response: requests.Response) -> str:
    """
    Extract a human-readable message from a failed HTTP response.

    Understands the Google error envelope ``{"error": {"message": ...}}`` and the
    proxy's ``{"error": "..."}``. Anything else, including a body that is not
    JSON at all, falls back to the HTTP status.

    Args:
        response: The failed response.

    Returns:
        str: Error message, never empty.
    """
    try:
        data = response.json()
    except ValueError:
        data = None

    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str) and error:
            return error

    message = f"HTTP error! status: {response.status_code}"
    reason = getattr(response, "reason", None)
    if isinstance(reason, str) and reason:
        message += f" {reason}"
    return message


def _send(url: str, options: Dict[str, Any], timeout: Optional[float]) -> requests.Response:
    method = options.get("method", "POST")
    kwargs = {"headers": options.get("headers") or {}, "timeout": timeout}
    if "json" in options:
        kwargs["json"] = options["json"]
    elif "body" in options:
        kwargs["data"] = options["body"]
    return requests.request(method, url, **kwargs)


def request_json(
    url: str,
    options: Optional[Dict[str, Any]] = None,
    timeout: Optional[float] = None
) -> Any:
    """
    Make a single JSON HTTP request without retrying.

    Args:
        url: Target URL.
        options: Request options (``method``, ``headers``, ``json`` or ``body``).
        timeout: Socket timeout in seconds.

    Returns:
        The parsed JSON body of a successful response.

    Raises:
        APIError: If the response is not successful.
        requests.exceptions.RequestException: On network failure.
    """
    options = options or {}
    response = _send(url, options, timeout)
    if response.ok:
        return response.json()

    raise APIError(
        message=extract_error_message(response),
        status_code=response.status_code,
        response=response.text,
        endpoint=url
    )


def fetch_with_backoff(
    url: str,
    options: Optional[Dict[str, Any]] = None,
    max_retries: int = DEFAULT_MAX_RETRIES,
    initial_delay: float = DEFAULT_INITIAL_DELAY,
    timeout: Optional[float] = None,
    sleep: Callable[[float], None] = time.sleep
) -> Any:
    """
    Call a JSON HTTP endpoint, retrying with exponential backoff.

    A 429 response waits and repeats the same request. Any other non-OK
    response raises an APIError carrying the provider's message; that error,
    like network failures and unparseable success bodies, is also retried
    until the final attempt, where it propagates. The delay starts at
    ``initial_delay`` on every call and doubles after each retry.

    Args:
        url: Target URL.
        options: Request options (``method``, ``headers``, ``json`` or ``body``).
        max_retries: Total number of attempts.
        initial_delay: Seconds to wait before the first retry.
        timeout: Socket timeout in seconds.
        sleep: Function used to wait between attempts.

    Returns:
        The parsed JSON body of the first successful response.

    Raises:
        APIError: The last failure once the budget is exhausted.
        RateLimitError: If the final attempt was rate limited.
        requests.exceptions.RequestException: If the final attempt failed on the network.
    """
    options = options or {}
    delay = initial_delay
    safe_url = redact_url(url)

    for attempt in range(max_retries):
        try:
            response = _send(url, options, timeout)
            if response.ok:
                return response.json()
            elif response.status_code == RATE_LIMIT_STATUS:
                logger.warning(
                    f"Rate limited by {safe_url}, retrying in {delay} seconds "
                    f"(attempt {attempt + 1}/{max_retries})"
                )
                sleep(delay)
                delay *= 2
            else:
                raise APIError(
                    message=extract_error_message(response),
                    status_code=response.status_code,
                    response=truncate_for_logging(response.text),
                    endpoint=url
                )
        except (requests.exceptions.RequestException, APIError, ValueError) as e:
            if attempt == max_retries - 1:
                logger.error(f"Request to {safe_url} failed after {max_retries} attempts: {error_message(e)}")
                raise
            logger.warning(
                f"Request to {safe_url} failed ({error_message(e)}), retrying in {delay} seconds "
                f"(attempt {attempt + 1}/{max_retries})"
            )
            sleep(delay)
            delay *= 2

    raise RateLimitError(
        message=RETRIES_EXHAUSTED_MESSAGE,
        status_code=RATE_LIMIT_STATUS,
        endpoint=url
    )

