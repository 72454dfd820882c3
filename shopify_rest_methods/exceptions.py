"""
Custom exception classes for Shopify REST Methods Library.

Provides the error taxonomy surfaced by the request dispatcher and the
pagination extractor, plus the classifier that turns a failed HTTP response
into one of those errors.
"""

import json
from typing import Dict, Any, List, Mapping, Optional, Union

from .constants import ERROR_MESSAGES, Headers, StatusCodes


class ShopifyError(Exception):
    """
    Base exception for all Shopify REST errors.

    Attributes:
        message (str): Error message, also the string form of the error
        status_code (Optional[int]): HTTP status code if applicable
        details (Dict[str, Any]): Additional error details
    """

    def __init__(self, message: str, status_code: Optional[int] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or {}

    def __str__(self):
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "status_code": self.status_code,
            "details": self.details,
        }


class DecodingError(ShopifyError):
    """
    Raised when a successful response (or its Link header) cannot be decoded.

    Attributes:
        body (bytes): The raw body that failed to decode, if any
    """

    def __init__(self, message: str, body: Optional[bytes] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.body = body


class APIError(ShopifyError):
    """
    Raised when Shopify answers with a non-2xx status and a structured error body.

    Attributes:
        errors (List[str]): Individual error messages extracted from the body
    """

    def __init__(self, message: str, status_code: Optional[int] = None,
                 errors: Optional[List[str]] = None, **kwargs):
        super().__init__(message, status_code=status_code, **kwargs)
        self.errors = errors or []

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["errors"] = self.errors
        return data


class UnknownError(APIError):
    """Raised for non-2xx responses whose body carries no usable error message."""

    def __init__(self, status_code: Optional[int] = None, **kwargs):
        super().__init__(ERROR_MESSAGES['unknown'], status_code=status_code, **kwargs)


class RateLimitError(APIError):
    """
    Raised on 429 responses.

    The library never waits or retries; `retry_after` is exposed so callers
    can schedule their own back-off.
    """

    def __init__(self, message: str = ERROR_MESSAGES['unknown'],
                 retry_after: Optional[float] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["retry_after"] = self.retry_after
        return data


class AuthenticationError(ShopifyError):
    """Raised when the client is configured without usable credentials."""

    def __init__(self, message: str = "Authentication failed", **kwargs):
        super().__init__(message, **kwargs)


class ValidationError(ShopifyError):
    """
    Raised when caller-supplied input is rejected before any request is made.

    Attributes:
        field (Optional[str]): The field that failed validation
    """

    def __init__(self, message: str = "Validation failed",
                 field: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field


def _load_error_body(body: Union[bytes, str, None]) -> Any:
    """Parse an error body, returning None when it is empty or not JSON."""
    if not body:
        return None
    try:
        return json.loads(body)
    except ValueError:
        return None


def extract_error_messages(response_data: Any) -> List[str]:
    """
    Pull the error messages out of a decoded Shopify error body.

    Recognized shapes:
        {"errors": "message"}
        {"errors": ["message", ...]}
        {"errors": {"field": ["message", ...]}}
        {"error": "message"}

    Field mappings are rendered as "field: message" and sorted so the joined
    message does not depend on key order.
    """
    if not isinstance(response_data, dict):
        return []

    errors = response_data.get("errors")
    if errors is None:
        errors = response_data.get("error")

    if isinstance(errors, str):
        return [errors] if errors else []

    if isinstance(errors, list):
        return [str(error) for error in errors]

    if isinstance(errors, dict):
        messages = []
        for field, value in errors.items():
            if isinstance(value, list):
                messages.extend(f"{field}: {item}" for item in value)
            elif isinstance(value, str):
                messages.append(f"{field}: {value}")
        return sorted(messages)

    return []


def _parse_retry_after(headers: Optional[Mapping[str, str]]) -> Optional[float]:
    if not headers:
        return None
    value = headers.get(Headers.RETRY_AFTER)
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def create_exception_from_response(
    status_code: int,
    body: Union[bytes, str, None] = None,
    headers: Optional[Mapping[str, str]] = None
) -> APIError:
    """
    Create the appropriate exception for a non-2xx response.

    Args:
        status_code: HTTP status code
        body: Raw response body
        headers: Response headers (used for Retry-After on 429)

    Returns:
        APIError, RateLimitError or UnknownError
    """
    response_data = _load_error_body(body)
    messages = extract_error_messages(response_data)
    details = {"response": response_data} if response_data is not None else None

    if status_code == StatusCodes.TOO_MANY_REQUESTS:
        return RateLimitError(
            message=", ".join(messages) if messages else ERROR_MESSAGES['unknown'],
            status_code=status_code,
            errors=messages,
            retry_after=_parse_retry_after(headers),
            details=details,
        )

    if not messages:
        return UnknownError(status_code=status_code, details=details)

    return APIError(
        ", ".join(messages),
        status_code=status_code,
        errors=messages,
        details=details,
    )
