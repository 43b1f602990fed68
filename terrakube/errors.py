"""Error types raised by the Terrakube client."""

from __future__ import annotations


class ValidationError(ValueError):
    """Raised when a required argument fails client-side validation."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class APIError(Exception):
    """Raised when the Terrakube API answers with an error status."""

    def __init__(self, status_code: int, message: str, body: bytes = b"") -> None:
        super().__init__(f"API error {status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.body = body


def is_not_found(err: BaseException) -> bool:
    """Return True if ``err`` is an API error with status 404."""
    return isinstance(err, APIError) and err.status_code == 404


def validate_id(field: str, value: str | None) -> None:
    """Raise ValidationError if ``value`` is empty."""
    if not value:
        raise ValidationError(field, "must not be empty")