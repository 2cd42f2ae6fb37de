# gplaces/errors.py
from typing import Optional


class RequestValidationError(ValueError):
    """A request was flattened with invalid field values."""


class MissingRequiredField(RequestValidationError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name} is required")


class OutOfRange(RequestValidationError):
    def __init__(self, name: str, minimum: float, maximum: float):
        self.name = name
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"{name} must be greater than or equal to {minimum} and less than or equal to {maximum}"
        )


class PlacesApiError(RuntimeError):
    """The Places web service answered with a non-success status."""

    def __init__(self, endpoint: str, status: Optional[str], message: Optional[str] = None):
        self.endpoint = endpoint
        self.status = status
        self.message = message
        super().__init__(f"{endpoint} error: status={status}, msg={message}")
