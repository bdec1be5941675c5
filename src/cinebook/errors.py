"""Domain errors raised by the services and mapped to HTTP responses."""

from typing import Any


class ServiceError(Exception):
    """Base class for errors the HTTP layer turns into a JSON response."""

    status_code: int = 500

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "error": type(self).__name__,
            "message": self.message,
            "status": self.status_code,
        }
        if self.details:
            body["details"] = self.details
        return body


class BadRequestError(ServiceError):
    """Malformed input, or a status change the booking is already in."""

    status_code = 400


class NotFoundError(ServiceError):
    """A referenced movie, hall, screening, booking or seat does not exist."""

    status_code = 404


class ConflictError(ServiceError):
    """Overlapping screening, or a seat that is already booked."""

    status_code = 409
