"""
Custom exceptions and error handling for SmartTrip.

Defines application-specific exceptions with error codes for consistent
error handling across Lambda functions and client communication.

Usage:
    from core.errors import NotFoundError, ErrorCode

    raise NotFoundError("Trip 42 not found", code=ErrorCode.TRIP_NOT_FOUND)
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Authentication errors
    AUTH_FAILED = "AUTH_FAILED"

    # Lookup errors
    TRIP_NOT_FOUND = "TRIP_NOT_FOUND"
    ITINERARY_ITEM_NOT_FOUND = "ITINERARY_ITEM_NOT_FOUND"

    # Persistence errors
    DATABASE_ERROR = "DATABASE_ERROR"
    PARTIAL_ITINERARY = "PARTIAL_ITINERARY"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.AUTH_FAILED: "Authentication failed. Please sign in again.",
    ErrorCode.TRIP_NOT_FOUND: "Trip not found.",
    ErrorCode.ITINERARY_ITEM_NOT_FOUND: "Itinerary item not found.",
    ErrorCode.DATABASE_ERROR: "Unable to save your changes right now. Please try again.",
    ErrorCode.PARTIAL_ITINERARY: "Your trip was created, but some itinerary items could not be saved.",
    ErrorCode.VALIDATION_ERROR: "Your request contains invalid information. Please check and try again.",
    ErrorCode.INVALID_REQUEST: "Invalid request format. Please try again.",
    ErrorCode.METHOD_NOT_ALLOWED: "This operation is not supported.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}


class SmartTripError(Exception):
    """Base exception for all SmartTrip errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class AuthenticationError(SmartTripError):
    """Caller identity missing from the request."""

    pass


class ValidationError(SmartTripError):
    """Input validation failed."""

    pass


class NotFoundError(SmartTripError):
    """Requested trip or itinerary item does not exist for the caller."""

    pass


class PersistenceError(SmartTripError):
    """A database operation failed."""

    pass


class ItineraryPersistenceError(PersistenceError):
    """Saving derived itinerary items stopped partway through.

    Items are written one at a time with no surrounding transaction, so
    ``created`` holds whatever was stored before ``failed_index``.
    """

    def __init__(
        self,
        message: str,
        created: list[Any],
        failed_index: int,
        code: ErrorCode = ErrorCode.PARTIAL_ITINERARY,
    ):
        self.created = created
        self.failed_index = failed_index
        super().__init__(message, code=code)
