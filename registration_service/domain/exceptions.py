"""
Exception hierarchy for the registration domain.

Raised by the validator, repositories, notification adapters and use cases.
All errors inherit from RegistrationServiceError and can carry a
user-facing message plus structured details for the HTTP layer.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, List, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class RegistrationServiceError(Exception):
    """Base exception for all registration service errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or "An error occurred. Please try again."
        self.details = details or {}


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


class ValidationError(RegistrationServiceError):
    """Raised when caller input violates one or more rules.

    ``errors`` holds every violation, in rule order.
    """

    def __init__(self, errors: List[str], message: Optional[str] = None):
        self.errors = list(errors)
        super().__init__(
            message or "Validation failed: " + "; ".join(self.errors),
            user_message="Please correct the highlighted fields and try again.",
            details={"errors": self.errors},
        )


# -----------------------------------------------------------------------------
# Infrastructure failures
# -----------------------------------------------------------------------------


class PersistenceError(RegistrationServiceError):
    """Raised when the storage layer fails to read or write a user."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message,
            user_message="The service is temporarily unavailable. Please try again later.",
            details=details,
        )


class NotificationError(RegistrationServiceError):
    """Raised when a notification (e.g. welcome email) cannot be delivered."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message,
            user_message="We could not send you an email right now.",
            details=details,
        )


# -----------------------------------------------------------------------------
# Authentication / lookup
# -----------------------------------------------------------------------------


class AuthenticationError(RegistrationServiceError):
    """Raised when a token is invalid, expired or incomplete."""

    def __init__(self, message: str):
        super().__init__(message, user_message="Invalid or expired credentials.")


class UserNotFoundError(RegistrationServiceError):
    """Raised when a user looked up by id does not exist."""

    def __init__(self, user_id: Optional[str]):
        super().__init__(
            f"User not found: {user_id}",
            user_message="User not found.",
            details={"user_id": user_id},
        )
        self.user_id = user_id
