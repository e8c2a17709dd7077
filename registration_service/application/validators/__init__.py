from .registration_validator import (
    MIN_PASSWORD_LENGTH,
    RegistrationValidator,
    normalize_email,
    validate_new_email,
)

__all__ = [
    "MIN_PASSWORD_LENGTH",
    "RegistrationValidator",
    "normalize_email",
    "validate_new_email",
]
