# Standard library imports
from typing import List, Optional

# External package imports
from email_validator import EmailNotValidError, validate_email

# Local application imports
from ...domain.exceptions import ValidationError
from ..dto.auth_dto import UserRegistrationRequest

MIN_PASSWORD_LENGTH = 6
MAX_NAME_LENGTH = 200
# bcrypt only reads the first 72 bytes and newer releases reject longer input
MAX_PASSWORD_BYTES = 72

NAME_REQUIRED = "Name is required"
NAME_TOO_LONG = f"Name must be at most {MAX_NAME_LENGTH} characters"
EMAIL_REQUIRED = "Email is required"
EMAIL_INVALID = "Email must be a valid email address"
PASSWORD_TOO_SHORT = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
PASSWORD_TOO_LONG = f"Password must be at most {MAX_PASSWORD_BYTES} bytes"


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def normalize_email(email: str) -> str:
    """
    Canonical stored form of an email address
    
    Registration, login and email change all go through this, so an address
    is matched the same way it was stored (domain lowercased, local part kept).
    
    Raises:
        EmailNotValidError: If the address is not syntactically valid
    """
    result = validate_email(email.strip(), check_deliverability=False)
    return result.normalized


def _email_error(email: Optional[str]) -> Optional[str]:
    if _is_blank(email):
        return EMAIL_REQUIRED
    try:
        normalize_email(email)
    except EmailNotValidError:
        return EMAIL_INVALID
    return None


class RegistrationValidator:
    """Structural checks on a registration payload, run before any entity is built"""
    
    def collect_errors(self, request: UserRegistrationRequest) -> List[str]:
        """
        Return every violated rule, in rule order (name, email, password)
        
        Args:
            request: Registration payload as received from the caller
            
        Returns:
            List of human-readable violation messages (empty when valid)
        """
        errors: List[str] = []
        if _is_blank(request.name):
            errors.append(NAME_REQUIRED)
        elif len(request.name.strip()) > MAX_NAME_LENGTH:
            errors.append(NAME_TOO_LONG)
        
        email_error = _email_error(request.email)
        if email_error:
            errors.append(email_error)
        
        if request.password is None or len(request.password) < MIN_PASSWORD_LENGTH:
            errors.append(PASSWORD_TOO_SHORT)
        elif len(request.password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            errors.append(PASSWORD_TOO_LONG)
        return errors
    
    def validate(self, request: UserRegistrationRequest) -> None:
        """
        Validate a registration payload
        
        Raises:
            ValidationError: Listing all violations when at least one rule fails
        """
        errors = self.collect_errors(request)
        if errors:
            raise ValidationError(errors)


def validate_new_email(new_email: Optional[str]) -> str:
    """Validate an email for ``User.change_email`` and return its normalized form"""
    email_error = _email_error(new_email)
    if email_error:
        raise ValidationError([email_error])
    return normalize_email(new_email)
