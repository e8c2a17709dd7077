from .auth_dto import (
    UserRegistrationRequest,
    UserLoginRequest,
    ChangeEmailRequest,
    TokenResponse,
)
from .user_dto import UserResponse

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "ChangeEmailRequest",
    "TokenResponse",
    "UserResponse",
]
