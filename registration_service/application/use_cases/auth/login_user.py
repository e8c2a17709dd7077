# Standard library imports
import logging
from typing import Optional

# External package imports
from email_validator import EmailNotValidError

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserFields
from ....core.security import verify_password, create_jwt_token
from ...dto.auth_dto import UserLoginRequest, TokenResponse
from ...validators.registration_validator import normalize_email

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """
    Use case for exchanging email and password for a JWT access token.
    
    The email is normalized with the same rule registration stores it under,
    so "Ada@Example.COM" finds the account registered as "Ada@example.com".
    Every kind of failure (malformed email, unknown account, wrong password)
    yields None so callers cannot tell them apart.
    """
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, request: UserLoginRequest) -> Optional[TokenResponse]:
        try:
            email = normalize_email(request.email)
        except EmailNotValidError:
            logger.debug("Login rejected: malformed email")
            return None
        
        user = await self.user_repository.find_by_email(email)
        if user is None or not verify_password(request.password, user.password_hash):
            logger.info("Login failed for a supplied email")
            return None
        
        token = create_jwt_token({
            "sub": user.id,  # JWT subject claim
            UserFields.EMAIL: user.email,
        })
        logger.info(f"Issued access token for user {user.id}")
        return TokenResponse(access_token=token)
