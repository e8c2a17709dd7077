# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import AuthenticationError, UserNotFoundError
from ....core.security import decode_jwt_token
from ...dto.user_dto import UserResponse


class GetCurrentUserUseCase:
    """Use case for getting current authenticated user from JWT token"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, token: str) -> UserResponse:
        """
        Get current user from JWT token
        
        Args:
            token: JWT access token
            
        Returns:
            UserResponse with user information
            
        Raises:
            AuthenticationError: If token is invalid or has no subject
            UserNotFoundError: If the token's user no longer exists
        """
        payload = decode_jwt_token(token)
        
        user_id: Optional[str] = payload.get("sub")
        if not user_id:
            raise AuthenticationError("Invalid authentication payload: missing user ID")
        
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        
        return UserResponse.from_user(user)
