from typing import Optional
from pydantic import BaseModel, Field


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request.
    
    Fields are optional and unbounded at parse time so RegistrationValidator
    can report every violation, length limits included, in one ValidationError.
    """
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class UserLoginRequest(BaseModel):
    """DTO for user login request"""
    email: str = Field(min_length=1, max_length=320)
    password: str = Field(min_length=1, max_length=256)


class ChangeEmailRequest(BaseModel):
    """DTO for changing the authenticated user's email"""
    new_email: Optional[str] = None


class TokenResponse(BaseModel):
    """DTO for token response"""
    access_token: str
    token_type: str = "bearer"
