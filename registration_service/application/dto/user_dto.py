from pydantic import BaseModel, ConfigDict

from ...domain.models.user import User


class UserResponse(BaseModel):
    """DTO for user response (never carries the password or its hash)"""
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    name: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(id=user.id, name=user.name, email=user.email)
