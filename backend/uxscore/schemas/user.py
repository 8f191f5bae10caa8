"""Schemas for user administration."""
from typing import List, Optional
from pydantic import BaseModel, Field

from uxscore.constants import Roles
from uxscore.models import User


class CreateUserRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=256)
    password: str = Field(..., min_length=1)
    role: str = Roles.EVALUATOR


class UpdateUserRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=256)
    password: Optional[str] = None
    role: Optional[str] = Roles.EVALUATOR
    emailConfirmed: bool = True


class UserView(BaseModel):
    id: str
    username: str
    email: Optional[str] = None
    emailConfirmed: bool
    lockoutEnabled: bool
    isLockedOut: bool
    accessFailedCount: int
    role: str

    @classmethod
    def from_orm(cls, obj: User) -> "UserView":
        """Convert an identity record to the admin view."""
        roles = obj.role_names
        return cls(
            id=obj.id,
            username=obj.username,
            email=obj.email,
            emailConfirmed=obj.email_confirmed,
            lockoutEnabled=obj.lockout_enabled,
            isLockedOut=obj.is_locked_out,
            accessFailedCount=obj.access_failed_count,
            role=roles[0] if roles else Roles.EVALUATOR,
        )


class UpdatedUserResponse(BaseModel):
    id: str
    username: str
    email: Optional[str] = None
    emailConfirmed: bool
    roles: List[str]

    @classmethod
    def from_orm(cls, obj: User) -> "UpdatedUserResponse":
        return cls(
            id=obj.id,
            username=obj.username,
            email=obj.email,
            emailConfirmed=obj.email_confirmed,
            roles=obj.role_names,
        )
