"""Schemas for authentication."""
from typing import List, Optional
from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Request schema for /api/auth/login."""
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginUser(BaseModel):
    id: str
    username: str
    email: Optional[str] = None


class LoginResponse(BaseModel):
    """Response schema for /api/auth/login."""
    token: str
    roles: List[str]
    user: LoginUser
