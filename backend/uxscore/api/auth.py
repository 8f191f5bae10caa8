"""Authentication API endpoints."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from uxscore.auth.tokens import create_access_token
from uxscore.database import get_db
from uxscore.schemas.auth import LoginRequest, LoginResponse, LoginUser
from uxscore.services import identity
from uxscore.utils.logger import logger

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    db: Session = Depends(get_db),
) -> LoginResponse:
    """
    Exchange a username and password for a bearer token.

    Args:
        request: Login credentials
        db: Database session

    Returns:
        Signed JWT, the user's roles and a short user summary
    """
    user = identity.authenticate(db, request.username, request.password)
    roles = user.role_names
    token = create_access_token(user.id, user.username, user.email, roles)

    logger.info(f"User {user.username} logged in")
    return LoginResponse(
        token=token,
        roles=roles,
        user=LoginUser(id=user.id, username=user.username, email=user.email),
    )
