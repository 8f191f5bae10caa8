"""User administration endpoints. Administrators only."""
from datetime import timedelta
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from uxscore.auth.caller import CallerContext, require_admin
from uxscore.constants import LOCKOUT_YEARS, Roles
from uxscore.database import get_db
from uxscore.models import User
from uxscore.schemas.user import CreateUserRequest, UpdateUserRequest, UpdatedUserResponse, UserView
from uxscore.services import identity
from uxscore.utils.exceptions import IdentityError, NotFoundError
from uxscore.utils.logger import logger
from uxscore.utils.serialization import utcnow

router = APIRouter(prefix="/api/users", tags=["users"])


def _get_user(db: Session, user_id: str) -> User:
    user = identity.find_by_id(db, user_id)
    if user is None:
        raise NotFoundError("User", user_id)
    return user


def _check_role(db: Session, role: str) -> None:
    if not identity.role_exists(db, role):
        raise IdentityError([f"Role {role} does not exist."], message="Failed to create user")


@router.get("", response_model=list[UserView])
async def get_users(
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require_admin),
) -> list[UserView]:
    return [UserView.from_orm(u) for u in identity.list_users(db)]


@router.get("/roles", response_model=list[str])
async def get_roles(
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require_admin),
) -> list[str]:
    return identity.list_roles(db)


@router.get("/{user_id}", response_model=UserView)
async def get_user(
    user_id: str,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require_admin),
) -> UserView:
    return UserView.from_orm(_get_user(db, user_id))


@router.post("")
async def create_user(
    request: CreateUserRequest,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require_admin),
) -> dict:
    """
    Register a user with a single role.

    The built-in roles are created first if missing. The username doubles
    as the email address and is treated as confirmed.

    Raises:
        IdentityError: If the role is unknown, the username taken or the
            password weak
    """
    identity.ensure_roles(db)
    role = request.role or Roles.EVALUATOR
    _check_role(db, role)

    user = identity.create_user(
        db,
        username=request.username,
        password=request.password,
        email=request.username,
        email_confirmed=True,
    )
    identity.add_to_role(db, user, role)

    logger.info(f"User {user.username} registered as {role} by {caller.username}")
    return {"message": "User registered successfully"}


@router.put("/{user_id}", response_model=UpdatedUserResponse)
async def update_user(
    user_id: str,
    request: UpdateUserRequest,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require_admin),
) -> UpdatedUserResponse:
    """
    Rename a user and optionally reset their password and role.

    A non-empty password is applied through a freshly generated reset token.
    A non-empty role clears every role the user holds and assigns the new
    one when it exists.
    """
    user = _get_user(db, user_id)
    user = identity.update_user_name(db, user, request.username, request.emailConfirmed)

    if request.password:
        token = identity.generate_password_reset_token(user)
        identity.reset_password(db, user, token, request.password)

    if request.role:
        identity.remove_from_all_roles(db, user)
        if identity.role_exists(db, request.role):
            identity.add_to_role(db, user, request.role)

    db.refresh(user)
    logger.info(f"Updated user {user.id} by {caller.username}")
    return UpdatedUserResponse.from_orm(user)


@router.put("/{user_id}/lock")
async def lock_user(
    user_id: str,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require_admin),
) -> dict:
    """Lock a user out for the foreseeable future."""
    user = _get_user(db, user_id)
    identity.set_lockout_end(db, user, utcnow() + timedelta(days=365 * LOCKOUT_YEARS))
    logger.info(f"Locked user {user.username} by {caller.username}")
    return {"message": "User locked successfully"}


@router.put("/{user_id}/unlock")
async def unlock_user(
    user_id: str,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require_admin),
) -> dict:
    user = _get_user(db, user_id)
    identity.set_lockout_end(db, user, None)
    identity.reset_access_failed_count(db, user)
    logger.info(f"Unlocked user {user.username} by {caller.username}")
    return {"message": "User unlocked successfully"}


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: str,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require_admin),
) -> Response:
    user = _get_user(db, user_id)
    identity.delete_user(db, user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
