"""
Identity store: users, roles, password checks and lockout.

Accounts live in the same database as the domain tables but are only
referenced from domain rows by username string.
"""
from datetime import datetime
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from uxscore.constants import Roles
from uxscore.models import Role, User
from uxscore.utils.exceptions import AuthenticationError, IdentityError
from uxscore.utils.hashing import (
    generate_security_stamp,
    hash_password,
    make_reset_token,
    verify_password,
    verify_reset_token,
)
from uxscore.utils.logger import logger

MIN_PASSWORD_LENGTH = 8


def validate_password(password: str) -> List[str]:
    """Return the password-policy violations for a candidate password."""
    errors = []
    if len(password) < MIN_PASSWORD_LENGTH:
        errors.append(f"Passwords must be at least {MIN_PASSWORD_LENGTH} characters.")
    if not any(ch.isdigit() for ch in password):
        errors.append("Passwords must have at least one digit ('0'-'9').")
    if not any(ch.isupper() for ch in password):
        errors.append("Passwords must have at least one uppercase ('A'-'Z').")
    if not any(ch.islower() for ch in password):
        errors.append("Passwords must have at least one lowercase ('a'-'z').")
    return errors


def find_by_id(db: Session, user_id: str) -> Optional[User]:
    return db.get(User, user_id)


def find_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def list_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.username).all()


def get_role(db: Session, name: str) -> Optional[Role]:
    return db.query(Role).filter(Role.name == name).first()


def role_exists(db: Session, name: str) -> bool:
    return get_role(db, name) is not None


def list_roles(db: Session) -> List[str]:
    return [role.name for role in db.query(Role).order_by(Role.name).all()]


def ensure_roles(db: Session) -> None:
    """Create any of the built-in roles that are missing."""
    created = False
    for name in Roles.ALL:
        if not role_exists(db, name):
            db.add(Role(name=name))
            created = True
    if created:
        db.commit()
        logger.info("Created missing built-in roles")


def create_user(
    db: Session,
    username: str,
    password: str,
    email: Optional[str] = None,
    email_confirmed: bool = False,
) -> User:
    """
    Create a user after checking the password policy and username uniqueness.

    Raises:
        IdentityError: With one description per violated rule
    """
    errors = validate_password(password)
    if find_by_username(db, username):
        errors.insert(0, f"Username '{username}' is already taken.")
    if errors:
        raise IdentityError(errors, message="Failed to create user")

    user = User(
        username=username,
        email=email or username,
        password_hash=hash_password(password),
        email_confirmed=email_confirmed,
        security_stamp=generate_security_stamp(),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise IdentityError([f"Username '{username}' is already taken."], message="Failed to create user")

    db.refresh(user)
    logger.info(f"Created user {user.username} ({user.id})")
    return user


def update_user_name(db: Session, user: User, username: str, email_confirmed: bool) -> User:
    """Rename a user (username doubles as email) and set the confirmation flag."""
    existing = find_by_username(db, username)
    if existing and existing.id != user.id:
        raise IdentityError([f"Username '{username}' is already taken."], message="Failed to update user")

    user.username = username
    user.email = username
    user.email_confirmed = email_confirmed
    user.security_stamp = generate_security_stamp()
    db.commit()
    db.refresh(user)
    return user


def add_to_role(db: Session, user: User, role_name: str) -> None:
    role = get_role(db, role_name)
    if role is None:
        raise IdentityError([f"Role {role_name} does not exist."], message="Failed to assign role")
    if role not in user.roles:
        user.roles.append(role)
        db.commit()


def remove_from_all_roles(db: Session, user: User) -> None:
    if user.roles:
        user.roles.clear()
        db.commit()


def generate_password_reset_token(user: User) -> str:
    return make_reset_token(user.id, user.security_stamp)


def reset_password(db: Session, user: User, token: str, new_password: str) -> None:
    """
    Apply a password-reset token.

    Raises:
        IdentityError: If the token is stale or the password violates policy
    """
    if not verify_reset_token(user.id, user.security_stamp, token):
        raise IdentityError(["Invalid token."], message="Failed to reset password")

    errors = validate_password(new_password)
    if errors:
        raise IdentityError(errors, message="Failed to reset password")

    user.password_hash = hash_password(new_password)
    user.security_stamp = generate_security_stamp()
    db.commit()


def set_lockout_end(db: Session, user: User, lockout_end: Optional[datetime]) -> None:
    """Set or clear the lockout end; only users with lockout enabled can be locked."""
    if lockout_end is not None and not user.lockout_enabled:
        raise IdentityError(["Lockout is not enabled for this user."], message="Failed to lock user")
    user.lockout_end = lockout_end
    db.commit()


def reset_access_failed_count(db: Session, user: User) -> None:
    user.access_failed_count = 0
    db.commit()


def delete_user(db: Session, user: User) -> None:
    db.delete(user)
    db.commit()
    logger.info(f"Deleted user {user.username} ({user.id})")


def authenticate(db: Session, username: str, password: str) -> User:
    """
    Check a username/password pair.

    Locked-out users and wrong passwords produce the same error. A wrong
    password bumps the failed-attempt counter without locking the account.

    Raises:
        AuthenticationError: If the credentials are rejected
    """
    user = find_by_username(db, username)
    if user is None:
        raise AuthenticationError("Invalid username or password")

    if user.is_locked_out:
        logger.warning(f"Login attempt for locked-out user {username}")
        raise AuthenticationError("Invalid username or password")

    if not verify_password(password, user.password_hash):
        user.access_failed_count += 1
        db.commit()
        logger.warning(f"Failed login for {username} ({user.access_failed_count} failed attempts)")
        raise AuthenticationError("Invalid username or password")

    if user.access_failed_count:
        user.access_failed_count = 0
        db.commit()

    return user
