"""Hashing utilities for passwords and password-reset tokens."""
import hashlib
import hmac
import secrets
import bcrypt
from uxscore.config import settings


def hash_password(password: str) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: The password to hash

    Returns:
        Bcrypt hash string
    """
    # Bcrypt only looks at the first 72 bytes
    password_bytes = password.encode("utf-8")[:72]
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(password_bytes, salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Verify a password against a bcrypt hash.

    Args:
        password: The password to verify
        password_hash: The stored bcrypt hash

    Returns:
        True if the password matches, False otherwise
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8")[:72], password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False


def generate_security_stamp() -> str:
    """Generate a fresh security stamp for a user record."""
    return secrets.token_hex(16)


def make_reset_token(user_id: str, security_stamp: str) -> str:
    """
    Derive a password-reset token bound to a user's current security stamp.

    The token stops verifying as soon as the stamp rotates, which happens
    whenever the password changes.
    """
    message = f"{user_id}:{security_stamp}".encode("utf-8")
    return hmac.new(settings.jwt_secret_key.encode("utf-8"), message, hashlib.sha256).hexdigest()


def verify_reset_token(user_id: str, security_stamp: str, token: str) -> bool:
    """Check a password-reset token in constant time."""
    expected = make_reset_token(user_id, security_stamp)
    return hmac.compare_digest(expected, token)
