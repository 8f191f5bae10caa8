"""JWT issuance and validation."""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, Optional
from jose import JWTError, jwt

from uxscore.config import settings
from uxscore.utils.exceptions import AuthenticationError


def create_access_token(
    user_id: str,
    username: str,
    email: Optional[str],
    roles: Iterable[str],
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Create a signed access token for a user.

    Args:
        user_id: Identity store user ID (``sub`` claim)
        username: Username (``name`` claim)
        email: Email address (``email`` claim)
        roles: Role names (``role`` claim)
        expires_delta: Lifetime override, defaults to JWT_EXPIRE_HOURS

    Returns:
        Encoded JWT
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(hours=settings.jwt_expire_hours))

    claims = {
        "sub": user_id,
        "name": username,
        "email": email or "",
        "role": list(roles),
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience,
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Validate signature, issuer, audience and lifetime of a token.

    Raises:
        AuthenticationError: If the token is invalid or expired
    """
    try:
        return jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
            options={"leeway": settings.jwt_clock_skew_seconds},
        )
    except JWTError as e:
        raise AuthenticationError("Could not validate credentials", error=str(e))
