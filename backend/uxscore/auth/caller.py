"""Caller identity derived from the bearer token."""
from dataclasses import dataclass, field
from typing import FrozenSet, Optional
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from uxscore.auth.tokens import decode_access_token
from uxscore.constants import Roles
from uxscore.utils.exceptions import AuthenticationError, ForbiddenError

bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class CallerContext:
    """Who is calling and with which roles."""
    username: str
    roles: FrozenSet[str] = field(default_factory=frozenset)
    user_id: Optional[str] = None
    email: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return Roles.ADMIN in self.roles

    @classmethod
    def from_claims(cls, claims: dict) -> "CallerContext":
        """Build a context from validated JWT claims."""
        username = claims.get("name") or claims.get("email")
        if not username:
            raise AuthenticationError("Token carries no user name")

        raw_roles = claims.get("role") or []
        if isinstance(raw_roles, str):
            raw_roles = [raw_roles]

        return cls(
            username=username,
            roles=frozenset(raw_roles),
            user_id=claims.get("sub"),
            email=claims.get("email") or None,
        )


def get_caller(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> CallerContext:
    """
    Resolve the caller from the Authorization header.

    Raises:
        AuthenticationError: If the header is missing or the token is invalid
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Authentication required")

    claims = decode_access_token(credentials.credentials)
    return CallerContext.from_claims(claims)


def require_admin(caller: CallerContext = Depends(get_caller)) -> CallerContext:
    """Dependency for routes reserved to administrators."""
    if not caller.is_admin:
        raise ForbiddenError("Administrator role required")
    return caller
