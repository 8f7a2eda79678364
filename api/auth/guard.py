"""
Per-request access guard.

A request starts anonymous. `extract_identity` moves it to authenticated
when the bearer token verifies; any verification problem leaves it
anonymous, so public routes still work with a bad or missing token.
The gates then accept or reject:

- `require_admin`: authenticated admins only
- `require_owner_or_admin`: admins, or the user the resource belongs to

Gate rejections raise UnauthorizedError. Nothing is retried.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from core import errors

from . import security

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IdentityPayload:
    username: str
    is_admin: bool = False
    issued_at: int | None = None


@dataclass(frozen=True)
class AuthState:
    identity: IdentityPayload | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.identity is not None


ANONYMOUS = AuthState()


class AccessGuard:
    def __init__(self, *, secret_key: str, algorithm: str = "HS256") -> None:
        if not secret_key:
            raise ValueError("secret_key is required.")
        self._secret_key = secret_key
        self._algorithm = algorithm

    def extract_identity(self, authorization: str | None) -> AuthState:
        if not authorization:
            return ANONYMOUS

        try:
            token = security.extract_bearer_token(authorization)
            payload = security.decode_access_token(
                token,
                secret_key=self._secret_key,
                algorithm=self._algorithm,
            )
        except security.AuthSecurityError as exc:
            logger.debug("Continuing anonymously: %s", exc)
            return ANONYMOUS

        issued_at = payload.get("iat")
        return AuthState(
            identity=IdentityPayload(
                username=str(payload["username"]).strip(),
                # Only a literal true grants admin.
                is_admin=payload.get("isAdmin") is True,
                issued_at=int(issued_at) if isinstance(issued_at, (int, float)) else None,
            )
        )

    def require_admin(self, state: AuthState) -> IdentityPayload:
        identity = state.identity
        if identity is None or not identity.is_admin:
            raise errors.UnauthorizedError("Admin access required.")
        return identity

    def require_owner_or_admin(self, state: AuthState, owner: str) -> IdentityPayload:
        identity = state.identity
        if identity is None:
            raise errors.UnauthorizedError("Login required.")
        if identity.is_admin or identity.username == owner:
            return identity
        raise errors.UnauthorizedError("Not allowed for this user.")
