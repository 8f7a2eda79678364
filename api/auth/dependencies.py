"""
Auth dependencies for FastAPI routes.
"""

from __future__ import annotations

from fastapi import Depends, Header, Request

from .guard import AccessGuard, AuthState, IdentityPayload


def get_access_guard(request: Request) -> AccessGuard:
    guard = getattr(request.app.state, "access_guard", None)
    if guard is None:
        raise RuntimeError("Access guard is not initialized. It is created on startup.")
    return guard


async def get_auth_state(
    authorization: str | None = Header(default=None),
    guard: AccessGuard = Depends(get_access_guard),
) -> AuthState:
    return guard.extract_identity(authorization)


async def require_admin(
    state: AuthState = Depends(get_auth_state),
    guard: AccessGuard = Depends(get_access_guard),
) -> IdentityPayload:
    return guard.require_admin(state)


async def require_same_user_or_admin(
    username: str,
    state: AuthState = Depends(get_auth_state),
    guard: AccessGuard = Depends(get_access_guard),
) -> IdentityPayload:
    # `username` is the route's path parameter.
    return guard.require_owner_or_admin(state, username)
