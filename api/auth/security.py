"""
Auth security helpers.
"""

from __future__ import annotations

from typing import Any

import jwt


class AuthSecurityError(RuntimeError):
    pass


def extract_bearer_token(authorization: str | None) -> str:
    raw = (authorization or "").strip()
    if not raw:
        raise AuthSecurityError("Missing Authorization header.")

    parts = raw.split(" ", 1)
    if len(parts) != 2:
        raise AuthSecurityError("Invalid Authorization header format.")

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        raise AuthSecurityError("Authorization must be: Bearer <token>.")
    return token


def decode_access_token(token: str, *, secret_key: str, algorithm: str) -> dict[str, Any]:
    raw = (token or "").strip()
    if not raw:
        raise AuthSecurityError("Access token is empty.")

    try:
        payload = jwt.decode(raw, secret_key, algorithms=[algorithm])
    except jwt.InvalidTokenError as exc:
        raise AuthSecurityError("Invalid access token.") from exc

    username = str(payload.get("username") or "").strip()
    if not username:
        raise AuthSecurityError("Token has no username.")

    return payload
