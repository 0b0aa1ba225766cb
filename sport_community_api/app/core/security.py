"""
Security helpers for password hashing and JWT authentication.

Passwords are hashed with bcrypt using a configurable cost factor
(``BCRYPT_ROUNDS``, 10 by default).  Access tokens are HS256 JSON Web
Tokens signed with ``JWT_SECRET`` and carry the claims ``id``,
``email`` and ``role``.  No ``exp`` claim is added unless
``TOKEN_EXPIRE_MINUTES`` is positive.

The ``get_current_user`` dependency reads the ``Authorization: Bearer``
header and returns the decoded claims.  It does not check that the
user still exists; handlers that need the user row query it themselves.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import Settings, get_settings

logger = logging.getLogger(__name__)


def hash_password(password: str, rounds: int = 10) -> str:
    """Hash a password with a fresh bcrypt salt of the given cost."""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain password against a stored bcrypt hash.

    Returns ``False`` rather than raising when the stored value is not a
    valid bcrypt hash.
    """
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False


def create_access_token(claims: Dict[str, Any], settings: Settings) -> str:
    """Create a signed JWT for the given claims.

    Parameters
    ----------
    claims : dict
        Claims to embed, e.g. ``{"id": 1, "email": "a@x.com", "role": "user"}``.
    settings : Settings
        Supplies the signing key, the algorithm and the optional lifetime.

    Returns
    -------
    str
        The encoded token.
    """
    to_encode = dict(claims)
    if settings.token_expire_minutes > 0:
        to_encode["exp"] = datetime.now(timezone.utc) + timedelta(minutes=settings.token_expire_minutes)
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str, settings: Settings) -> Optional[Dict[str, Any]]:
    """Verify and decode a JWT.

    Returns the claims if the signature (and ``exp``, when present) is
    valid, otherwise ``None``.
    """
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except jwt.InvalidTokenError as exc:
        logger.warning("Rejected token: %s", exc)
        return None


security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """Dependency that returns the claims of the authenticated caller.

    A missing header yields 401 ``"Missing token"``; a token that fails
    verification yields 401 ``"Invalid token"``.
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    payload = decode_access_token(credentials.credentials, settings)
    if payload is None or "id" not in payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return payload
