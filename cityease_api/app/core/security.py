"""
Security helpers for password hashing and JWT authentication.

Passwords are hashed with bcrypt using a fixed cost factor.  Access
tokens are HS256 JSON Web Tokens signed with ``settings.jwt_secret``
and carry the user's ``id`` and ``email`` together with issue and
expiry timestamps.  ``get_current_user`` is the FastAPI dependency that
protects routes: it reads the bearer token from the ``Authorization``
header and hands the decoded identity to the endpoint.
"""

import logging
import time
from typing import Any, Dict, Optional

import bcrypt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from .config import settings
from .errors import AuthError

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = 10
# bcrypt only looks at the first 72 bytes of a password.
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """Hash a password with bcrypt.

    A fresh salt is generated for every call, so hashing the same
    password twice yields different strings.  The returned value is the
    standard ``$2b$10$...`` encoding, which embeds the salt and cost.
    """
    hashed = bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt(rounds=BCRYPT_ROUNDS))
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain password against a stored bcrypt hash.

    Returns ``False`` rather than raising when the stored value is not
    a valid bcrypt hash.
    """
    try:
        return bcrypt.checkpw(_password_bytes(plain_password), hashed_password.encode("utf-8"))
    except ValueError:
        logger.warning("Stored password hash is malformed")
        return False


def create_access_token(data: Dict[str, Any], expires_delta: Optional[int] = None) -> str:
    """Create a signed JWT with the given claims.

    Parameters
    ----------
    data : dict
        Claims to embed in the token, e.g. ``{"id": 1, "email": "a@b.c"}``.
    expires_delta : Optional[int]
        Lifetime of the token in seconds.  Defaults to
        ``settings.access_token_expire_minutes * 60`` (seven days).

    Returns
    -------
    str
        The encoded token, to be sent as ``Authorization: Bearer <token>``.
    """
    to_encode = data.copy()
    now = int(time.time())
    exp_seconds = expires_delta if expires_delta is not None else settings.access_token_expire_minutes * 60
    to_encode["iat"] = now
    to_encode["exp"] = now + exp_seconds
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.algorithm)


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Verify and decode a JWT.

    Checks the signature and the ``exp`` claim.  Returns the payload
    dictionary if the token is valid, otherwise ``None``.
    """
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.algorithm])
    except JWTError as exc:
        logger.debug("Rejected access token: %s", exc)
        return None


def issue_token_for(user: Dict[str, Any]) -> str:
    """Issue an access token for a user record with ``id`` and ``email``."""
    return create_access_token({"id": user["id"], "email": user["email"]})


security = HTTPBearer(auto_error=False)


def get_current_user(credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)) -> Dict[str, Any]:
    """Dependency that returns the identity carried by the bearer token.

    Raises ``AuthError`` ("Missing token") when the request has no
    bearer ``Authorization`` header, and ``AuthError`` ("Invalid token")
    when the token fails verification or has expired.
    """
    if credentials is None or not credentials.credentials:
        raise AuthError("Missing token")
    payload = decode_access_token(credentials.credentials)
    if not payload or payload.get("id") is None:
        raise AuthError("Invalid token")
    return payload
