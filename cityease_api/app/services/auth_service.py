"""
Business logic for registration and login.

Users live in the ``users`` table.  Passwords are stored as bcrypt
hashes and are never returned to callers.  Both operations return the
public user record together with a freshly signed access token.
"""

import asyncio
import logging
import sqlite3
from typing import Optional

from cityease_api.app.core.db import get_connection
from cityease_api.app.core.errors import AuthError, ConflictError, InternalError, ValidationError
from cityease_api.app.core.security import hash_password, issue_token_for, verify_password
from cityease_api.app.schemas.user import AuthResponse, UserRead

logger = logging.getLogger(__name__)


class AuthService:
    """Registers and authenticates users.

    Password hashing and database access are blocking, so both run in a
    worker thread via ``asyncio.to_thread``; the event loop keeps serving
    other requests meanwhile.
    """

    @classmethod
    async def register(
        cls,
        name: Optional[str],
        email: Optional[str],
        password: Optional[str],
        phone: Optional[str],
    ) -> AuthResponse:
        """Create a user and return it with an access token.

        Raises ``ValidationError`` if e‑mail or password is missing and
        ``ConflictError`` if the e‑mail is already registered.  The
        uniqueness check is left to the database's UNIQUE constraint.
        """
        if not email or not password:
            raise ValidationError("Email and password required")

        def _insert() -> int:
            hashed = hash_password(password)
            conn = get_connection()
            try:
                cursor = conn.cursor()
                cursor.execute(
                    "INSERT INTO users (name, email, password_hash, phone) VALUES (?, ?, ?, ?)",
                    (name or "", email, hashed, phone or ""),
                )
                conn.commit()
                return cursor.lastrowid
            except sqlite3.IntegrityError as e:
                conn.rollback()
                if "UNIQUE" in str(e).upper():
                    logger.info("Registration rejected, e-mail already in use: %s", email)
                    raise ConflictError("Email already exists") from e
                logger.exception("Registration failed for %s", email)
                raise InternalError("Registration failed") from e
            except sqlite3.Error as e:
                conn.rollback()
                logger.exception("Registration failed for %s", email)
                raise InternalError("Registration failed") from e
            finally:
                conn.close()

        user_id = await asyncio.to_thread(_insert)
        user = UserRead(id=user_id, name=name or "", email=email, phone=phone or "")
        logger.info("Registered user %s (id=%s)", email, user_id)
        return AuthResponse(user=user, token=issue_token_for(user.model_dump()))

    @classmethod
    async def login(cls, email: Optional[str], password: Optional[str]) -> AuthResponse:
        """Authenticate by e‑mail and password.

        Unknown e‑mail and wrong password both raise ``AuthError`` with
        the same message so callers cannot tell which one failed.
        """

        def _check() -> Optional[sqlite3.Row]:
            conn = get_connection()
            try:
                row = conn.execute(
                    "SELECT id, name, email, password_hash, phone FROM users WHERE email = ?",
                    (email,),
                ).fetchone()
            except sqlite3.Error as e:
                logger.exception("Login lookup failed for %s", email)
                raise InternalError("Login failed") from e
            finally:
                conn.close()
            if not row or not password or not verify_password(password, row["password_hash"]):
                return None
            return row

        row = await asyncio.to_thread(_check)
        if row is None:
            logger.info("Failed login attempt for %s", email)
            raise AuthError("Invalid credentials")

        user = UserRead(id=row["id"], name=row["name"], email=row["email"], phone=row["phone"])
        return AuthResponse(user=user, token=issue_token_for(user.model_dump()))
