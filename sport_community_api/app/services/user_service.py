"""
Business logic for users.

Registration checks username and email uniqueness with two separate
lookups before inserting, so two concurrent registrations can both
pass the checks; the UNIQUE constraints then make the slower insert
fail as a store error.
"""

import logging
from typing import Optional

from ..core.db import Database, Store
from ..core.errors import ConflictError, NotFoundError, require_fields
from ..core.security import hash_password, verify_password
from ..schemas.user import UserRegister

logger = logging.getLogger(__name__)


class UserService:
    """Service for registering, authenticating and resolving users."""

    @classmethod
    def register(cls, db: Database, data: UserRegister, rounds: int = 10) -> dict:
        """Create a user and return ``{"user_id", "username"}``.

        Raises ``BadRequestError`` if a field is missing and
        ``ConflictError`` if the username, then the email, is taken.
        """
        require_fields("Username, password and email are required", data.username, data.password, data.email)
        with db.unit_of_work() as store:
            if store.fetch_one("SELECT user_id FROM users WHERE username = ?", (data.username,)):
                raise ConflictError("Username is already taken")
            if store.fetch_one("SELECT user_id FROM users WHERE email = ?", (data.email,)):
                raise ConflictError("Email is already taken")
            hashed = hash_password(data.password, rounds)
            cursor = store.execute(
                "INSERT INTO users (username, password, email) VALUES (?, ?, ?)",
                (data.username, hashed, data.email),
            )
            user_id = cursor.lastrowid
        logger.info("Registered user %s (id %s)", data.username, user_id)
        return {"user_id": user_id, "username": data.username}

    @classmethod
    def authenticate(cls, db: Database, email: Optional[str], password: Optional[str]) -> Optional[dict]:
        """Return the user row if the credentials match.

        Raises ``NotFoundError`` when no user has this email and returns
        ``None`` when the password does not match.
        """
        with db.unit_of_work() as store:
            row = store.fetch_one(
                "SELECT user_id, username, email, password, role FROM users WHERE email = ?",
                (email,),
            )
        if not row:
            raise NotFoundError("User not found")
        if not password or not verify_password(password, row["password"]):
            logger.warning("Wrong password for %s", email)
            return None
        return row

    @staticmethod
    def username_for(store: Store, user_id: int) -> str:
        """Resolve the username of ``user_id`` inside an open unit of work."""
        row = store.fetch_one("SELECT username FROM users WHERE user_id = ?", (user_id,))
        if not row:
            raise NotFoundError("User not found")
        return row["username"]

    @staticmethod
    def id_for_username(store: Store, username: str) -> int:
        row = store.fetch_one("SELECT user_id FROM users WHERE username = ?", (username,))
        if not row:
            raise NotFoundError("User not found")
        return row["user_id"]
