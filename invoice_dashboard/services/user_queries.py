"""User Queries — account lookup and credential check for sign-in.

Invariants:
    - get_user returns the stored row (with hash) or None; never raises for unknown email
    - authenticate never returns the password hash
"""

import logging

import bcrypt
from sqlalchemy import text

from invoice_dashboard.infrastructure.database import DatabaseSessionManager
from invoice_dashboard.schemas.user import UserPublic, UserRecord
from invoice_dashboard.services.query_helpers import fetch_guard

logger = logging.getLogger(__name__)

USER_BY_EMAIL_SQL = text(
    "SELECT id, name, email, password FROM users WHERE email = :email",
)


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


class UserQueries:
    """Read access to dashboard accounts."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self.db_manager = db_manager

    async def get_user(self, email: str) -> UserRecord | None:
        with fetch_guard("Failed to fetch user."):
            async with self.db_manager.session() as db:
                row = (
                    await db.execute(USER_BY_EMAIL_SQL, {"email": email})
                ).mappings().first()
        return UserRecord(**row) if row else None

    async def authenticate(self, email: str, password: str) -> UserPublic | None:
        """The user when email and password match, else None."""
        user = await self.get_user(email)
        if user is None or not verify_password(password, user.password):
            logger.info("Sign-in rejected")
            return None
        return UserPublic(id=user.id, name=user.name, email=user.email)
