"""
Auth repositories for database access.

Encapsulates all Supabase queries and data mapping for the auth tables:
- users
- otp_codes
- sessions

These repositories do NOT perform authorization checks; the services decide
who may do what.
"""

from datetime import datetime
from typing import Optional, Any

from shared.models import UserRole
from shared.repository import BaseRepository
from .models import User, OTPCode, Session


class UserRepository(BaseRepository[User]):
    """Repository for the users table."""

    TABLE = "users"

    def get_by_id(self, user_id: str) -> Optional[User]:
        query = self._db.table(self.TABLE).select("*").eq("id", user_id).limit(1)
        rows = self._execute(query, "get_user")
        return self._map_to_user(rows[0]) if rows else None

    def get_by_email(self, email: str) -> Optional[User]:
        query = self._db.table(self.TABLE).select("*").eq("email", email).limit(1)
        rows = self._execute(query, "get_user_by_email")
        return self._map_to_user(rows[0]) if rows else None

    def record_login(self, email: str, at: datetime) -> User:
        """
        Create the user for an email or bump its last_login, atomically.

        Relies on the unique constraint on users.email; the role column is
        left out of the payload so existing roles are preserved.
        """
        query = self._db.table(self.TABLE).upsert(
            {"email": email, "last_login": at.isoformat()},
            on_conflict="email",
        )
        rows = self._execute(query, "record_login")
        return self._map_to_user(rows[0])

    def set_role(self, email: str, role: UserRole) -> User:
        """Create or update the user for an email with the given role."""
        query = self._db.table(self.TABLE).upsert(
            {"email": email, "role": role.value},
            on_conflict="email",
        )
        rows = self._execute(query, "set_role")
        return self._map_to_user(rows[0])

    def _map_to_user(self, data: dict[str, Any]) -> User:
        return User(
            id=str(data["id"]),
            email=data["email"],
            role=UserRole(data.get("role") or UserRole.STANDARD.value),
            last_login=data.get("last_login"),
            created_at=data.get("created_at"),
        )


class OTPRepository(BaseRepository[OTPCode]):
    """Repository for the otp_codes table."""

    TABLE = "otp_codes"

    def create(self, email: str, code: str, expires_at: datetime) -> OTPCode:
        query = self._db.table(self.TABLE).insert(
            {
                "email": email,
                "code": code,
                "expires_at": expires_at.isoformat(),
            }
        )
        rows = self._execute(query, "create_otp")
        return self._map_to_otp(rows[0])

    def find_valid(self, email: str, code: str, now: datetime) -> Optional[OTPCode]:
        """
        Get the most recent unused, unexpired code for an (email, code) pair.
        """
        query = (
            self._db.table(self.TABLE)
            .select("*")
            .eq("email", email)
            .eq("code", code)
            .eq("used", False)
            .gt("expires_at", now.isoformat())
            .order("created_at", desc=True)
            .limit(1)
        )
        rows = self._execute(query, "find_otp")
        return self._map_to_otp(rows[0]) if rows else None

    def mark_used(self, otp_id: str) -> bool:
        """
        Flip used to true if it is still false.

        Returns:
            True if this call consumed the code, False if it was already used.
        """
        query = (
            self._db.table(self.TABLE)
            .update({"used": True})
            .eq("id", otp_id)
            .eq("used", False)
        )
        rows = self._execute(query, "mark_otp_used")
        return bool(rows)

    def _map_to_otp(self, data: dict[str, Any]) -> OTPCode:
        return OTPCode(
            id=str(data["id"]),
            email=data["email"],
            code=data["code"],
            expires_at=data["expires_at"],
            used=data.get("used", False),
            created_at=data.get("created_at"),
        )


class SessionRepository(BaseRepository[Session]):
    """Repository for the sessions table."""

    TABLE = "sessions"

    def create(self, user_id: str, token: str, expires_at: datetime) -> Session:
        query = self._db.table(self.TABLE).insert(
            {
                "user_id": user_id,
                "token": token,
                "expires_at": expires_at.isoformat(),
            }
        )
        rows = self._execute(query, "create_session")
        return self._map_to_session(rows[0])

    def get_by_token(self, token: str) -> Optional[Session]:
        query = self._db.table(self.TABLE).select("*").eq("token", token).limit(1)
        rows = self._execute(query, "get_session")
        return self._map_to_session(rows[0]) if rows else None

    def delete_by_token(self, token: str) -> None:
        query = self._db.table(self.TABLE).delete().eq("token", token)
        self._execute(query, "delete_session")

    def _map_to_session(self, data: dict[str, Any]) -> Session:
        return Session(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            token=data["token"],
            expires_at=data["expires_at"],
            created_at=data.get("created_at"),
        )
