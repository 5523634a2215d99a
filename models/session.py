from datetime import datetime, timezone

from sqlmodel import Field, SQLModel


class AuthSession(SQLModel, table=True):
    """Login session. The session_id is the bearer token stored in the cookie.

    There is no expiry column: a session lives until its row is deleted.
    """
    __tablename__ = "sessions"

    session_id: str = Field(primary_key=True)
    user_id: str = Field(foreign_key="users.id", index=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
