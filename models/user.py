from datetime import datetime, timezone

from sqlmodel import Field, SQLModel


class UserBase(SQLModel):
    email: str = Field(index=True, unique=True)
    name: str | None = Field(default=None)
    bio: str | None = Field(default=None)


class User(UserBase, table=True):
    __tablename__ = "users"

    id: str = Field(primary_key=True)
    password: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class UserPublic(UserBase):
    id: str
    created_at: datetime


class PrivateUser(UserPublic):
    """Includes the password hash. Only used to check credentials at login."""
    password: str
