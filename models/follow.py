from datetime import datetime, timezone

from sqlmodel import Field, SQLModel


# Schema only, like Comment.
class Follow(SQLModel, table=True):
    __tablename__ = "follows"

    id: str = Field(primary_key=True)
    follower_id: str = Field(foreign_key="users.id", index=True)
    followee_id: str = Field(foreign_key="users.id", index=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
