from datetime import datetime, timezone

from sqlmodel import Field, SQLModel


# Table is created with the rest of the schema; no endpoint reads or writes it yet.
class Comment(SQLModel, table=True):
    __tablename__ = "comments"

    id: str = Field(primary_key=True)
    user_id: str = Field(foreign_key="users.id", index=True)
    post_id: str = Field(foreign_key="posts.id", index=True)
    content: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
