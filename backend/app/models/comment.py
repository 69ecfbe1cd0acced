"""
Anythink Market Backend — Comment SQLAlchemy Model
===================================================

What:  ORM model representing the `comments` table.
How:   Inherits from the shared DeclarativeBase; Alembic reads this for migrations.
Who:   Used by CommentService for CRUD operations and by Alembic for schema management.

Table Design:
    - seq: auto-incrementing primary key. Strictly increases with each insert,
      so List orders by it. Never exposed.
    - id: public UUID, assigned on insert, unique, never changed afterwards
    - text / author: free-form, NOT NULL
    - created_at: insertion time, kept for operators. Not part of the API shape.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import BigInteger, DateTime, Integer, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Comment(Base):
    """
    A single comment: free-form text with an author and a stable identifier.

    Lifecycle:
        1. Created by CommentService.create_comment (seq and id assigned at flush)
        2. text/author overwritten in place by update_comment
        3. Removed by delete_comment (hard delete)
    """

    __tablename__ = "comments"

    # BIGSERIAL on PostgreSQL; SQLite only auto-increments INTEGER PRIMARY KEY
    seq: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
        comment="Insertion sequence, orders List",
    )

    # Generic Uuid: native UUID on PostgreSQL, CHAR(32) on SQLite
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        unique=True,
        nullable=False,
        default=uuid.uuid4,
        comment="Unique identifier assigned at insert time",
    )

    text: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Comment body",
    )

    author: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Free-form author name",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
        comment="When this comment was stored (UTC)",
    )

    def __repr__(self) -> str:
        return f"<Comment(id={self.id}, author='{self.author}')>"
