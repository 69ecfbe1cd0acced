"""Create comments table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `comments` table for the comments API.
How:   `seq` is a BIGSERIAL-style identity that orders List; PostgreSQL
       assigns the public UUID (gen_random_uuid) when the application does
       not supply one.

Rollback: downgrade() drops the table entirely (destructive, all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the comments table."""
    op.create_table(
        "comments",

        sa.Column(
            "seq",
            sa.BigInteger(),
            sa.Identity(always=False),
            nullable=False,
            comment="Insertion sequence, orders List",
        ),

        sa.Column(
            "id",
            sa.Uuid(as_uuid=True),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
            comment="Unique identifier assigned at insert time",
        ),

        sa.Column(
            "text",
            sa.Text(),
            nullable=False,
            comment="Comment body",
        ),

        sa.Column(
            "author",
            sa.Text(),
            nullable=False,
            comment="Free-form author name",
        ),

        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this comment was stored (UTC)",
        ),

        sa.PrimaryKeyConstraint("seq"),
        sa.UniqueConstraint("id", name="uq_comments_id"),
    )


def downgrade() -> None:
    """Drop the comments table. Destructive: all comments are lost."""
    op.drop_table("comments")
