"""Add watch_progress table

Revision ID: 002
Revises: 001
Create Date: 2025-11-20 00:00:00.000000
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "watch_progress",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("content_id", sa.Integer(), sa.ForeignKey("content.id", ondelete="CASCADE"), nullable=False),
        sa.Column("progress_seconds", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("duration_seconds", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("last_watched", sa.DateTime(timezone=True), nullable=False,
                  server_default=sa.text("now()")),
    )
    op.create_unique_constraint(
        "uq_watch_progress_user_content",
        "watch_progress",
        ["user_id", "content_id"],
    )
    # Continue-watching reads by user, newest first.
    op.create_index(
        "idx_watch_progress_user",
        "watch_progress",
        ["user_id", sa.text("last_watched DESC")],
    )


def downgrade() -> None:
    op.drop_index("idx_watch_progress_user", "watch_progress")
    op.drop_constraint("uq_watch_progress_user_content", "watch_progress", type_="unique")
    op.drop_table("watch_progress")
