"""
Add bookmarks, bookmark_lists and bookmarks_in_lists tables.

Revision ID: 4f2a9c7d1b3e
Revises:
Create Date: 2026-10-18 09:12:40.118204
"""
from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4f2a9c7d1b3e"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "bookmarks",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.String(length=255), nullable=False),
        sa.Column("url", sa.Text(), nullable=False),
        sa.Column("title", sa.String(length=500), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_bookmarks_user_id"), "bookmarks", ["user_id"], unique=False)
    op.create_index(
        op.f("ix_bookmarks_updated_at"), "bookmarks", ["updated_at"], unique=False,
    )

    op.create_table(
        "bookmark_lists",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "user_id",
            sa.String(length=255),
            nullable=False,
            comment="Owner of the list; set at creation and never reassigned",
        ),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("icon", sa.String(length=100), nullable=False),
        sa.Column("parent_id", sa.Uuid(), nullable=True),
        sa.Column("type", sa.String(length=10), nullable=False),
        sa.Column("query", sa.Text(), nullable=True),
        *_timestamps(),
        sa.CheckConstraint(
            "query IS NULL OR type = 'smart'",
            name="ck_bookmark_lists_query_only_for_smart",
        ),
        sa.ForeignKeyConstraint(
            ["parent_id"], ["bookmark_lists.id"], ondelete="SET NULL",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_bookmark_lists_user_id"), "bookmark_lists", ["user_id"], unique=False,
    )
    op.create_index(
        op.f("ix_bookmark_lists_parent_id"), "bookmark_lists", ["parent_id"], unique=False,
    )
    op.create_index(
        op.f("ix_bookmark_lists_updated_at"), "bookmark_lists", ["updated_at"], unique=False,
    )

    op.create_table(
        "bookmarks_in_lists",
        sa.Column("list_id", sa.Uuid(), nullable=False),
        sa.Column("bookmark_id", sa.Uuid(), nullable=False),
        sa.Column(
            "added_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["list_id"], ["bookmark_lists.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["bookmark_id"], ["bookmarks.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("list_id", "bookmark_id", name="bookmarks_in_lists_pkey"),
    )
    op.create_index(
        op.f("ix_bookmarks_in_lists_bookmark_id"),
        "bookmarks_in_lists",
        ["bookmark_id"],
        unique=False,
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f("ix_bookmarks_in_lists_bookmark_id"), table_name="bookmarks_in_lists")
    op.drop_table("bookmarks_in_lists")
    op.drop_index(op.f("ix_bookmark_lists_updated_at"), table_name="bookmark_lists")
    op.drop_index(op.f("ix_bookmark_lists_parent_id"), table_name="bookmark_lists")
    op.drop_index(op.f("ix_bookmark_lists_user_id"), table_name="bookmark_lists")
    op.drop_table("bookmark_lists")
    op.drop_index(op.f("ix_bookmarks_updated_at"), table_name="bookmarks")
    op.drop_index(op.f("ix_bookmarks_user_id"), table_name="bookmarks")
    op.drop_table("bookmarks")
