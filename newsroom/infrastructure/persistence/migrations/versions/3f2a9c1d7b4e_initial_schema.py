"""initial_schema: admin, content tables, view ledger, nav menu

Revision ID: 3f2a9c1d7b4e
Revises:
Create Date: 2026-10-19 10:12:41.208331

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f2a9c1d7b4e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Upgrade schema - create all tables."""

    # Admin credential record with the password reset sub-state
    op.create_table(
        "admin",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("username", sa.String(30), nullable=False),
        sa.Column("email", sa.String(254), nullable=False),
        sa.Column("hashed_password", sa.String(), nullable=False),
        sa.Column("otp_hash", sa.String(64), nullable=True),
        sa.Column("otp_expires_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("otp_verified", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("otp_attempts", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("locked_until", sa.DateTime(timezone=True), nullable=True),
        sa.Column("last_otp_request_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "reset_session_active", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column("reset_session_expires_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("version", sa.Integer(), nullable=False, server_default="1"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_admin_email"),
    )
    op.create_index("ix_admin_created_at", "admin", ["created_at"])

    op.create_table(
        "category",
        sa.Column("id", sa.String(24), nullable=False),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("slug", sa.String(80), nullable=False),
        sa.Column("description", sa.String(500), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="uq_category_name"),
        sa.UniqueConstraint("slug", name="uq_category_slug"),
    )
    op.create_index("ix_category_is_active", "category", ["is_active"])
    op.create_index("ix_category_created_at", "category", ["created_at"])

    op.create_table(
        "sub_category",
        sa.Column("id", sa.String(24), nullable=False),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("slug", sa.String(80), nullable=False),
        sa.Column("category_id", sa.String(24), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["category_id"], ["category.id"], ondelete="RESTRICT"),
        sa.UniqueConstraint("category_id", "slug", name="uq_sub_category_category_slug"),
    )
    op.create_index("ix_sub_category_category_id", "sub_category", ["category_id"])
    op.create_index("ix_sub_category_is_active", "sub_category", ["is_active"])
    op.create_index("ix_sub_category_created_at", "sub_category", ["created_at"])

    op.create_table(
        "tag",
        sa.Column("id", sa.String(24), nullable=False),
        sa.Column("name", sa.String(50), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="uq_tag_name"),
    )
    op.create_index("ix_tag_created_at", "tag", ["created_at"])

    op.create_table(
        "post",
        sa.Column("id", sa.String(24), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("slug", sa.String(320), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("image_url", sa.String(), nullable=False),
        sa.Column("image_public_id", sa.String(), nullable=False),
        sa.Column("category_id", sa.String(24), nullable=True),
        sa.Column("sub_category_id", sa.String(24), nullable=True),
        sa.Column("is_draft", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("is_favourite", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["category_id"], ["category.id"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(
            ["sub_category_id"], ["sub_category.id"], ondelete="SET NULL"
        ),
    )
    op.create_index("ix_post_slug", "post", ["slug"])
    op.create_index("ix_post_category_id", "post", ["category_id"])
    op.create_index("ix_post_sub_category_id", "post", ["sub_category_id"])
    op.create_index("ix_post_is_draft", "post", ["is_draft"])
    op.create_index("ix_post_created_at", "post", ["created_at"])

    op.create_table(
        "post_tag",
        sa.Column("post_id", sa.String(24), nullable=False),
        sa.Column("tag_id", sa.String(24), nullable=False),
        sa.PrimaryKeyConstraint("post_id", "tag_id"),
        sa.ForeignKeyConstraint(["post_id"], ["post.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_id"], ["tag.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_post_tag_tag_id", "post_tag", ["tag_id"])

    # View ledger: append-only, purged after the retention period
    op.create_table(
        "post_view",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("post_id", sa.String(24), nullable=False),
        sa.Column("viewer_ip", sa.String(64), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["post_id"], ["post.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_post_view_post_viewer", "post_view", ["post_id", "viewer_ip"])
    op.create_index("ix_post_view_created_at", "post_view", ["created_at"])

    op.create_table(
        "ad",
        sa.Column("id", sa.String(24), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("link", sa.String(), nullable=False),
        sa.Column("image_url", sa.String(), nullable=False),
        sa.Column("image_public_id", sa.String(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_ad_type", "ad", ["type"])
    op.create_index("ix_ad_is_active", "ad", ["is_active"])
    op.create_index("ix_ad_created_at", "ad", ["created_at"])

    op.create_table(
        "subscription",
        sa.Column("id", sa.String(24), nullable=False),
        sa.Column("email", sa.String(254), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_subscription_email"),
    )
    op.create_index("ix_subscription_created_at", "subscription", ["created_at"])

    op.create_table(
        "nav_menu",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("category_ids", sa.JSON(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_nav_menu_created_at", "nav_menu", ["created_at"])


def downgrade() -> None:
    """Downgrade schema - drop all tables."""
    op.drop_table("nav_menu")
    op.drop_table("subscription")
    op.drop_table("ad")
    op.drop_table("post_view")
    op.drop_table("post_tag")
    op.drop_table("post")
    op.drop_table("tag")
    op.drop_table("sub_category")
    op.drop_table("category")
    op.drop_table("admin")
