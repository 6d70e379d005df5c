"""initial tables

Revision ID: a1c3e5f7b9d2
Revises:
Create Date: 2026-10-19

Creates users (JWT subject + admin flag) and the three resource tables:
recommendation, menu_item_review, ucsb_dining_commons_menu_item.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "a1c3e5f7b9d2"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("external_auth_uid", sa.String(36), nullable=False),
        sa.Column("external_auth_provider", sa.String(), nullable=True),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("admin", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_external_auth_uid", "users", ["external_auth_uid"], unique=True)
    op.create_index("ix_users_email", "users", ["email"], unique=False)

    op.create_table(
        "recommendation",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("requester_email", sa.String(), nullable=True),
        sa.Column("professor_email", sa.String(), nullable=True),
        sa.Column("explanation", sa.Text(), nullable=True),
        sa.Column("date_requested", sa.DateTime(), nullable=True),
        sa.Column("date_needed", sa.DateTime(), nullable=True),
        sa.Column("done", sa.Boolean(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "menu_item_review",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("item_id", sa.BigInteger(), nullable=True),
        sa.Column("reviewer_email", sa.String(), nullable=True),
        sa.Column("stars", sa.Integer(), nullable=True),
        sa.Column("comments", sa.Text(), nullable=True),
        sa.Column("date_reviewed", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_menu_item_review_item_id", "menu_item_review", ["item_id"], unique=False)

    op.create_table(
        "ucsb_dining_commons_menu_item",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("dining_commons_code", sa.String(), nullable=True),
        sa.Column("name", sa.String(), nullable=True),
        sa.Column("station", sa.String(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("ucsb_dining_commons_menu_item")
    op.drop_index("ix_menu_item_review_item_id", table_name="menu_item_review")
    op.drop_table("menu_item_review")
    op.drop_table("recommendation")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_index("ix_users_external_auth_uid", table_name="users")
    op.drop_table("users")
