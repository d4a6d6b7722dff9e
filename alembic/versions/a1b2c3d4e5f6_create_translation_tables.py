"""create_translation_tables

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-19

Creates `content_meta` (per-record attributes holding translation edges),
`options` (named settings, incl. source/target languages) and
`content_records` (host records, read for trash status).
"""

from __future__ import annotations

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "a1b2c3d4e5f6"
down_revision: str | None = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "content_records",
        sa.Column("id", sa.String(64), primary_key=True, index=True),
        sa.Column("title", sa.String, nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="draft"),
    )

    op.create_table(
        "content_meta",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True, index=True),
        sa.Column("record_id", sa.String(64), nullable=False, index=True),
        sa.Column("meta_key", sa.String(191), nullable=False),
        sa.Column("meta_value", sa.Text, nullable=True),
        sa.Column("updated_at", sa.DateTime, nullable=False),
        # One value per (record, key)
        sa.UniqueConstraint("record_id", "meta_key", name="uq_content_meta_record_key"),
    )
    op.create_index("idx_cm_key", "content_meta", ["meta_key"])

    op.create_table(
        "options",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True, index=True),
        sa.Column("name", sa.String(191), nullable=False, unique=True),
        sa.Column("value", sa.Text, nullable=True),
    )


def downgrade() -> None:
    op.drop_table("options")
    op.drop_index("idx_cm_key", table_name="content_meta")
    op.drop_table("content_meta")
    op.drop_table("content_records")
