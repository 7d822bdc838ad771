"""
Initial schema: participants, animators and groups.

Revision ID: 20261019_000000_initial_schema
Revises:
Create Date: 2026-10-19 00:00:00
"""

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op  # type: ignore[reportMissingImports]

# revision identifiers, used by Alembic.
revision = "20261019_000000_initial_schema"
down_revision = None
branch_labels = None
depends_on = None

JSONList = sa.JSON().with_variant(postgresql.JSONB(astext_type=sa.Text()), "postgresql")


def upgrade() -> None:
    # participants
    op.create_table(
        "participants",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("age", sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint("id", name="participants_pkey"),
        sa.CheckConstraint("length(name) >= 2", name="ck_participants_name_length"),
    )

    # animators
    op.create_table(
        "animators",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("conversations", JSONList, nullable=False),
        sa.PrimaryKeyConstraint("id", name="animators_pkey"),
        sa.CheckConstraint("length(name) >= 2", name="ck_animators_name_length"),
    )

    # groups
    op.create_table(
        "groups",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("participant_ids", JSONList, nullable=False),
        sa.Column("animator_ids", JSONList, nullable=False),
        sa.PrimaryKeyConstraint("id", name="groups_pkey"),
        sa.UniqueConstraint("name", name="groups_name_key"),
        sa.CheckConstraint("length(name) >= 2", name="ck_groups_name_length"),
    )


def downgrade() -> None:
    op.drop_table("groups")
    op.drop_table("animators")
    op.drop_table("participants")
