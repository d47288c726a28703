"""create owners, pets and visits tables

Revision ID: 0001_create_petclinic_tables
Revises:
Create Date: 2026-10-19

"""

from __future__ import annotations

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision = "0001_create_petclinic_tables"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "owners",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True, nullable=False),
        sa.Column("first_name", sa.String(length=30), nullable=False),
        sa.Column("last_name", sa.String(length=30), nullable=False),
        sa.Column("address", sa.String(length=255), nullable=False),
        sa.Column("city", sa.String(length=80), nullable=False),
        sa.Column("telephone", sa.String(length=10), nullable=False),
        *_timestamps(),
    )
    op.create_index(op.f("ix_owners_last_name"), "owners", ["last_name"], unique=False)

    op.create_table(
        "pets",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True, nullable=False),
        sa.Column(
            "owner_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("owners.id", ondelete="RESTRICT"),
            nullable=False,
        ),
        sa.Column("name", sa.String(length=30), nullable=False),
        sa.Column("birth_date", sa.Date(), nullable=False),
        sa.Column("type", sa.String(length=30), nullable=False),
        *_timestamps(),
    )
    op.create_index(op.f("ix_pets_owner_id"), "pets", ["owner_id"], unique=False)

    op.create_table(
        "visits",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True, nullable=False),
        sa.Column(
            "pet_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("pets.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("visit_date", sa.Date(), nullable=False),
        sa.Column("description", sa.String(length=255), nullable=False),
        *_timestamps(),
    )
    op.create_index(op.f("ix_visits_pet_id"), "visits", ["pet_id"], unique=False)
    op.create_index(op.f("ix_visits_visit_date"), "visits", ["visit_date"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_visits_visit_date"), table_name="visits")
    op.drop_index(op.f("ix_visits_pet_id"), table_name="visits")
    op.drop_table("visits")
    op.drop_index(op.f("ix_pets_owner_id"), table_name="pets")
    op.drop_table("pets")
    op.drop_index(op.f("ix_owners_last_name"), table_name="owners")
    op.drop_table("owners")
