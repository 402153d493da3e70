"""create_activities_table

Revision ID: 5f3a9c2e7b41
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "5f3a9c2e7b41"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "activities",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "owner_id",
            sa.String(length=64),
            nullable=False,
            comment="Opaque id of the owning user, supplied by the auth gateway",
        ),
        sa.Column(
            "activity_type",
            sa.String(length=32),
            nullable=False,
            comment="transportation, electricity, food, waste or water",
        ),
        sa.Column(
            "category",
            sa.String(length=50),
            nullable=False,
            comment="Category within the activity type (e.g. car, meat)",
        ),
        sa.Column(
            "amount",
            sa.Float(),
            nullable=False,
            comment="Quantity in the declared unit",
        ),
        sa.Column(
            "unit",
            sa.String(length=20),
            nullable=False,
            comment="Descriptive unit; not used in computation",
        ),
        sa.Column(
            "carbon_footprint",
            sa.Float(),
            nullable=False,
            comment="Computed footprint in kg CO2",
        ),
        sa.Column(
            "date",
            sa.DateTime(),
            nullable=False,
            comment="When the activity happened",
        ),
        sa.Column("description", sa.Text(), nullable=True, comment="Optional free text"),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_activities")),
        comment="Activities logged by users with their computed carbon footprint",
    )
    op.create_index(
        op.f("ix_activities_owner_id"),
        "activities",
        ["owner_id"],
        unique=False,
    )
    op.create_index(
        "ix_activities_owner_date",
        "activities",
        ["owner_id", "date"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_activities_owner_date", table_name="activities")
    op.drop_index(op.f("ix_activities_owner_id"), table_name="activities")
    op.drop_table("activities")
