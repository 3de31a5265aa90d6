"""create_webinars_table

Revision ID: 4b1d7e2a9c10
Revises:
Create Date: 2026-03-01 12:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "4b1d7e2a9c10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create webinars table."""
    op.create_table(
        "webinars",
        # Primary key and timestamps from BaseMutableModel
        sa.Column("id", sa.String(length=64), nullable=False),
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
        # Ownership
        sa.Column(
            "organizer_id",
            sa.String(length=64),
            nullable=False,
            comment="User who organizes this webinar",
        ),
        # Details
        sa.Column("title", sa.Text(), nullable=False, comment="Webinar title"),
        sa.Column(
            "start_date",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="Scheduled start",
        ),
        sa.Column(
            "end_date",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="Scheduled end",
        ),
        sa.Column("seats", sa.Integer(), nullable=False, comment="Seat capacity"),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_webinars")),
        sa.CheckConstraint(
            "seats >= 1 AND seats <= 1000",
            name=op.f("ck_webinars_seats_range"),
        ),
    )
    op.create_index(
        op.f("ix_webinars_organizer_id"),
        "webinars",
        ["organizer_id"],
        unique=False,
    )


def downgrade() -> None:
    """Drop webinars table."""
    op.drop_index(op.f("ix_webinars_organizer_id"), table_name="webinars")
    op.drop_table("webinars")
