"""Initial schema

Revision ID: 001
Revises:
Create Date: 2026-10-19

Creates the catalog tables (destination, flight, hotel, activity)
and the saved itinerary table.
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

json_type = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def upgrade() -> None:
    """Create all tables."""
    op.create_table(
        "destination",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("country", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("image_url", sa.Text(), nullable=False),
        sa.Column("lat", sa.Float(), nullable=False),
        sa.Column("lng", sa.Float(), nullable=False),
    )

    op.create_table(
        "flight",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("airline", sa.Text(), nullable=False),
        sa.Column("flight_number", sa.Text(), nullable=False),
        sa.Column("departure_city", sa.Text(), nullable=False),
        sa.Column("arrival_city", sa.Text(), nullable=False),
        sa.Column("departure_time", sa.Text(), nullable=False),
        sa.Column("arrival_time", sa.Text(), nullable=False),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("duration", sa.Text(), nullable=False),
    )
    op.create_index("idx_flight_route", "flight", ["departure_city", "arrival_city"])

    op.create_table(
        "hotel",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("city", sa.Text(), nullable=False),
        sa.Column("address", sa.Text(), nullable=False),
        sa.Column("image_url", sa.Text(), nullable=False),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("rating", sa.Float(), nullable=False),
        sa.Column("amenities", json_type, nullable=False),
    )
    op.create_index("idx_hotel_city", "hotel", ["city"])

    op.create_table(
        "activity",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("destination_id", sa.Integer(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("duration", sa.Text(), nullable=False),
        sa.ForeignKeyConstraint(["destination_id"], ["destination.id"]),
    )
    op.create_index("idx_activity_destination", "activity", ["destination_id"])

    op.create_table(
        "itinerary",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("total_cost", sa.Float(), nullable=False),
        sa.Column("days", json_type, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("idx_itinerary_user", "itinerary", ["user_id", "created_at"])


def downgrade() -> None:
    """Drop all tables."""
    op.drop_index("idx_itinerary_user", table_name="itinerary")
    op.drop_table("itinerary")
    op.drop_index("idx_activity_destination", table_name="activity")
    op.drop_table("activity")
    op.drop_index("idx_hotel_city", table_name="hotel")
    op.drop_table("hotel")
    op.drop_index("idx_flight_route", table_name="flight")
    op.drop_table("flight")
    op.drop_table("destination")
