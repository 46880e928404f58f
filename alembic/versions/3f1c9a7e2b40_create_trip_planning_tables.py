"""Create trip planning tables

Revision ID: 3f1c9a7e2b40
Revises:
Create Date: 2026-10-18 09:12:31.204518

"""

from collections.abc import Sequence

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1c9a7e2b40"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

ENUM_TYPES = (
    "tripstatus",
    "transporttype",
    "accommodationtype",
    "activitycategory",
    "budgetcategory",
    "documenttype",
    "notetype",
)

BUDGET_CATEGORIES = (
    "TRANSPORT",
    "ACCOMMODATION",
    "FOOD",
    "ACTIVITIES",
    "SHOPPING",
    "EMERGENCY",
    "OTHER",
)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


def _trip_child(name: str, *columns: sa.Column, **kwargs) -> None:
    """Create a table owned by a trip, with its trip_id index."""
    op.create_table(
        name,
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("trip_id", sa.Uuid(), nullable=False),
        *columns,
        *_timestamps(),
        sa.ForeignKeyConstraint(["trip_id"], ["trips.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        *kwargs.get("constraints", ()),
    )
    op.create_index(op.f(f"ix_{name}_trip_id"), name, ["trip_id"], unique=False)


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("username", sa.String(length=50), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("hashed_password", sa.String(length=255), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("full_name", sa.String(length=200), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
        sa.UniqueConstraint("username"),
    )

    op.create_table(
        "sessions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("token", sa.String(length=36), nullable=False),
        sa.Column("expires_at", sa.DateTime(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_sessions_token"), "sessions", ["token"], unique=True)
    op.create_index(
        op.f("ix_sessions_user_id"), "sessions", ["user_id"], unique=False
    )

    op.create_table(
        "trips",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("destination", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("start_date", sa.DateTime(), nullable=False),
        sa.Column("end_date", sa.DateTime(), nullable=False),
        sa.Column("cover_image_url", sa.String(length=500), nullable=True),
        sa.Column(
            "status",
            sa.Enum("PLANNING", "ACTIVE", "COMPLETED", name="tripstatus"),
            nullable=False,
        ),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_trips_user_id"), "trips", ["user_id"], unique=False)

    _trip_child(
        "transportation",
        sa.Column(
            "type",
            sa.Enum(
                "FLIGHT", "BUS", "TRAIN", "CAR", "BOAT", "OTHER", name="transporttype"
            ),
            nullable=False,
        ),
        sa.Column("company", sa.String(length=200), nullable=True),
        sa.Column("departure_location", sa.String(length=200), nullable=False),
        sa.Column("arrival_location", sa.String(length=200), nullable=False),
        sa.Column("departure_datetime", sa.DateTime(), nullable=False),
        sa.Column("arrival_datetime", sa.DateTime(), nullable=False),
        sa.Column("confirmation_code", sa.String(length=100), nullable=True),
        sa.Column("price", sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column("currency", sa.String(length=3), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
    )

    _trip_child(
        "accommodations",
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column(
            "type",
            sa.Enum(
                "HOTEL",
                "HOSTEL",
                "AIRBNB",
                "APARTMENT",
                "HOUSE",
                "OTHER",
                name="accommodationtype",
            ),
            nullable=False,
        ),
        sa.Column("address", sa.String(length=500), nullable=False),
        sa.Column("latitude", sa.Float(), nullable=True),
        sa.Column("longitude", sa.Float(), nullable=True),
        sa.Column("check_in_date", sa.DateTime(), nullable=False),
        sa.Column("check_out_date", sa.DateTime(), nullable=False),
        sa.Column("price_per_night", sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column("total_price", sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column("currency", sa.String(length=3), nullable=False),
        sa.Column("booking_url", sa.String(length=500), nullable=True),
        sa.Column("confirmation_code", sa.String(length=100), nullable=True),
        sa.Column("rating", sa.Integer(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
    )

    _trip_child(
        "activities",
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column(
            "category",
            sa.Enum(
                "CULTURAL",
                "FOOD",
                "NATURE",
                "ADVENTURE",
                "SHOPPING",
                "ENTERTAINMENT",
                "OTHER",
                name="activitycategory",
            ),
            nullable=False,
        ),
        sa.Column("address", sa.String(length=500), nullable=True),
        sa.Column("latitude", sa.Float(), nullable=True),
        sa.Column("longitude", sa.Float(), nullable=True),
        sa.Column("price", sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column("currency", sa.String(length=3), nullable=True),
        sa.Column("duration_hours", sa.Float(), nullable=True),
        sa.Column("opening_hours", sa.String(length=200), nullable=True),
        sa.Column("website_url", sa.String(length=500), nullable=True),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("rating", sa.Integer(), nullable=True),
    )

    _trip_child(
        "itineraries",
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
    )

    op.create_table(
        "itinerary_activities",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("itinerary_id", sa.Uuid(), nullable=False),
        sa.Column("activity_id", sa.Uuid(), nullable=False),
        sa.Column("start_time", sa.String(length=5), nullable=True),
        sa.Column("end_time", sa.String(length=5), nullable=True),
        sa.Column("order", sa.Integer(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["activity_id"], ["activities.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["itinerary_id"], ["itineraries.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_itinerary_activities_itinerary_id"),
        "itinerary_activities",
        ["itinerary_id"],
        unique=False,
    )

    _trip_child(
        "budgets",
        sa.Column(
            "category",
            sa.Enum(*BUDGET_CATEGORIES, name="budgetcategory"),
            nullable=False,
        ),
        sa.Column("planned_amount", sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column("actual_amount", sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column("currency", sa.String(length=3), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        constraints=(
            sa.UniqueConstraint("trip_id", "category", name="uq_budget_trip_category"),
        ),
    )

    _trip_child(
        "expenses",
        sa.Column("budget_id", sa.Uuid(), nullable=True),
        sa.Column("description", sa.String(length=500), nullable=False),
        sa.Column("amount", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column("currency", sa.String(length=3), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        # Shares the enum type created for budgets
        sa.Column(
            "category",
            postgresql.ENUM(
                *BUDGET_CATEGORIES, name="budgetcategory", create_type=False
            ),
            nullable=False,
        ),
        sa.Column("location", sa.String(length=200), nullable=True),
        sa.Column("receipt_url", sa.String(length=500), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        constraints=(
            sa.ForeignKeyConstraint(
                ["budget_id"], ["budgets.id"], ondelete="SET NULL"
            ),
        ),
    )

    _trip_child(
        "documents",
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column(
            "type",
            sa.Enum(
                "PASSPORT",
                "VISA",
                "TICKET",
                "RESERVATION",
                "INSURANCE",
                "OTHER",
                name="documenttype",
            ),
            nullable=False,
        ),
        sa.Column("file_url", sa.String(length=500), nullable=False),
        sa.Column("file_type", sa.String(length=100), nullable=False),
        sa.Column("file_size", sa.Integer(), nullable=False),
        sa.Column("expiry_date", sa.DateTime(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
    )

    _trip_child(
        "photos",
        sa.Column("itinerary_id", sa.Uuid(), nullable=True),
        sa.Column("activity_id", sa.Uuid(), nullable=True),
        sa.Column("file_url", sa.String(length=500), nullable=False),
        sa.Column("thumbnail_url", sa.String(length=500), nullable=True),
        sa.Column("caption", sa.Text(), nullable=True),
        sa.Column("taken_at", sa.DateTime(), nullable=True),
        sa.Column("latitude", sa.Float(), nullable=True),
        sa.Column("longitude", sa.Float(), nullable=True),
        constraints=(
            sa.ForeignKeyConstraint(
                ["itinerary_id"], ["itineraries.id"], ondelete="SET NULL"
            ),
            sa.ForeignKeyConstraint(
                ["activity_id"], ["activities.id"], ondelete="SET NULL"
            ),
        ),
    )

    _trip_child(
        "trip_notes",
        sa.Column("title", sa.String(length=200), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "note_type",
            sa.Enum("GENERAL", "IMPORTANT", "REMINDER", "IDEA", name="notetype"),
            nullable=False,
        ),
    )


def downgrade() -> None:
    for table in (
        "trip_notes",
        "photos",
        "documents",
        "expenses",
        "budgets",
    ):
        op.drop_index(op.f(f"ix_{table}_trip_id"), table_name=table)
        op.drop_table(table)
    op.drop_index(
        op.f("ix_itinerary_activities_itinerary_id"),
        table_name="itinerary_activities",
    )
    op.drop_table("itinerary_activities")
    for table in ("itineraries", "activities", "accommodations", "transportation"):
        op.drop_index(op.f(f"ix_{table}_trip_id"), table_name=table)
        op.drop_table(table)
    op.drop_index(op.f("ix_trips_user_id"), table_name="trips")
    op.drop_table("trips")
    op.drop_index(op.f("ix_sessions_user_id"), table_name="sessions")
    op.drop_index(op.f("ix_sessions_token"), table_name="sessions")
    op.drop_table("sessions")
    op.drop_table("users")
    # Drop the enum types if using PostgreSQL
    for enum_type in ENUM_TYPES:
        op.execute(f"DROP TYPE IF EXISTS {enum_type}")
