"""Initial schema — events, opportunities, publications, reports, newsletters, subscribers.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

TABLES = (
    "events", "opportunities", "publications", "reports", "newsletters", "subscribers",
)


def _base_columns() -> list[sa.Column]:
    return [
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def _slug_columns() -> list[sa.Column]:
    return [
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("slug", sa.String(320), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "events",
        *_base_columns(),
        *_slug_columns(),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("short_description", sa.String(200), nullable=True),
        sa.Column("type", sa.String(20), nullable=False, server_default="other"),
        sa.Column("status", sa.String(20), nullable=False, server_default="upcoming"),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("venue", sa.String(300), nullable=True),
        sa.Column("city", sa.String(120), nullable=True),
        sa.Column("country", sa.String(120), nullable=True),
        sa.Column("is_online", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("meeting_link", sa.String(2000), nullable=True),
        sa.Column("capacity", sa.Integer, nullable=True),
        sa.Column("registered_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("registration_required", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("registration_deadline", sa.DateTime(timezone=True), nullable=True),
        sa.Column("cover_image_url", sa.String(2000), nullable=True),
        sa.Column("tags", sa.JSON, nullable=False),
        sa.Column("is_featured", sa.Boolean, nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_events_start_date", "events", ["start_date"])

    op.create_table(
        "opportunities",
        *_base_columns(),
        *_slug_columns(),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("category", sa.String(20), nullable=False, server_default="full-time"),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("requirements", sa.JSON, nullable=False),
        sa.Column("location", sa.String(300), nullable=False),
        sa.Column("is_remote", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("application_deadline", sa.DateTime(timezone=True), nullable=False),
        sa.Column("openings", sa.Integer, nullable=False, server_default="1"),
        sa.Column("organization_name", sa.String(300), nullable=True),
        sa.Column("how_to_apply", sa.Text, nullable=False),
        sa.Column("application_link", sa.String(2000), nullable=True),
        sa.Column("contact_email", sa.String(320), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="active"),
        sa.Column("is_featured", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("views", sa.Integer, nullable=False, server_default="0"),
    )

    op.create_table(
        "publications",
        *_base_columns(),
        *_slug_columns(),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("abstract", sa.Text, nullable=True),
        sa.Column("language", sa.String(50), nullable=False, server_default="English"),
        sa.Column("isbn", sa.String(20), nullable=True),
        sa.Column("page_count", sa.Integer, nullable=True),
        sa.Column("file_url", sa.String(2000), nullable=True),
        sa.Column("categories", sa.JSON, nullable=False),
        sa.Column("tags", sa.JSON, nullable=False),
        sa.Column("download_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("is_free", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("price", sa.Float, nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="published"),
        sa.Column("publication_date", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        "reports",
        *_base_columns(),
        *_slug_columns(),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("year", sa.Integer, nullable=False),
        sa.Column("quarter", sa.String(2), nullable=True),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("executive_summary", sa.Text, nullable=True),
        sa.Column("highlights", sa.JSON, nullable=False),
        sa.Column("file_url", sa.String(2000), nullable=True),
        sa.Column("download_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("status", sa.String(20), nullable=False, server_default="draft"),
        sa.Column("published_date", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_reports_year", "reports", ["year"])

    op.create_table(
        "newsletters",
        *_base_columns(),
        *_slug_columns(),
        sa.Column("subject", sa.String(300), nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("excerpt", sa.Text, nullable=True),
        sa.Column("issue_volume", sa.Integer, nullable=True),
        sa.Column("issue_number", sa.Integer, nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="draft"),
        sa.Column("scheduled_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("sent_date", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        "subscribers",
        *_base_columns(),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("name", sa.String(200), nullable=True),
        sa.Column("frequency", sa.String(20), nullable=False, server_default="monthly"),
        sa.Column("categories", sa.JSON, nullable=False),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("subscribed_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("unsubscribed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("source", sa.String(50), nullable=False, server_default="website"),
    )
    op.create_index("ix_subscribers_email", "subscribers", ["email"], unique=True)

    for table in TABLES:
        op.create_index(f"ix_{table}_created_at", table, ["created_at"])
        if table != "subscribers":
            op.create_index(f"ix_{table}_slug", table, ["slug"], unique=True)


def downgrade() -> None:
    for table in reversed(TABLES):
        op.drop_table(table)
