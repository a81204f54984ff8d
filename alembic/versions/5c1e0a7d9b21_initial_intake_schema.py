"""initial intake schema

Revision ID: 5c1e0a7d9b21
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "5c1e0a7d9b21"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade():
    op.create_table(
        "quote_requests",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("company", sa.String(200)),
        sa.Column("phone", sa.String(50)),
        sa.Column("service_type", sa.String(50)),
        sa.Column("urgency", sa.String(20)),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("file_url", sa.String(2048)),
        sa.Column("status", sa.String(20), nullable=False, server_default="new"),
        *_timestamps(),
    )
    op.create_index("ix_quote_requests_email", "quote_requests", ["email"])
    op.create_index("ix_quote_requests_status", "quote_requests", ["status"])

    op.create_table(
        "job_listings",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("title", sa.JSON, nullable=False),
        sa.Column("description", sa.JSON, nullable=False),
        sa.Column("requirements", sa.JSON),
        sa.Column("department", sa.String(100), nullable=False),
        sa.Column("location", sa.String(200), nullable=False, server_default="Workshop"),
        sa.Column("job_type", sa.String(20), nullable=False, server_default="FULL_TIME"),
        sa.Column("salary_range", sa.String(100)),
        sa.Column("status", sa.String(20), nullable=False, server_default="DRAFT"),
        *_timestamps(),
    )
    op.create_index("ix_job_listings_status", "job_listings", ["status"])

    op.create_table(
        "applications",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("full_name", sa.String(200), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("phone", sa.String(50), nullable=False),
        sa.Column("cv_url", sa.String(2048), nullable=False),
        sa.Column(
            "job_id",
            sa.String(36),
            sa.ForeignKey("job_listings.id", ondelete="RESTRICT"),
            nullable=False,
        ),
        sa.Column("message", sa.Text),
        sa.Column("notes", sa.Text),
        sa.Column("status", sa.String(20), nullable=False, server_default="NEW"),
        *_timestamps(),
    )
    op.create_index("ix_applications_job_id", "applications", ["job_id"])
    op.create_index("ix_applications_email", "applications", ["email"])
    op.create_index("ix_applications_status", "applications", ["status"])

    op.create_table(
        "contact_messages",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("subject", sa.String(300), nullable=False),
        sa.Column("message", sa.Text, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )

    op.create_table(
        "site_settings",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("site_name", sa.String(200)),
        sa.Column("address", sa.String(300)),
        sa.Column("email", sa.String(320)),
        sa.Column("phone", sa.String(50)),
        sa.Column("whatsapp", sa.String(50)),
        sa.Column("facebook", sa.Text),
        sa.Column("linkedin", sa.Text),
        sa.Column("instagram", sa.Text),
        sa.Column("logo_url", sa.Text),
        sa.Column("hero_image_url", sa.Text),
        sa.Column("intro_image_url", sa.Text),
        sa.Column("business_hours_mon", sa.String(50)),
        sa.Column("business_hours_tue", sa.String(50)),
        sa.Column("business_hours_wed", sa.String(50)),
        sa.Column("business_hours_thu", sa.String(50)),
        sa.Column("business_hours_fri", sa.String(50)),
        sa.Column("business_hours_sat", sa.String(50)),
        sa.Column("business_hours_sun", sa.String(50)),
        *_timestamps(),
    )


def downgrade():
    op.drop_table("site_settings")
    op.drop_table("contact_messages")
    op.drop_index("ix_applications_status", table_name="applications")
    op.drop_index("ix_applications_email", table_name="applications")
    op.drop_index("ix_applications_job_id", table_name="applications")
    op.drop_table("applications")
    op.drop_index("ix_job_listings_status", table_name="job_listings")
    op.drop_table("job_listings")
    op.drop_index("ix_quote_requests_status", table_name="quote_requests")
    op.drop_index("ix_quote_requests_email", table_name="quote_requests")
    op.drop_table("quote_requests")
