"""init
Revision ID: 0001_init
Revises:
Create Date: 2026-10-18
"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision = "0001_init"
down_revision = None
branch_labels = None
depends_on = None


def _id():
    return sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True)


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def _created_at():
    return sa.Column("created_at", sa.DateTime(timezone=True), nullable=False)


def upgrade():
    op.create_table(
        "admin_users",
        _id(),
        *_timestamps(),
        sa.Column("username", sa.String(length=100), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
    )

    op.create_table(
        "news_articles",
        _id(),
        *_timestamps(),
        sa.Column("title", sa.String(length=300), nullable=False),
        sa.Column("excerpt", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("image_url", sa.String(length=1000), nullable=False),
        sa.Column("category", sa.String(length=100), nullable=False),
        sa.Column("author", sa.String(length=200), nullable=False),
        sa.Column("slug", sa.String(length=300), nullable=False, unique=True),
    )
    op.create_index("ix_news_articles_date", "news_articles", ["date"])
    op.create_index("ix_news_articles_category", "news_articles", ["category"])

    op.create_table(
        "article_comments",
        _id(),
        _created_at(),
        sa.Column(
            "article_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("news_articles.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "parent_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("article_comments.id", ondelete="CASCADE"),
            nullable=True,
        ),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("is_approved", sa.Boolean(), nullable=False, server_default=sa.text("false")),
    )
    op.create_index("ix_article_comments_article_id", "article_comments", ["article_id"])

    op.create_table(
        "article_likes",
        _id(),
        _created_at(),
        sa.Column(
            "article_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("news_articles.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.UniqueConstraint("article_id", "email", name="uq_article_likes_article_email"),
    )
    op.create_index("ix_article_likes_article_id", "article_likes", ["article_id"])

    op.create_table(
        "programs",
        _id(),
        *_timestamps(),
        sa.Column("title", sa.String(length=300), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("long_description", sa.Text(), nullable=False),
        sa.Column("category", sa.String(length=100), nullable=False),
        sa.Column("image_url", sa.String(length=1000), nullable=False),
        sa.Column("slug", sa.String(length=300), nullable=False, unique=True),
    )
    op.create_index("ix_programs_category", "programs", ["category"])

    op.create_table(
        "team_members",
        _id(),
        *_timestamps(),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("bio", sa.Text(), nullable=False),
        sa.Column("image_url", sa.String(length=1000), nullable=False),
        sa.Column("social_links", sa.JSON(), nullable=False, server_default=sa.text("'{}'::json")),
        sa.Column("is_leadership", sa.Boolean(), nullable=False, server_default=sa.text("false")),
    )
    op.create_index("ix_team_members_is_leadership", "team_members", ["is_leadership"])

    op.create_table(
        "videos",
        _id(),
        *_timestamps(),
        sa.Column("title", sa.String(length=300), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("thumbnail_url", sa.String(length=1000), nullable=False),
        sa.Column("video_url", sa.String(length=1000), nullable=False),
        sa.Column("duration", sa.String(length=20), nullable=False),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("category", sa.String(length=100), nullable=False),
        sa.Column("is_featured", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("is_main_feature", sa.Boolean(), nullable=False, server_default=sa.text("false")),
    )
    op.create_index("ix_videos_date", "videos", ["date"])
    op.create_index("ix_videos_category", "videos", ["category"])

    op.create_table(
        "donations",
        _id(),
        _created_at(),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("amount", sa.Integer(), nullable=False),
        sa.Column("payment_method", sa.String(length=50), nullable=False),
        sa.Column("recurring", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("transaction_id", sa.String(length=200), nullable=True),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="pending"),
    )
    op.create_index("ix_donations_email", "donations", ["email"])
    op.create_index("ix_donations_status", "donations", ["status"])

    op.create_table(
        "volunteers",
        _id(),
        _created_at(),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("phone", sa.String(length=40), nullable=False),
        sa.Column("areas", sa.JSON(), nullable=False, server_default=sa.text("'[]'::json")),
        sa.Column("availability", sa.JSON(), nullable=False, server_default=sa.text("'[]'::json")),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="pending"),
    )
    op.create_index("ix_volunteers_email", "volunteers", ["email"])
    op.create_index("ix_volunteers_status", "volunteers", ["status"])

    op.create_table(
        "contact_messages",
        _id(),
        _created_at(),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("subject", sa.String(length=300), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("newsletter", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("is_read", sa.Boolean(), nullable=False, server_default=sa.text("false")),
    )
    op.create_index("ix_contact_messages_is_read", "contact_messages", ["is_read"])

    op.create_table(
        "newsletter_subscribers",
        _id(),
        _created_at(),
        sa.Column("email", sa.String(length=320), nullable=False, unique=True),
    )

    op.create_table(
        "history_events",
        _id(),
        *_timestamps(),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=300), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("image_url", sa.String(length=1000), nullable=True),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
    )
    op.create_index("ix_history_events_year", "history_events", ["year"])

    op.create_table(
        "university_courses",
        _id(),
        *_timestamps(),
        sa.Column("title", sa.String(length=300), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("level", sa.String(length=50), nullable=False),
        sa.Column("duration", sa.String(length=100), nullable=False),
        sa.Column("instructors", sa.JSON(), nullable=False, server_default=sa.text("'[]'::json")),
        sa.Column("image_url", sa.String(length=1000), nullable=False),
        sa.Column("application_link", sa.String(length=1000), nullable=True),
    )

    op.create_table(
        "faculty_members",
        _id(),
        *_timestamps(),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("specialization", sa.String(length=200), nullable=False),
        sa.Column("bio", sa.Text(), nullable=False),
        sa.Column("image_url", sa.String(length=1000), nullable=False),
    )

    op.create_table(
        "events",
        _id(),
        *_timestamps(),
        sa.Column("title", sa.String(length=300), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("time", sa.String(length=50), nullable=False),
        sa.Column("location", sa.String(length=300), nullable=False),
        sa.Column("image_url", sa.String(length=1000), nullable=False),
        sa.Column("registration_link", sa.String(length=1000), nullable=True),
        sa.Column("is_past", sa.Boolean(), nullable=False, server_default=sa.text("false")),
    )
    op.create_index("ix_events_date", "events", ["date"])

    op.create_table(
        "site_settings",
        _id(),
        *_timestamps(),
        sa.Column("key", sa.String(length=100), nullable=False, unique=True),
        sa.Column("value", sa.Text(), nullable=False),
        sa.Column("label", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("group", sa.String(length=50), nullable=False, server_default="general"),
        sa.Column("type", sa.String(length=30), nullable=False, server_default="text"),
    )
    op.create_index("ix_site_settings_group", "site_settings", ["group"])


def downgrade():
    op.drop_table("site_settings")
    op.drop_table("events")
    op.drop_table("faculty_members")
    op.drop_table("university_courses")
    op.drop_table("history_events")
    op.drop_table("newsletter_subscribers")
    op.drop_table("contact_messages")
    op.drop_table("volunteers")
    op.drop_table("donations")
    op.drop_table("videos")
    op.drop_table("team_members")
    op.drop_table("programs")
    op.drop_table("article_likes")
    op.drop_table("article_comments")
    op.drop_table("news_articles")
    op.drop_table("admin_users")
