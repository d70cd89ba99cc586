from logging.config import fileConfig
from alembic import context
from sqlalchemy import engine_from_config, pool
import os
from app.db.session import Base

# import models
from app.models.admin_user import AdminUser
from app.models.news_article import NewsArticle
from app.models.article_comment import ArticleComment
from app.models.article_like import ArticleLike
from app.models.program import Program
from app.models.team_member import TeamMember
from app.models.video import Video
from app.models.donation import Donation
from app.models.volunteer import Volunteer
from app.models.contact_message import ContactMessage
from app.models.newsletter_subscriber import NewsletterSubscriber
from app.models.history_event import HistoryEvent
from app.models.university_course import UniversityCourse
from app.models.faculty_member import FacultyMember
from app.models.event import Event
from app.models.site_setting import SiteSetting

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)
target_metadata = Base.metadata

def get_url():
    return os.getenv("DATABASE_URL")

def run_migrations_offline():
    context.configure(url=get_url(), target_metadata=target_metadata, literal_binds=True, compare_type=True)
    with context.begin_transaction():
        context.run_migrations()

def run_migrations_online():
    cfg = config.get_section(config.config_ini_section) or {}
    cfg["sqlalchemy.url"] = get_url()
    connectable = engine_from_config(cfg, prefix="sqlalchemy.", poolclass=pool.NullPool)
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata, compare_type=True)
        with context.begin_transaction():
            context.run_migrations()

if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
