from datetime import date as date_type

from sqlalchemy import Date, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from app.db.session import Base
from app.models.common import UUIDMixin, TimestampMixin, utcnow

def _today() -> date_type:
    return utcnow().date()

class NewsArticle(Base, UUIDMixin, TimestampMixin):
    __tablename__ = "news_articles"
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    excerpt: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[date_type] = mapped_column(Date, default=_today, nullable=False, index=True)
    image_url: Mapped[str] = mapped_column(String(1000), nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    author: Mapped[str] = mapped_column(String(200), nullable=False)
    slug: Mapped[str] = mapped_column(String(300), unique=True, nullable=False)
