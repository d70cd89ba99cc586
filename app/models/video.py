from datetime import date as date_type

from sqlalchemy import Boolean, Date, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from app.db.session import Base
from app.models.common import UUIDMixin, TimestampMixin, utcnow

def _today() -> date_type:
    return utcnow().date()

class Video(Base, UUIDMixin, TimestampMixin):
    __tablename__ = "videos"
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    thumbnail_url: Mapped[str] = mapped_column(String(1000), nullable=False)
    video_url: Mapped[str] = mapped_column(String(1000), nullable=False)
    duration: Mapped[str] = mapped_column(String(20), nullable=False)
    views: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    date: Mapped[date_type] = mapped_column(Date, default=_today, nullable=False, index=True)
    category: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    is_featured: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_main_feature: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
