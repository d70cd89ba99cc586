from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from app.db.session import Base
from app.models.common import UUIDMixin, TimestampMixin

class UniversityCourse(Base, UUIDMixin, TimestampMixin):
    __tablename__ = "university_courses"
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    level: Mapped[str] = mapped_column(String(50), nullable=False)
    duration: Mapped[str] = mapped_column(String(100), nullable=False)
    instructors: Mapped[list] = mapped_column(JSON, default=list, nullable=False)
    image_url: Mapped[str] = mapped_column(String(1000), nullable=False)
    application_link: Mapped[str | None] = mapped_column(String(1000), nullable=True)
