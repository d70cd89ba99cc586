from sqlalchemy import JSON, Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from app.db.session import Base
from app.models.common import UUIDMixin, TimestampMixin

class TeamMember(Base, UUIDMixin, TimestampMixin):
    __tablename__ = "team_members"
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    bio: Mapped[str] = mapped_column(Text, nullable=False)
    image_url: Mapped[str] = mapped_column(String(1000), nullable=False)
    social_links: Mapped[dict] = mapped_column(JSON, default=dict, nullable=False)
    is_leadership: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, index=True)
