import uuid

from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column
from app.db.session import Base
from app.models.common import UUIDMixin, CreatedAtMixin

class ArticleLike(Base, UUIDMixin, CreatedAtMixin):
    __tablename__ = "article_likes"
    __table_args__ = (UniqueConstraint("article_id", "email", name="uq_article_likes_article_email"),)
    article_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("news_articles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    email: Mapped[str] = mapped_column(String(320), nullable=False)
