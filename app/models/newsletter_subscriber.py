from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column
from app.db.session import Base
from app.models.common import UUIDMixin, CreatedAtMixin

class NewsletterSubscriber(Base, UUIDMixin, CreatedAtMixin):
    __tablename__ = "newsletter_subscribers"
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)
