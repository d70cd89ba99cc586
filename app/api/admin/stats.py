from fastapi import APIRouter, Depends
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.deps import get_current_admin
from app.db.session import get_db
from app.models.contact_message import ContactMessage
from app.models.donation import Donation
from app.models.event import Event
from app.models.news_article import NewsArticle
from app.models.newsletter_subscriber import NewsletterSubscriber
from app.models.program import Program
from app.models.team_member import TeamMember
from app.models.video import Video
from app.models.volunteer import Volunteer

router = APIRouter()

STAT_MODELS = {
    "articles": NewsArticle,
    "programs": Program,
    "team": TeamMember,
    "videos": Video,
    "donations": Donation,
    "volunteers": Volunteer,
    "contacts": ContactMessage,
    "subscribers": NewsletterSubscriber,
    "events": Event,
}


@router.get("")
def admin_stats(db: Session = Depends(get_db), admin: dict = Depends(get_current_admin)):
    stats = {name: int(db.query(func.count(model.id)).scalar() or 0) for name, model in STAT_MODELS.items()}
    stats["unread_contacts"] = int(
        db.query(func.count(ContactMessage.id)).filter(ContactMessage.is_read.is_(False)).scalar() or 0
    )
    stats["pending_donations"] = int(
        db.query(func.count(Donation.id)).filter(Donation.status == "pending").scalar() or 0
    )
    return stats
