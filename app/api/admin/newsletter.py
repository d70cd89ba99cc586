import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.admin.crud import ContentTable, build_crud_router
from app.core.config import settings
from app.core.deps import get_current_admin
from app.db.session import get_db
from app.models.newsletter_subscriber import NewsletterSubscriber
from app.schemas.admin import BulkDelete, NewsletterBroadcast
from app.services.email_service import email_provider_health
from app.services.newsletter import broadcast_newsletter

SUBSCRIBERS = ContentTable(
    model=NewsletterSubscriber,
    label="Subscriber",
    searchable_fields=("email",),
)

router = APIRouter()


@router.delete("/subscribers/bulk")
def delete_subscribers_bulk(payload: BulkDelete, db: Session = Depends(get_db), admin: dict = Depends(get_current_admin)):
    if not payload.ids:
        raise HTTPException(status_code=400, detail="Invalid request: ids must be a non-empty array")
    try:
        ids = [uuid.UUID(str(raw).strip()) for raw in payload.ids]
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid request: ids must be subscriber ids")
    deleted = (
        db.query(NewsletterSubscriber)
        .filter(NewsletterSubscriber.id.in_(ids))
        .delete(synchronize_session=False)
    )
    db.commit()
    return {"message": "Subscribers removed successfully", "deleted": int(deleted)}


router.include_router(build_crud_router(SUBSCRIBERS, writable=False), prefix="/subscribers")


@router.post("/broadcast")
def broadcast(payload: NewsletterBroadcast, db: Session = Depends(get_db), admin: dict = Depends(get_current_admin)):
    if not payload.test_email and not payload.send_to_all:
        raise HTTPException(status_code=400, detail="Choose a test email or send to all subscribers")
    if settings.NEWSLETTER_ASYNC:
        from app.workers.tasks.newsletter import send_broadcast

        task = send_broadcast.delay(**payload.model_dump())
        return {"success": True, "queued": True, "task_id": str(task.id), "message": "Newsletter queued"}

    result = broadcast_newsletter(db, **payload.model_dump())
    if not result["success"]:
        raise HTTPException(status_code=400, detail=result["message"])
    return result


@router.get("/email-health")
def email_health(admin: dict = Depends(get_current_admin)):
    return email_provider_health()
