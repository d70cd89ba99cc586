from __future__ import annotations

from app.db.session import SessionLocal
from app.services.newsletter import broadcast_newsletter
from app.workers.celery_app import celery_app


@celery_app.task(name="app.workers.tasks.newsletter.send_broadcast")
def send_broadcast(subject: str, content: str, html: str | None = None, test_email: str | None = None, send_to_all: bool = False):
    db = SessionLocal()
    try:
        return broadcast_newsletter(
            db,
            subject=subject,
            content=content,
            html=html,
            test_email=test_email,
            send_to_all=send_to_all,
        )
    finally:
        db.close()
