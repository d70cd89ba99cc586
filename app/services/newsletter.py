from __future__ import annotations

import html as html_lib
import logging
from typing import Any

from sqlalchemy.orm import Session

from app.core.config import settings
from app.models.newsletter_subscriber import NewsletterSubscriber
from app.services.email_service import EmailDeliveryError, normalize_email, send_email

_LOG = logging.getLogger("app.newsletter")


def subscribe_email(db: Session, email: str) -> tuple[NewsletterSubscriber, bool]:
    """Return the subscriber row for ``email`` and whether it was created now."""
    normalized = normalize_email(email)
    existing = db.query(NewsletterSubscriber).filter(NewsletterSubscriber.email == normalized).first()
    if existing is not None:
        return existing, False
    row = NewsletterSubscriber(email=normalized)
    db.add(row)
    db.commit()
    db.refresh(row)
    return row, True


def subscriber_emails(db: Session) -> list[str]:
    rows = db.query(NewsletterSubscriber.email).order_by(NewsletterSubscriber.created_at.asc()).all()
    return [email for (email,) in rows]


def content_to_html(content: str) -> str:
    paragraphs = [part.strip() for part in str(content or "").split("\n\n") if part.strip()]
    return "".join(
        "<p>" + html_lib.escape(part).replace("\n", "<br>") + "</p>" for part in paragraphs
    )


def _batches(items: list[str], size: int) -> list[list[str]]:
    size = max(int(size), 1)
    return [items[i : i + size] for i in range(0, len(items), size)]


def send_newsletter(recipients: list[str], *, subject: str, content: str, html: str | None = None) -> dict[str, Any]:
    if not recipients:
        return {"success": False, "message": "No recipients specified", "sent": 0, "total": 0, "failed_batches": 0}

    html_content = html or content_to_html(content)
    sent = 0
    failed_batches = 0
    for batch in _batches(recipients, settings.NEWSLETTER_BATCH_SIZE):
        try:
            send_email(
                to=batch,
                subject=subject,
                text=content,
                html=html_content,
                from_name=settings.NEWSLETTER_FROM_NAME,
                bcc=True,
            )
        except EmailDeliveryError:
            failed_batches += 1
            _LOG.exception("newsletter batch failed size=%s", len(batch))
            continue
        sent += len(batch)

    total = len(recipients)
    _LOG.info("newsletter sent subject=%r sent=%s total=%s", subject, sent, total)
    return {
        "success": True,
        "message": f"Newsletter sent to {sent} out of {total} subscribers",
        "sent": sent,
        "total": total,
        "failed_batches": failed_batches,
    }


def broadcast_newsletter(
    db: Session,
    *,
    subject: str,
    content: str,
    html: str | None = None,
    test_email: str | None = None,
    send_to_all: bool = False,
) -> dict[str, Any]:
    if test_email:
        recipients = [normalize_email(test_email)]
    elif send_to_all:
        recipients = subscriber_emails(db)
    else:
        recipients = []
    return send_newsletter(recipients, subject=subject, content=content, html=html)
