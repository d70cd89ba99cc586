import logging

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.deps import client_ip
from app.db.session import get_db
from app.models.contact_message import ContactMessage
from app.models.donation import Donation
from app.models.volunteer import Volunteer
from app.schemas.public import ContactMessageCreate, DonationCreate, NewsletterSubscribe, VolunteerCreate
from app.services.newsletter import subscribe_email
from app.services.rate_limit import enforce_form_rate_limit
from app.services.serialization import row_to_dict

router = APIRouter()
_LOG = logging.getLogger("app.forms")


@router.post("/donations", status_code=201)
def create_donation(payload: DonationCreate, request: Request, db: Session = Depends(get_db)):
    enforce_form_rate_limit("donation", client_ip(request))
    row = Donation(**payload.model_dump(), status="pending")
    db.add(row)
    db.commit()
    db.refresh(row)
    return row_to_dict(row)


@router.post("/volunteers", status_code=201)
def create_volunteer(payload: VolunteerCreate, request: Request, db: Session = Depends(get_db)):
    enforce_form_rate_limit("volunteer", client_ip(request))
    row = Volunteer(**payload.model_dump(), status="pending")
    db.add(row)
    db.commit()
    db.refresh(row)
    return row_to_dict(row)


@router.post("/contact", status_code=201)
def create_contact_message(payload: ContactMessageCreate, request: Request, db: Session = Depends(get_db)):
    enforce_form_rate_limit("contact", client_ip(request))
    row = ContactMessage(**payload.model_dump(), is_read=False)
    db.add(row)
    db.commit()
    db.refresh(row)
    if payload.newsletter:
        try:
            subscribe_email(db, payload.email)
        except SQLAlchemyError:
            db.rollback()
            _LOG.warning("newsletter opt-in failed for contact message id=%s", row.id, exc_info=True)
    return row_to_dict(row)


@router.post("/newsletter/subscribe", status_code=201)
def subscribe(payload: NewsletterSubscribe, request: Request, response: Response, db: Session = Depends(get_db)):
    enforce_form_rate_limit("newsletter", client_ip(request))
    row, created = subscribe_email(db, payload.email)
    if not created:
        response.status_code = 200
    return row_to_dict(row)
