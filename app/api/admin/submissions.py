from fastapi import Depends
from sqlalchemy.orm import Session

from app.api.admin.crud import ContentTable, build_crud_router
from app.core.deps import get_current_admin
from app.db.session import get_db
from app.models.contact_message import ContactMessage
from app.models.donation import Donation
from app.models.volunteer import Volunteer
from app.schemas.admin import ContactReadUpdate, DonationStatusUpdate, VolunteerStatusUpdate
from app.services.serialization import load_row_or_404, row_to_dict

DONATIONS = ContentTable(
    model=Donation,
    label="Donation",
    searchable_fields=("first_name", "last_name", "email", "transaction_id", "payment_method"),
)
VOLUNTEERS = ContentTable(
    model=Volunteer,
    label="Volunteer application",
    searchable_fields=("first_name", "last_name", "email", "phone", "message"),
)
CONTACTS = ContentTable(
    model=ContactMessage,
    label="Contact message",
    searchable_fields=("name", "email", "subject", "message"),
)

donations_router = build_crud_router(DONATIONS, writable=False)
volunteers_router = build_crud_router(VOLUNTEERS, writable=False)
contact_router = build_crud_router(CONTACTS, writable=False)


@donations_router.put("/{row_id}/status")
def update_donation_status(
    row_id: str,
    payload: DonationStatusUpdate,
    db: Session = Depends(get_db),
    admin: dict = Depends(get_current_admin),
):
    row = load_row_or_404(db, Donation, row_id, DONATIONS.not_found)
    row.status = payload.status
    db.add(row); db.commit(); db.refresh(row)
    return row_to_dict(row)


@volunteers_router.put("/{row_id}/status")
def update_volunteer_status(
    row_id: str,
    payload: VolunteerStatusUpdate,
    db: Session = Depends(get_db),
    admin: dict = Depends(get_current_admin),
):
    row = load_row_or_404(db, Volunteer, row_id, VOLUNTEERS.not_found)
    row.status = payload.status
    db.add(row); db.commit(); db.refresh(row)
    return row_to_dict(row)


@contact_router.put("/{row_id}/read")
def update_contact_read(
    row_id: str,
    payload: ContactReadUpdate,
    db: Session = Depends(get_db),
    admin: dict = Depends(get_current_admin),
):
    row = load_row_or_404(db, ContactMessage, row_id, CONTACTS.not_found)
    row.is_read = payload.is_read
    db.add(row); db.commit(); db.refresh(row)
    return row_to_dict(row)
