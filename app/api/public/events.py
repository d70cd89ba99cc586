from fastapi import APIRouter, Depends
from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.common import utcnow
from app.models.event import Event
from app.services.serialization import row_to_dict

router = APIRouter()


@router.get("")
def list_events(db: Session = Depends(get_db)):
    rows = db.query(Event).order_by(Event.date.asc(), Event.created_at.asc()).all()
    return [row_to_dict(r) for r in rows]


@router.get("/upcoming")
def upcoming_events(db: Session = Depends(get_db)):
    today = utcnow().date()
    rows = (
        db.query(Event)
        .filter(Event.is_past.is_(False), Event.date >= today)
        .order_by(Event.date.asc(), Event.created_at.asc())
        .all()
    )
    return [row_to_dict(r) for r in rows]


@router.get("/past")
def past_events(db: Session = Depends(get_db)):
    today = utcnow().date()
    rows = (
        db.query(Event)
        .filter(or_(Event.is_past.is_(True), Event.date < today))
        .order_by(Event.date.desc(), Event.created_at.desc())
        .all()
    )
    return [row_to_dict(r) for r in rows]
