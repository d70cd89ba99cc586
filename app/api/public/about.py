from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.history_event import HistoryEvent
from app.services.serialization import row_to_dict

router = APIRouter()


@router.get("/history")
def list_history(db: Session = Depends(get_db)):
    rows = db.query(HistoryEvent).order_by(HistoryEvent.year.asc(), HistoryEvent.sort_order.asc()).all()
    return [row_to_dict(r) for r in rows]
