from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.site_setting import SiteSetting

router = APIRouter()


@router.get("")
def public_settings(db: Session = Depends(get_db)):
    rows = db.query(SiteSetting).order_by(SiteSetting.key.asc()).all()
    return {r.key: r.value for r in rows}
