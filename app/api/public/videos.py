from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.admin.content import serialize_video
from app.db.session import get_db
from app.models.video import Video

router = APIRouter()


def _newest_first(query):
    return query.order_by(Video.date.desc(), Video.created_at.desc())


@router.get("")
def list_videos(category: str | None = Query(None), db: Session = Depends(get_db)):
    q = db.query(Video)
    if category:
        q = q.filter(Video.category == category)
    return [serialize_video(r) for r in _newest_first(q).all()]


@router.get("/featured")
def featured_videos(limit: int = Query(3, ge=1, le=20), db: Session = Depends(get_db)):
    rows = _newest_first(db.query(Video).filter(Video.is_featured.is_(True))).limit(limit).all()
    return [serialize_video(r) for r in rows]


@router.get("/main-feature")
def main_feature_video(db: Session = Depends(get_db)):
    row = _newest_first(db.query(Video).filter(Video.is_main_feature.is_(True))).first()
    return serialize_video(row) if row is not None else None


@router.get("/categories")
def video_categories(db: Session = Depends(get_db)):
    rows = db.query(Video.category).group_by(Video.category).order_by(Video.category.asc()).all()
    return [category for (category,) in rows]
