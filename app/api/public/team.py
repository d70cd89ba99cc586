from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.team_member import TeamMember
from app.services.serialization import row_to_dict

router = APIRouter()


@router.get("")
def list_team(db: Session = Depends(get_db)):
    rows = db.query(TeamMember).order_by(TeamMember.is_leadership.desc(), TeamMember.created_at.asc()).all()
    return [row_to_dict(r) for r in rows]


@router.get("/leadership")
def list_leadership(db: Session = Depends(get_db)):
    rows = (
        db.query(TeamMember)
        .filter(TeamMember.is_leadership.is_(True))
        .order_by(TeamMember.created_at.asc())
        .all()
    )
    return [row_to_dict(r) for r in rows]
