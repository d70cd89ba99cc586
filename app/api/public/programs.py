from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.program import Program
from app.services.serialization import row_to_dict

router = APIRouter()


@router.get("")
def list_programs(db: Session = Depends(get_db)):
    rows = db.query(Program).order_by(Program.created_at.asc()).all()
    return [row_to_dict(r) for r in rows]


@router.get("/featured")
def featured_programs(limit: int = Query(6, ge=1, le=20), db: Session = Depends(get_db)):
    rows = db.query(Program).order_by(Program.created_at.asc()).limit(limit).all()
    return [row_to_dict(r) for r in rows]


@router.get("/categories")
def program_categories(db: Session = Depends(get_db)):
    rows = db.query(Program.category).group_by(Program.category).order_by(Program.category.asc()).all()
    return [category for (category,) in rows]


@router.get("/{slug}")
def get_program(slug: str, db: Session = Depends(get_db)):
    row = db.query(Program).filter(Program.slug == slug).first()
    if row is None:
        raise HTTPException(status_code=404, detail="Program not found")
    return row_to_dict(row)
