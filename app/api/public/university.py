from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.faculty_member import FacultyMember
from app.models.university_course import UniversityCourse
from app.services.serialization import row_to_dict

router = APIRouter()


@router.get("/courses")
def list_courses(db: Session = Depends(get_db)):
    rows = db.query(UniversityCourse).order_by(UniversityCourse.created_at.asc()).all()
    return [row_to_dict(r) for r in rows]


@router.get("/faculty")
def list_faculty(db: Session = Depends(get_db)):
    rows = db.query(FacultyMember).order_by(FacultyMember.created_at.asc()).all()
    return [row_to_dict(r) for r in rows]
