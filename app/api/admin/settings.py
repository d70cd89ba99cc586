from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.admin.crud import ContentTable, commit_or_409, list_rows, query_rows
from app.core.deps import get_current_admin
from app.db.session import get_db
from app.models.site_setting import SiteSetting
from app.schemas.admin import SiteSettingCreate, SiteSettingUpdate
from app.schemas.table import TableQuery
from app.services.serialization import load_row_or_404, row_to_dict

SETTINGS = ContentTable(
    model=SiteSetting,
    label="Setting",
    searchable_fields=("key", "label", "value", "group"),
    order_by=lambda m: (m.group.asc(), m.key.asc()),
)

router = APIRouter()


@router.get("")
def list_settings(db: Session = Depends(get_db), admin: dict = Depends(get_current_admin)):
    return [row_to_dict(row) for row in list_rows(db, SETTINGS)]


@router.post("/query")
def query_settings(tq: TableQuery, db: Session = Depends(get_db), admin: dict = Depends(get_current_admin)):
    return query_rows(db, SETTINGS, tq)


@router.post("", status_code=201)
def create_setting(payload: SiteSettingCreate, db: Session = Depends(get_db), admin: dict = Depends(get_current_admin)):
    row = SiteSetting(**payload.model_dump())
    db.add(row)
    commit_or_409(db, SETTINGS)
    db.refresh(row)
    return row_to_dict(row)


@router.patch("/{key}")
def update_setting(key: str, payload: SiteSettingUpdate, db: Session = Depends(get_db), admin: dict = Depends(get_current_admin)):
    row = db.query(SiteSetting).filter(SiteSetting.key == key).first()
    if row is None:
        raise HTTPException(status_code=404, detail=SETTINGS.not_found)
    for field, value in payload.model_dump(exclude_none=True).items():
        setattr(row, field, value)
    db.add(row); db.commit(); db.refresh(row)
    return row_to_dict(row)


@router.delete("/{row_id}")
def delete_setting(row_id: str, db: Session = Depends(get_db), admin: dict = Depends(get_current_admin)):
    row = load_row_or_404(db, SiteSetting, row_id, SETTINGS.not_found)
    db.delete(row); db.commit()
    return {"message": "Setting deleted successfully"}
