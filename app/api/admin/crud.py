from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, create_model
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.deps import get_current_admin
from app.db.session import get_db
from app.schemas.table import TableQuery
from app.services.serialization import load_row_or_404, row_to_dict, row_values
from app.services.table_data import process_table

PrepareHook = Callable[[Session, dict[str, Any], Any], dict[str, Any]]
AfterSaveHook = Callable[[Session, Any], None]


@dataclass
class ContentTable:
    """Admin CRUD description of one content model."""

    model: type
    label: str
    searchable_fields: Sequence[str]
    order_by: Callable[[type], Sequence[Any]] = lambda model: (model.created_at.desc(),)
    upsert_schema: type[BaseModel] | None = None
    prepare: PrepareHook | None = None
    after_save: AfterSaveHook | None = None
    serialize: Callable[[Any], dict[str, Any]] = row_to_dict

    @property
    def not_found(self) -> str:
        return f"{self.label} not found"


def list_rows(db: Session, table: ContentTable) -> list:
    return db.query(table.model).order_by(*table.order_by(table.model)).all()


def query_rows(db: Session, table: ContentTable, tq: TableQuery) -> dict[str, Any]:
    # Raw values keep their types so dates and numbers sort as such.
    records = [(row_values(row), row) for row in list_rows(db, table)]
    result = process_table(
        records,
        search_text=tq.search,
        filters=tq.filters,
        searchable_fields=table.searchable_fields,
        sort_config=tq.sort_config(),
        pagination=tq.pagination(),
        accessor=lambda record, name: record[0].get(name),
    )
    result["rows"] = [table.serialize(row) for _, row in result["rows"]]
    return result


def commit_or_409(db: Session, table: ContentTable) -> None:
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail=f"{table.label} conflicts with an existing record")


def save_row(db: Session, table: ContentTable, payload: dict[str, Any], row: Any = None):
    if table.prepare is not None:
        payload = table.prepare(db, dict(payload), row)
    if row is None:
        row = table.model(**payload)
    else:
        for key, value in payload.items():
            setattr(row, key, value)
    db.add(row)
    commit_or_409(db, table)
    if table.after_save is not None:
        table.after_save(db, row)
    db.refresh(row)
    return row


def partial_schema(schema: type[BaseModel]) -> type[BaseModel]:
    """Copy of ``schema`` with every field optional, for PATCH bodies."""
    fields = {name: (Optional[field.annotation], None) for name, field in schema.model_fields.items()}
    return create_model(f"{schema.__name__}Patch", __base__=schema, **fields)


def update_values(table: ContentTable, payload: BaseModel) -> dict[str, Any]:
    # Only fields the client sent; null clears nullable columns only.
    columns = table.model.__table__.columns
    values = payload.model_dump(exclude_unset=True)
    return {
        key: value
        for key, value in values.items()
        if value is not None or key not in columns or columns[key].nullable
    }


def delete_row(db: Session, table: ContentTable, row_id: str) -> None:
    row = load_row_or_404(db, table.model, row_id, table.not_found)
    db.delete(row)
    db.commit()


def build_crud_router(table: ContentTable, *, writable: bool = True) -> APIRouter:
    router = APIRouter()
    schema = table.upsert_schema
    patch_schema = partial_schema(schema) if schema is not None else None

    @router.get("")
    def list_all(db: Session = Depends(get_db), admin: dict = Depends(get_current_admin)):
        return [table.serialize(row) for row in list_rows(db, table)]

    @router.post("/query")
    def query(tq: TableQuery, db: Session = Depends(get_db), admin: dict = Depends(get_current_admin)):
        return query_rows(db, table, tq)

    @router.get("/{row_id}")
    def get_one(row_id: str, db: Session = Depends(get_db), admin: dict = Depends(get_current_admin)):
        return table.serialize(load_row_or_404(db, table.model, row_id, table.not_found))

    @router.delete("/{row_id}")
    def delete(row_id: str, db: Session = Depends(get_db), admin: dict = Depends(get_current_admin)):
        delete_row(db, table, row_id)
        return {"message": f"{table.label} deleted successfully"}

    if not writable or schema is None:
        return router

    @router.post("", status_code=201)
    def create(payload: schema, db: Session = Depends(get_db), admin: dict = Depends(get_current_admin)):
        row = save_row(db, table, payload.model_dump(exclude_none=True))
        return table.serialize(row)

    @router.put("/{row_id}")
    def replace(row_id: str, payload: schema, db: Session = Depends(get_db), admin: dict = Depends(get_current_admin)):
        row = load_row_or_404(db, table.model, row_id, table.not_found)
        row = save_row(db, table, update_values(table, payload), row)
        return table.serialize(row)

    @router.patch("/{row_id}")
    def update(row_id: str, payload: patch_schema, db: Session = Depends(get_db), admin: dict = Depends(get_current_admin)):
        row = load_row_or_404(db, table.model, row_id, table.not_found)
        row = save_row(db, table, update_values(table, payload), row)
        return table.serialize(row)

    return router
