from __future__ import annotations

import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from fastapi import HTTPException
from sqlalchemy.inspection import inspect as sa_inspect
from sqlalchemy.orm import Session


def serialize_value(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: serialize_value(val) for key, val in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize_value(item) for item in value]
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, Decimal):
        return float(value)
    return value


def row_values(row: Any) -> dict[str, Any]:
    mapper = sa_inspect(type(row))
    return {column.key: getattr(row, column.key) for column in mapper.columns}


def row_to_dict(row: Any) -> dict[str, Any]:
    return serialize_value(row_values(row))


def parse_uuid_or_404(raw: str, detail: str) -> uuid.UUID:
    try:
        return uuid.UUID(str(raw or "").strip())
    except ValueError:
        raise HTTPException(status_code=404, detail=detail)


def load_row_or_404(db: Session, model, row_id: str, detail: str):
    row = db.get(model, parse_uuid_or_404(row_id, detail))
    if row is None:
        raise HTTPException(status_code=404, detail=detail)
    return row
