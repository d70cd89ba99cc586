from __future__ import annotations

import re

from sqlalchemy.orm import Session

SLUG_RE = re.compile(r"^[a-z0-9-]+$")
# ASCII word characters only; whitespace stays Unicode-aware.
_STRIP_RE = re.compile(r"[^A-Za-z0-9_\s-]")
_SPACE_RE = re.compile(r"\s+")
_DASH_RE = re.compile(r"-+")


def generate_slug(title: str | None) -> str:
    text = str(title or "").lower()
    text = _STRIP_RE.sub("", text)
    text = _SPACE_RE.sub("-", text)
    return _DASH_RE.sub("-", text)


def is_valid_slug(slug: str | None) -> bool:
    value = str(slug or "")
    return len(value) >= 3 and bool(SLUG_RE.fullmatch(value))


def unique_slug(db: Session, model, base: str, *, exclude_id=None) -> str:
    candidate = base
    suffix = 2
    while True:
        q = db.query(model.id).filter(model.slug == candidate)
        if exclude_id is not None:
            q = q.filter(model.id != exclude_id)
        if q.first() is None:
            return candidate
        candidate = f"{base}-{suffix}"
        suffix += 1
