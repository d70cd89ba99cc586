from __future__ import annotations

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.security import hash_password
from app.models.admin_user import AdminUser


def normalize_username(raw: str | None) -> str:
    return str(raw or "").strip().lower()


def get_active_admin_by_username(db: Session, username: str) -> AdminUser | None:
    normalized = normalize_username(username)
    if not normalized:
        return None
    return (
        db.query(AdminUser)
        .filter(
            func.lower(AdminUser.username) == normalized,
            AdminUser.is_active.is_(True),
            AdminUser.is_admin.is_(True),
        )
        .first()
    )


def ensure_bootstrap_admin_for_login(db: Session, username: str, password: str) -> AdminUser | None:
    if not settings.ADMIN_BOOTSTRAP_ENABLED:
        return None

    normalized = normalize_username(username)
    bootstrap_username = normalize_username(settings.ADMIN_BOOTSTRAP_USERNAME)
    if not bootstrap_username or normalized != bootstrap_username:
        return None
    if str(password or "") != str(settings.ADMIN_BOOTSTRAP_PASSWORD or ""):
        return None

    user = db.query(AdminUser).filter(func.lower(AdminUser.username) == bootstrap_username).first()
    if user is not None:
        # An existing account keeps its own password; only make sure it can log in.
        if not user.is_admin or not user.is_active:
            user.is_admin = True
            user.is_active = True
            db.add(user)
            db.commit()
        return None

    user = AdminUser(
        username=bootstrap_username,
        password_hash=hash_password(str(settings.ADMIN_BOOTSTRAP_PASSWORD)),
        is_admin=True,
        is_active=True,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        return get_active_admin_by_username(db, bootstrap_username)
    db.refresh(user)
    return user
