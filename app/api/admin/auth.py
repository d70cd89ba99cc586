import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.deps import get_current_admin
from app.core.security import create_admin_token, verify_password
from app.db.session import get_db
from app.schemas.admin import AdminLogin, AdminToken
from app.services.admin_bootstrap import ensure_bootstrap_admin_for_login, get_active_admin_by_username

router = APIRouter()
_LOG = logging.getLogger("app.auth")


@router.post("/login", response_model=AdminToken)
def login(payload: AdminLogin, db: Session = Depends(get_db)):
    user = ensure_bootstrap_admin_for_login(db, payload.username, payload.password)
    if user is None:
        user = get_active_admin_by_username(db, payload.username)
        if not user or not verify_password(payload.password, user.password_hash):
            _LOG.info("admin login rejected username=%s", payload.username)
            raise HTTPException(status_code=401, detail="Incorrect username or password")

    token = create_admin_token(
        user_id=str(user.id),
        username=user.username,
        secret=settings.ADMIN_JWT_SECRET,
        expires_delta=timedelta(minutes=settings.ADMIN_JWT_TTL_MINUTES),
    )
    return AdminToken(access_token=token)


@router.get("/check")
def check(admin: dict = Depends(get_current_admin)):
    return {
        "authenticated": True,
        "user": {"id": admin.get("sub"), "username": admin.get("username"), "is_admin": True},
    }


@router.post("/logout")
def logout(admin: dict = Depends(get_current_admin)):
    # Tokens are stateless; the client drops its copy.
    return {"message": "Logout successful"}
