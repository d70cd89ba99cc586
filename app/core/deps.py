from fastapi import Depends, HTTPException
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.core.config import settings
from app.core.security import decode_jwt

bearer = HTTPBearer(auto_error=False)

def get_current_admin(creds: HTTPAuthorizationCredentials = Depends(bearer)) -> dict:
    if not creds:
        raise HTTPException(status_code=401, detail="Unauthorized")
    try:
        claims = decode_jwt(creds.credentials, settings.ADMIN_JWT_SECRET)
    except Exception:
        raise HTTPException(status_code=401, detail="Invalid token")
    if not claims.get("is_admin"):
        raise HTTPException(status_code=403, detail="Admin access required")
    return claims

def client_ip(request) -> str:
    forwarded = str(request.headers.get("x-forwarded-for") or "").split(",")[0].strip()
    if forwarded:
        return forwarded
    return request.client.host if request.client else "unknown"
