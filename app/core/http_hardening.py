from __future__ import annotations

import logging
import re
from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, Request

REQUEST_ID_HEADER = "X-Request-ID"
PUBLIC_CONTENT_PREFIX = "/api/public/"
PUBLIC_CONTENT_MAX_AGE_SECONDS = 60
_REQUEST_ID_RE = re.compile(r"^[A-Za-z0-9._-]{1,128}$")
_LOG = logging.getLogger("app.http")

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Permissions-Policy": "geolocation=(), microphone=(), camera=(), payment=()",
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
}


def _request_id_from_header(raw: str | None) -> str:
    value = str(raw or "").strip()
    if not value or not _REQUEST_ID_RE.fullmatch(value):
        return uuid4().hex
    return value


def _cache_headers(request: Request) -> dict[str, str]:
    # Public site content is read-mostly; everything else must not be reused.
    if request.method == "GET" and request.url.path.startswith(PUBLIC_CONTENT_PREFIX):
        return {"Cache-Control": f"public, max-age={PUBLIC_CONTENT_MAX_AGE_SECONDS}"}
    return {"Cache-Control": "no-store", "Pragma": "no-cache", "Expires": "0"}


def _response_security_headers(request: Request) -> dict[str, str]:
    headers = dict(SECURITY_HEADERS)
    headers.update(_cache_headers(request))
    return headers


def install_http_hardening(app: FastAPI) -> None:
    @app.middleware("http")
    async def _http_hardening_middleware(request: Request, call_next):
        request_id = _request_id_from_header(request.headers.get(REQUEST_ID_HEADER))
        request.state.request_id = request_id
        started_at = perf_counter()

        response = await call_next(request)

        for key, value in _response_security_headers(request).items():
            response.headers[key] = value
        response.headers[REQUEST_ID_HEADER] = request_id

        duration_ms = (perf_counter() - started_at) * 1000.0
        _LOG.info(
            "%s %s status=%s duration_ms=%.2f request_id=%s",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            request_id,
        )
        return response
