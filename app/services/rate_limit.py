from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from threading import Lock
from typing import Protocol

import redis
from fastapi import HTTPException

from app.core.config import settings

_LOG = logging.getLogger("app.rate_limit")
KEY_PREFIX = "rl:form"


@dataclass
class RateLimitResult:
    allowed: bool
    retry_after_seconds: int
    current_value: int


class RateLimiter(Protocol):
    def hit(self, key: str, *, limit: int, window_seconds: int) -> RateLimitResult:
        ...


class InMemoryRateLimiter:
    def __init__(self):
        self._windows: dict[str, tuple[int, datetime]] = {}
        self._lock = Lock()

    def hit(self, key: str, *, limit: int, window_seconds: int) -> RateLimitResult:
        now = datetime.now(timezone.utc)
        window = timedelta(seconds=max(int(window_seconds), 1))
        with self._lock:
            count, window_end = self._windows.get(key, (0, now))
            if window_end <= now:
                count, window_end = 0, now + window
            count += 1
            self._windows[key] = (count, window_end)
        retry_after = max(0, int((window_end - now).total_seconds()))
        return RateLimitResult(allowed=count <= limit, retry_after_seconds=retry_after, current_value=count)


class RedisRateLimiter:
    def __init__(self, client: redis.Redis):
        self.client = client

    def hit(self, key: str, *, limit: int, window_seconds: int) -> RateLimitResult:
        window = int(max(window_seconds, 1))
        count = int(self.client.incr(key))
        if count == 1:
            self.client.expire(key, window)
        ttl = int(self.client.ttl(key))
        if ttl < 0:
            ttl = window
        return RateLimitResult(allowed=count <= limit, retry_after_seconds=ttl, current_value=count)


_cached_limiter: RateLimiter | None = None


def _build_limiter() -> RateLimiter:
    try:
        client = redis.Redis.from_url(
            settings.REDIS_URL,
            decode_responses=True,
            socket_timeout=0.4,
            socket_connect_timeout=0.4,
        )
        client.ping()
        return RedisRateLimiter(client)
    except Exception:
        _LOG.warning("Redis limiter unavailable; fallback to in-memory limiter")
        return InMemoryRateLimiter()


def get_rate_limiter() -> RateLimiter:
    global _cached_limiter
    if _cached_limiter is None:
        _cached_limiter = _build_limiter()
    return _cached_limiter


def reset_rate_limiter_for_tests(limiter: RateLimiter | None = None) -> None:
    global _cached_limiter
    _cached_limiter = limiter


def enforce_form_rate_limit(form: str, client_key: str) -> None:
    result = get_rate_limiter().hit(
        f"{KEY_PREFIX}:{form}:{client_key}",
        limit=int(settings.PUBLIC_FORM_RATE_LIMIT),
        window_seconds=int(settings.PUBLIC_FORM_RATE_LIMIT_WINDOW_SECONDS),
    )
    if result.allowed:
        return
    _LOG.info("form rate limit hit form=%s client=%s count=%s", form, client_key, result.current_value)
    raise HTTPException(
        status_code=429,
        detail="Too many submissions, please try again later",
        headers={"Retry-After": str(result.retry_after_seconds)},
    )
