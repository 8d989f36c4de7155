"""HTTP middleware: security headers, per-client rate limiting and request logging."""

import math
import threading
import time
from dataclasses import dataclass
from typing import Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from game_catalog.core.logging import get_logger

log = get_logger(__name__)

RATE_LIMIT_MESSAGE = "Too many requests, please try again later."

SECURITY_HEADERS: dict[str, str] = {
    "Content-Security-Policy": (
        "default-src 'self';base-uri 'self';font-src 'self' https: data:;form-action 'self';"
        "frame-ancestors 'self';img-src 'self' data:;object-src 'none';script-src 'self';"
        "script-src-attr 'none';style-src 'self' https: 'unsafe-inline';upgrade-insecure-requests"
    ),
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Origin-Agent-Cluster": "?1",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Frame-Options": "SAMEORIGIN",
    "X-Permitted-Cross-Domain-Policies": "none",
    "X-XSS-Protection": "0",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adds a fixed set of hardening headers to every response, unless the endpoint already set them."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response


@dataclass(frozen=True)
class RateLimitState:
    allowed: bool
    limit: int
    remaining: int
    reset_after: float


class FixedWindowRateLimiter:
    """
    Counts hits per key in fixed windows of `window_seconds`.
    ----
    State is shared by all requests handled by this process, so every access happens under the lock.
    """

    def __init__(
        self, max_requests: int, window_seconds: float, clock: Callable[[], float] = time.monotonic
    ) -> None:
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._lock = threading.Lock()
        # key -> (window start, hits in window)
        self._windows: dict[str, tuple[float, int]] = {}
        # Oldest window start still tracked; nothing can expire before it does
        self._earliest_start: float | None = None

    def hit(self, key: str) -> RateLimitState:
        now = self._clock()
        with self._lock:
            if self._earliest_start is not None and now - self._earliest_start >= self.window_seconds:
                self._evict_expired(now)
            start, count = self._windows.get(key, (now, 0))
            count += 1
            self._windows[key] = (start, count)
            if self._earliest_start is None or start < self._earliest_start:
                self._earliest_start = start

        reset_after = max(0.0, start + self.window_seconds - now)
        return RateLimitState(
            allowed=count <= self.max_requests,
            limit=self.max_requests,
            remaining=max(0, self.max_requests - count),
            reset_after=reset_after,
        )

    def reset(self) -> None:
        with self._lock:
            self._windows.clear()
            self._earliest_start = None

    def __len__(self) -> int:
        """Number of clients currently tracked."""
        with self._lock:
            return len(self._windows)

    def _evict_expired(self, now: float) -> None:
        expired = [key for key, (start, _) in self._windows.items() if now - start >= self.window_seconds]
        for key in expired:
            del self._windows[key]
        self._earliest_start = min((start for start, _ in self._windows.values()), default=None)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Rejects a client with 429 once it exceeds the limiter's budget for the current window."""

    def __init__(self, app: ASGIApp, limiter: FixedWindowRateLimiter) -> None:
        super().__init__(app)
        self.limiter = limiter

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        client = request.client.host if request.client else "unknown"
        state = self.limiter.hit(client)
        headers = {
            "RateLimit-Limit": str(state.limit),
            "RateLimit-Remaining": str(state.remaining),
            "RateLimit-Reset": str(math.ceil(state.reset_after)),
        }
        if not state.allowed:
            log.warning("Rate limit exceeded", client=client, path=request.url.path)
            headers["Retry-After"] = headers["RateLimit-Reset"]
            return JSONResponse(status_code=429, content={"error": RATE_LIMIT_MESSAGE}, headers=headers)

        response = await call_next(request)
        response.headers.update(headers)
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        log.info(
            "Request handled",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return response
