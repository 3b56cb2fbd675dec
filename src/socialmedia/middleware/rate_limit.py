from collections import deque
from time import monotonic

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from socialmedia.shared import Config, Logger, load_config

logger = Logger(__name__).get_logger()
config: Config = load_config()
config_rate_limit = config.network.rate_limit

WINDOW_S = 1.0


class RateLimit(BaseHTTPMiddleware):
    """Per-client sliding window throttle.

    A client that sends more than ``max_per_second`` requests inside one
    window is refused with 429 until ``timeout_period_s`` has passed.
    """

    def __init__(
        self,
        app,
        dispatch=None,
        timeout_period_s=config_rate_limit.timeout_period,
        max_per_second=config_rate_limit.requests_per_second,
    ):
        super().__init__(app, dispatch)

        self.max_per_second = max_per_second
        self.timeout_period_s = timeout_period_s

        self._windows: dict[str, deque[float]] = {}
        self._blocked_since: dict[str, float] = {}

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        # CORS preflight never counts against the client
        if request.method == "OPTIONS" or request.client is None:
            return await call_next(request)

        if not self.allow(request.client.host, monotonic()):
            return JSONResponse(status_code=429, content={"detail": "Too many requests."})

        return await call_next(request)

    def allow(self, key: str, now: float) -> bool:
        blocked_at = self._blocked_since.get(key)
        if blocked_at is not None:
            if now - blocked_at <= self.timeout_period_s:
                return False
            del self._blocked_since[key]

        window = self._windows.setdefault(key, deque())
        window.append(now)
        while now - window[0] > WINDOW_S:
            window.popleft()

        if len(window) > self.max_per_second:
            logger.warning("Throttling %s for %ss", key, self.timeout_period_s)
            self._blocked_since[key] = now
            window.clear()
            return False

        return True
