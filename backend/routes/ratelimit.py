"""Per client rate limiting of the account endpoints"""

import logging
import math
import threading
import time

from expiringdict import ExpiringDict
from fastapi import HTTPException, Request

import settings
from utils.logs import ratelimited_log

logger = logging.getLogger("dailyverse.ratelimit")


def client_ip(request: Request) -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


class TokenBucketLimiter:
    """Token bucket per client: `rate` requests of burst, refilled over `period` seconds.

    Usable as a FastAPI dependency, raising a 429 when the bucket is empty.
    """

    def __init__(self, rate: int, period: int, max_clients: int = 10_000):
        self.capacity = rate
        self.refill_per_second = rate / period
        # an idle bucket is full again after a period, it can be forgotten
        self.buckets = ExpiringDict(max_len=max_clients, max_age_seconds=period)
        self.lock = threading.Lock()

    def acquire(self, key: str, now: float | None = None) -> float:
        """Take a token, return 0 or how many seconds to wait for the next one"""
        now = time.monotonic() if now is None else now
        with self.lock:
            tokens, last = self.buckets.get(key, (self.capacity, now))
            tokens = min(self.capacity, tokens + (now - last) * self.refill_per_second)
            if tokens >= 1:
                self.buckets[key] = (tokens - 1, now)
                return 0
            self.buckets[key] = (tokens, now)
            return (1 - tokens) / self.refill_per_second

    def __call__(self, request: Request):
        ip = client_ip(request)
        wait = self.acquire(ip)
        if wait:
            ratelimited_log(logger.warning, f"Throttling requests from {ip}")
            raise HTTPException(
                status_code=429,
                detail="Too many requests. Please try again later.",
                headers={"Retry-After": str(math.ceil(wait))},
            )


auth_limiter = TokenBucketLimiter(
    settings.AUTH_RATE_LIMIT, settings.AUTH_RATE_PERIOD_SECONDS
)
