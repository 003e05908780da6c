import pytest

from routes.ratelimit import TokenBucketLimiter


def test_burst_then_throttle():
    limiter = TokenBucketLimiter(rate=5, period=3600)

    waits = [limiter.acquire("1.2.3.4", now=100.0) for _ in range(6)]

    assert waits[:5] == [0] * 5
    # a token comes back every 720 seconds
    assert waits[5] == pytest.approx(720)


def test_tokens_refill_over_time():
    limiter = TokenBucketLimiter(rate=5, period=3600)
    for _ in range(5):
        limiter.acquire("1.2.3.4", now=0.0)

    assert limiter.acquire("1.2.3.4", now=360.0) > 0
    assert limiter.acquire("1.2.3.4", now=800.0) == 0


def test_clients_are_limited_separately():
    limiter = TokenBucketLimiter(rate=1, period=60)

    assert limiter.acquire("1.1.1.1", now=0.0) == 0
    assert limiter.acquire("2.2.2.2", now=0.0) == 0
    assert limiter.acquire("1.1.1.1", now=0.0) > 0
