"""
限速器测试
Rate Limiter Tests
"""
import pytest

from guess_phrase.game import RateLimiter


def test_never_fired_is_allowed():
    limiter = RateLimiter(0.7)
    assert limiter.allows(None, 0.0)
    assert limiter.remaining(None, 0.0) == 0.0


def test_interval_boundary():
    limiter = RateLimiter(0.7)
    assert not limiter.allows(10.0, 10.4)
    assert limiter.allows(10.0, 10.7)
    assert limiter.remaining(10.0, 10.4) == pytest.approx(0.3)
    assert limiter.remaining(10.0, 12.0) == 0.0


def test_zero_interval_always_allows():
    assert RateLimiter(0).allows(5.0, 5.0)


def test_negative_interval_rejected():
    with pytest.raises(ValueError):
        RateLimiter(-1)
