import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("ANTHROPIC_API_KEY", "test-key")

from rate_limit import (  # noqa: E402
    UNKNOWN_CLIENT,
    ClientWindow,
    InMemoryWindowStore,
    RateLimiter,
    client_key_from_request,
)


class FakeClock:
    def __init__(self, now: float = 1_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def make_limiter(max_requests=20, window=60, clock=None, rng=lambda: 1.0):
    return RateLimiter(
        InMemoryWindowStore(),
        max_requests=max_requests,
        window_seconds=window,
        clock=clock or FakeClock(),
        rng=rng,
    )


def test_twenty_five_requests_against_twenty_per_minute():
    limiter = make_limiter()
    decisions = [limiter.check("1.2.3.4") for _ in range(25)]

    assert all(not d.limited for d in decisions[:20])
    assert all(d.limited for d in decisions[20:])


def test_limited_requests_do_not_increment_the_count():
    limiter = make_limiter(max_requests=2)
    for _ in range(5):
        limiter.check("c")

    assert limiter.store.get("c").count == 2


def test_retry_after_counts_down_to_window_end():
    clock = FakeClock(100.0)
    limiter = make_limiter(max_requests=1, window=60, clock=clock)
    limiter.check("c")

    clock.now = 130.2
    decision = limiter.check("c")

    assert decision.limited is True
    assert decision.retry_after_s == 30


def test_window_resets_only_after_it_has_ended():
    clock = FakeClock(0.0)
    limiter = make_limiter(max_requests=1, window=60, clock=clock)
    assert limiter.check("c").limited is False

    clock.now = 60.0
    assert limiter.check("c").limited is True

    clock.now = 60.5
    assert limiter.check("c").limited is False
    assert limiter.store.get("c").count == 1


def test_clients_are_counted_separately():
    limiter = make_limiter(max_requests=1)
    assert limiter.check("a").limited is False
    assert limiter.check("b").limited is False
    assert limiter.check("a").limited is True


def test_sweep_drops_expired_windows_only():
    clock = FakeClock(500.0)
    store = InMemoryWindowStore()
    store.put(ClientWindow(client_key="old", count=3, window_end=100.0))
    store.put(ClientWindow(client_key="live", count=3, window_end=900.0))
    limiter = RateLimiter(store, max_requests=5, window_seconds=60, clock=clock, rng=lambda: 0.0)

    limiter.check("new")

    assert store.get("old") is None
    assert store.get("live").count == 3
    assert store.get("new").count == 1


def test_no_sweep_when_draw_is_above_probability():
    store = InMemoryWindowStore()
    store.put(ClientWindow(client_key="old", count=1, window_end=0.0))
    limiter = RateLimiter(store, max_requests=5, window_seconds=60, clock=FakeClock(500.0), rng=lambda: 0.5)

    limiter.check("new")

    assert store.get("old") is not None


def test_client_key_prefers_real_ip_then_forwarded_for():
    assert client_key_from_request({"x-real-ip": "9.9.9.9", "x-forwarded-for": "1.1.1.1"}, "peer") == "9.9.9.9"
    assert client_key_from_request({"x-forwarded-for": " 1.1.1.1 , 2.2.2.2"}, "peer") == "1.1.1.1"
    assert client_key_from_request({}, "10.0.0.7") == "10.0.0.7"


def test_client_key_falls_back_to_shared_bucket():
    assert client_key_from_request({}, None) == UNKNOWN_CLIENT
    assert client_key_from_request({"x-forwarded-for": "  "}) == UNKNOWN_CLIENT
