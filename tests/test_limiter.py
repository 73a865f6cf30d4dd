import pytest
from rate_limit.limiter import FixedIntervalGate, SlidingWindowLimiter, build_limiter, get_limiter


def test_gate_sleeps_after_each_call(sleeps):
    gate = FixedIntervalGate(0.6, sleep=sleeps.append)
    calls = []
    for i in range(3):
        with gate():
            calls.append(i)
    assert calls == [0, 1, 2]
    assert sleeps == [0.6, 0.6, 0.6]


def test_gate_sleeps_even_when_call_fails(sleeps):
    gate = FixedIntervalGate(0.5, sleep=sleeps.append)
    with pytest.raises(RuntimeError):
        with gate():
            raise RuntimeError("boom")
    assert sleeps == [0.5]


def test_zero_interval_never_sleeps(sleeps):
    with FixedIntervalGate(0, sleep=sleeps.append)():
        pass
    assert sleeps == []


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.now += seconds


def test_bucket_allows_burst_then_waits():
    clock = FakeClock()
    waits = []

    def sleep(s):
        waits.append(s)
        clock.sleep(s)

    limiter = SlidingWindowLimiter(rate_per_sec=2, burst=2, clock=clock, sleep=sleep)
    for _ in range(3):
        with limiter():
            pass
    assert waits == [pytest.approx(0.5)]


def test_build_limiter_modes(sleeps):
    assert isinstance(build_limiter({"mode": "interval", "interval_sec": 0.6}), FixedIntervalGate)
    assert isinstance(build_limiter({"mode": "bucket", "rate_per_sec": 1, "burst": 1}), SlidingWindowLimiter)
    with pytest.raises(ValueError):
        build_limiter({"mode": "cron"})


def test_printful_default_is_fixed_interval():
    limiter = get_limiter("printful")
    assert isinstance(limiter, FixedIntervalGate)
    assert 0.5 <= limiter.interval <= 0.6
