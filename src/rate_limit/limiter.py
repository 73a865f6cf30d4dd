import os
import time
import threading
import yaml
from pathlib import Path
from contextlib import contextmanager
from typing import Callable, Dict, Union

CONFIG_PATH = Path(os.getenv("RATE_LIMITS_PATH", "configs/rate_limits.yaml"))

DEFAULTS = {
    "printful": {"mode": "interval", "interval_sec": 0.6},
    "printful-inspect": {"mode": "interval", "interval_sec": 0.5},
}
FALLBACK = {"mode": "bucket", "rate_per_sec": 2, "burst": 5}

Clock = Callable[[], float]
Sleep = Callable[[float], None]

class SlidingWindowLimiter:
    """Token bucket: waits before the guarded call when no token is left."""

    def __init__(self, rate_per_sec: float, burst: int, clock: Clock = time.monotonic, sleep: Sleep = time.sleep):
        self.rate = rate_per_sec
        self.capacity = burst
        self.tokens = burst
        self.clock = clock
        self.sleep = sleep
        self.lock = threading.Lock()
        self.last = clock()

    @contextmanager
    def __call__(self):
        with self.lock:
            now = self.clock()
            elapsed = now - self.last
            self.last = now
            # refill
            self.tokens = min(self.capacity, self.tokens + elapsed * self.rate)
            if self.tokens < 1:
                # wait until we have at least 1 token
                needed = 1 - self.tokens
                self.sleep(needed / self.rate)
                self.tokens = 1
                self.last = self.clock()
            # consume
            self.tokens -= 1
        yield

class FixedIntervalGate:
    """Pauses a fixed interval after every guarded call, failed or not."""

    def __init__(self, interval_sec: float, sleep: Sleep = time.sleep):
        self.interval = interval_sec
        self.sleep = sleep

    @contextmanager
    def __call__(self):
        try:
            yield
        finally:
            if self.interval > 0:
                self.sleep(self.interval)

Limiter = Union[SlidingWindowLimiter, FixedIntervalGate]

def build_limiter(cfg: Dict, sleep: Sleep = time.sleep, clock: Clock = time.monotonic) -> Limiter:
    mode = cfg.get("mode", "bucket")
    if mode == "interval":
        return FixedIntervalGate(float(cfg.get("interval_sec", 0.6)), sleep=sleep)
    if mode == "bucket":
        return SlidingWindowLimiter(float(cfg["rate_per_sec"]), int(cfg["burst"]), clock=clock, sleep=sleep)
    raise ValueError(f"Unknown rate limit mode: {mode}")

def _load_config():
    if not CONFIG_PATH.exists():
        return {}
    return yaml.safe_load(CONFIG_PATH.read_text()) or {}

_limiters = {}

def get_limiter(channel: str) -> Limiter:
    cfg = _load_config().get(channel) or DEFAULTS.get(channel, FALLBACK)
    key = f"{channel}:" + ":".join(f"{k}={cfg[k]}" for k in sorted(cfg))
    if key not in _limiters:
        _limiters[key] = build_limiter(cfg)
    return _limiters[key]
