from __future__ import annotations

from typing import Callable, Optional
import math
import time

from .errors import InvalidSeed

# Zero-argument callable returning wall-clock epoch seconds.
Clock = Callable[[], float]


def system_clock() -> float:
    return time.time()


def seed_from_clock(clock: Optional[Clock] = None) -> int:
    """Whole seconds from `clock`, rounded up (same seed within one second)."""
    now = float((clock or system_clock)())
    if not math.isfinite(now) or now < 0:
        raise InvalidSeed(now, "clock must return finite, non-negative seconds")
    return int(math.ceil(now))


__all__ = ["Clock", "system_clock", "seed_from_clock"]
