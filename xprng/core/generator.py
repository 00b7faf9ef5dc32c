from __future__ import annotations

from typing import Optional, Tuple, Union
import decimal
import math
import numbers

from .checksum import crc32
from .clock import Clock, seed_from_clock
from .errors import InvalidRange, InvalidSeed
from .notes import Notes
from .state import GeneratorState

SeedInput = Union[str, int, float, None]

READABLE_RANGE = (32, 126)
BYTE_RANGE = (0, 255)


def derive_seed(seed_input: SeedInput, clock: Optional[Clock] = None) -> Tuple[int, str]:
    """Return (seed, source) for a reseed input.

    source is one of "text", "number" or "clock".
    """
    if seed_input is None:
        return seed_from_clock(clock), "clock"
    if isinstance(seed_input, str):
        return crc32(seed_input), "text"
    if isinstance(seed_input, bool) or not isinstance(seed_input, (numbers.Real, decimal.Decimal)):
        raise InvalidSeed(seed_input, "expected str, number or None")
    if isinstance(seed_input, decimal.Decimal):
        finite = seed_input.is_finite()
    else:
        finite = isinstance(seed_input, numbers.Integral) or math.isfinite(float(seed_input))
    if not finite:
        raise InvalidSeed(seed_input, "not a finite number")
    return abs(int(seed_input)), "number"


class SeededRandomGenerator:
    """Linear-congruential generator whose increment is re-derived on every
    draw from a CRC32 of (draw_count, seed, draw_count).

    Not cryptographically secure. One instance per sequential caller.

    Public API:
      - reseed(seed_input=None)
      - rand_int(low=0, high=255)
      - rand_bytes(length, readable=False)
      - save_status() / restore_status()
    """

    def __init__(
        self,
        seed_input: SeedInput = None,
        *,
        clock: Optional[Clock] = None,
        notes: Optional[Notes] = None,
    ) -> None:
        self.clock = clock
        self.notes = notes
        self.state = GeneratorState()
        self.reseed(seed_input)

    # ----------------
    @property
    def seed(self) -> int:
        return self.state.seed

    @property
    def draw_count(self) -> int:
        return self.state.draw_count

    def _note(self, kind: str, payload: dict) -> None:
        if self.notes is not None:
            self.notes.note(kind=kind, payload=payload, tick=self.state.draw_count)

    # ----------------
    def reseed(self, seed_input: SeedInput = None) -> None:
        seed, source = derive_seed(seed_input, self.clock)
        self.state = self.state.reseeded(seed)
        self._note("reseed", {"source": source, "seed": seed})

    def rand_int(self, low: int = 0, high: int = 255) -> int:
        low = int(low)
        high = int(high)
        if low > high:
            raise InvalidRange(low, high)
        self.state = self.state.next()
        return self.state.scale(low, high)

    def rand_bytes(self, length: int, readable: bool = False) -> bytes:
        length = int(length)
        if length < 0:
            raise ValueError(f"length must be >= 0, got {length}")
        low, high = READABLE_RANGE if readable else BYTE_RANGE
        return bytes(self.rand_int(low, high) for _ in range(length))

    # ----------------
    def save_status(self) -> None:
        self.state = self.state.model_copy(update={"saved_seed": self.state.seed})
        self._note("save", {"seed": self.state.seed})

    def restore_status(self) -> None:
        # draw_count is deliberately left as is
        saved = self.state.saved_seed
        if saved is None:
            self._note("restore_skipped", {})
            return
        self.state = self.state.model_copy(update={"seed": saved})
        self._note("restore", {"seed": saved})

    def __repr__(self) -> str:
        return f"SeededRandomGenerator(seed={self.state.seed}, draw_count={self.state.draw_count})"


__all__ = ["SeededRandomGenerator", "SeedInput", "derive_seed"]
