from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .checksum import crc32

MIX_CONSTANT = 1664525
DEFAULT_MIX_OFFSET = 1013904223
MODULUS = 2**32


class GeneratorState(BaseModel):
    """Complete, serializable state of a seeded generator.

    `mix_offset` is not a constant: every draw replaces it with a checksum of
    the draw counter and the current seed. `saved_seed` is only ever written
    by an explicit save.
    """

    model_config = ConfigDict(frozen=True)

    seed: int = Field(0, ge=0)
    mix_constant: int = MIX_CONSTANT
    mix_offset: int = DEFAULT_MIX_OFFSET
    modulus: int = MODULUS
    draw_count: int = Field(0, ge=0)
    saved_seed: Optional[int] = None

    def next(self) -> "GeneratorState":
        """State after one draw; the receiver is left untouched."""
        count = str(self.draw_count)
        mix_offset = crc32(count + str(self.seed) + count)
        next_seed = (self.seed * self.mix_constant + mix_offset) % self.modulus
        return self.model_copy(
            update={
                "seed": next_seed,
                "mix_offset": mix_offset,
                "draw_count": self.draw_count + 1,
            }
        )

    def reseeded(self, seed: int) -> "GeneratorState":
        """Fresh state for `seed`, carrying over only `saved_seed`."""
        return GeneratorState(seed=int(seed), saved_seed=self.saved_seed)

    def scale(self, low: int, high: int) -> int:
        """Map the current seed onto the inclusive range [low, high].

        Exact integer form of floor(seed / modulus * span + low).
        """
        span = high - low + 1
        return low + (self.seed * span) // self.modulus


__all__ = ["GeneratorState", "MIX_CONSTANT", "DEFAULT_MIX_OFFSET", "MODULUS"]
