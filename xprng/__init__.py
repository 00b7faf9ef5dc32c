"""Deterministic seeded pseudo-random generator (X-PRNG)."""
from __future__ import annotations

from typing import Optional

from .core.checksum import checksum, crc32
from .core.clock import Clock
from .core.errors import InvalidRange, InvalidSeed, PRNGError
from .core.generator import SeededRandomGenerator, SeedInput
from .core.notes import Notes
from .core.state import GeneratorState


def construct(
    seed_input: SeedInput = None,
    *,
    clock: Optional[Clock] = None,
    notes: Optional[Notes] = None,
) -> SeededRandomGenerator:
    return SeededRandomGenerator(seed_input, clock=clock, notes=notes)


def reseed(generator: SeededRandomGenerator, seed_input: SeedInput = None) -> None:
    generator.reseed(seed_input)


def rand_int(generator: SeededRandomGenerator, low: int = 0, high: int = 255) -> int:
    return generator.rand_int(low, high)


def rand_bytes(generator: SeededRandomGenerator, length: int, readable: bool = False) -> bytes:
    return generator.rand_bytes(length, readable=readable)


def save_status(generator: SeededRandomGenerator) -> None:
    generator.save_status()


def restore_status(generator: SeededRandomGenerator) -> None:
    generator.restore_status()


__all__ = [
    "construct",
    "reseed",
    "rand_int",
    "rand_bytes",
    "save_status",
    "restore_status",
    "checksum",
    "crc32",
    "SeededRandomGenerator",
    "GeneratorState",
    "PRNGError",
    "InvalidRange",
    "InvalidSeed",
]
