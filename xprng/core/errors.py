from __future__ import annotations

from typing import Any


class PRNGError(Exception):
    """Base class for generator input errors."""


class InvalidRange(PRNGError, ValueError):
    def __init__(self, low: int, high: int) -> None:
        self.low = low
        self.high = high
        super().__init__(f"Invalid range: low={low} is greater than high={high}")


class InvalidSeed(PRNGError, TypeError):
    def __init__(self, value: Any, reason: str = "") -> None:
        self.value = value
        msg = f"Invalid seed input: {value!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


__all__ = ["PRNGError", "InvalidRange", "InvalidSeed"]
