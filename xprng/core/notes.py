from __future__ import annotations

from typing import Any, Dict, Optional, Protocol

from .events import JsonlEventLog


class Notes(Protocol):
    def note(self, kind: str, payload: Dict[str, Any], tick: Optional[int] = None) -> None: ...


class GeneratorNotes:
    """Structured lifecycle notes (reseed / save / restore) written as JSONL."""

    def __init__(self, event_log: JsonlEventLog):
        self.event_log = event_log

    def note(self, kind: str, payload: Dict[str, Any], tick: Optional[int] = None) -> None:
        event: Dict[str, Any] = {"type": "note", "kind": kind, "payload": payload}
        if tick is not None:
            event["tick"] = tick
        self.event_log.write(event)
