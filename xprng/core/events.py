from __future__ import annotations

from typing import IO, Any, Dict, Iterator, List
from pathlib import Path
import json


class JsonlEventLog:
    """Append-only JSONL event log.

    Each call to `write` appends a one-line JSON object and flushes the file.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._fh: IO[str] = self.path.open("a", encoding="utf-8")

    def write(self, event: Dict[str, Any]) -> None:
        json.dump(event, self._fh, ensure_ascii=False)
        self._fh.write("\n")
        self._fh.flush()

    def close(self) -> None:
        try:
            self._fh.close()
        except Exception:
            pass

    def __enter__(self) -> "JsonlEventLog":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()


def iter_events(path: Path) -> Iterator[Dict[str, Any]]:
    """Yield events from a JSONL log, skipping lines that do not parse."""
    path = Path(path)
    if not path.exists():
        return
    with path.open("r", encoding="utf-8") as f:
        for line in f:
            try:
                yield json.loads(line)
            except Exception:
                continue


def read_events(path: Path) -> List[Dict[str, Any]]:
    return list(iter_events(path))
