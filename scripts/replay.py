from __future__ import annotations

from pathlib import Path
from typing import List
import json
import typer
from rich.console import Console
from rich.table import Table

from xprng.core.events import read_events

app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console()


@app.command()
def replay(
    log: Path = typer.Argument(..., help="Notes log written by draw.py --log"),
    kind: List[str] = typer.Option([], help="Filter by note kind(s), e.g. --kind reseed --kind restore"),
    limit: int = typer.Option(200, help="Max notes to display"),
):
    """Replay generator notes from a JSONL log."""
    if not log.exists():
        raise typer.BadParameter(f"No such log: {log}")

    events = [e for e in read_events(log) if e.get("type") == "note"]
    if kind:
        events = [e for e in events if e.get("kind") in kind]

    table = Table(title=f"Replay — {log.name}")
    table.add_column("Tick", justify="right")
    table.add_column("Kind")
    table.add_column("Payload")

    for ev in events[:limit]:
        payload = json.dumps(ev.get("payload", {}), ensure_ascii=False)[:80]
        table.add_row(str(ev.get("tick", "-")), str(ev.get("kind")), payload)

    console.print(table)


if __name__ == "__main__":
    app()
