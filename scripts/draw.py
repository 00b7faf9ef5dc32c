from __future__ import annotations

from pathlib import Path
from typing import Optional
import typer
from rich.console import Console
from rich.table import Table

from xprng import InvalidRange, InvalidSeed, SeededRandomGenerator, crc32
from xprng.core.events import JsonlEventLog
from xprng.core.notes import GeneratorNotes

app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console()


def _seed_input(seed: Optional[str], numeric: bool):
    if seed is None or not numeric:
        return seed
    try:
        return int(seed)
    except ValueError:
        raise typer.BadParameter(f"--numeric needs an integer seed, got: {seed}")


@app.command()
def ints(
    seed: Optional[str] = typer.Argument(None, help="Seed text (omit to seed from the clock)"),
    count: int = typer.Option(10, help="Number of draws"),
    low: int = typer.Option(0, help="Inclusive lower bound"),
    high: int = typer.Option(255, help="Inclusive upper bound"),
    numeric: bool = typer.Option(False, help="Treat SEED as a number instead of text"),
    log: Optional[Path] = typer.Option(None, help="Append generator notes to this JSONL file"),
):
    """Draw COUNT integers in [LOW, HIGH] and print them as a table."""
    event_log = JsonlEventLog(log) if log is not None else None
    notes = GeneratorNotes(event_log) if event_log is not None else None
    try:
        try:
            rng = SeededRandomGenerator(_seed_input(seed, numeric), notes=notes)
        except InvalidSeed as e:
            raise typer.BadParameter(str(e))

        table = Table(title=f"xprng — seed {rng.seed}")
        table.add_column("#", justify="right")
        table.add_column("Value", justify="right")
        table.add_column("State", justify="right")
        for i in range(count):
            try:
                value = rng.rand_int(low, high)
            except InvalidRange as e:
                raise typer.BadParameter(str(e))
            table.add_row(str(i), str(value), str(rng.seed))
        console.print(table)
    finally:
        if event_log is not None:
            event_log.close()


@app.command("bytes")
def bytes_(
    seed: Optional[str] = typer.Argument(None, help="Seed text (omit to seed from the clock)"),
    length: int = typer.Option(16, help="Number of bytes"),
    readable: bool = typer.Option(False, help="Restrict to printable ASCII (32..126)"),
    numeric: bool = typer.Option(False, help="Treat SEED as a number instead of text"),
):
    """Print LENGTH pseudo-random bytes (hex, or text with --readable)."""
    if length < 0:
        raise typer.BadParameter(f"--length must be >= 0, got: {length}")
    try:
        rng = SeededRandomGenerator(_seed_input(seed, numeric))
    except InvalidSeed as e:
        raise typer.BadParameter(str(e))
    data = rng.rand_bytes(length, readable=readable)
    typer.echo(data.decode("ascii") if readable else data.hex())


@app.command()
def checksum(text: str = typer.Argument(..., help="Text to hash")):
    """Print the CRC32 used for text seeds."""
    typer.echo(str(crc32(text)))


if __name__ == "__main__":
    app()
