from __future__ import annotations

import importlib.util
import tempfile
import unittest
from pathlib import Path

from typer.testing import CliRunner

ROOT = Path(__file__).resolve().parents[1]


def _load(name: str):
    spec = importlib.util.spec_from_file_location(f"xprng_script_{name}", ROOT / "scripts" / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


draw = _load("draw")
replay = _load("replay")
runner = CliRunner()


class TestDrawScript(unittest.TestCase):
    def test_checksum(self):
        result = runner.invoke(draw.app, ["checksum", "hello"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output.strip(), "907060870")

    def test_ints_table(self):
        result = runner.invoke(draw.app, ["ints", "hello", "--count", "2", "--low", "1", "--high", "10"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("907060870", result.output)
        self.assertIn("3837718178", result.output)

    def test_ints_numeric_seed(self):
        result = runner.invoke(draw.app, ["ints", "42", "--numeric", "--count", "1"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("1036962894", result.output)

    def test_ints_bad_range(self):
        result = runner.invoke(draw.app, ["ints", "hello", "--low", "5", "--high", "1"])
        self.assertNotEqual(result.exit_code, 0)

    def test_bytes_readable(self):
        result = runner.invoke(draw.app, ["bytes", "hello", "--length", "12", "--readable"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(len(result.output.rstrip("\n")), 12)

    def test_bytes_hex(self):
        result = runner.invoke(draw.app, ["bytes", "hello", "--length", "4"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(len(result.output.strip()), 8)


class TestReplayScript(unittest.TestCase):
    def test_replay_log_written_by_draw(self):
        with tempfile.TemporaryDirectory() as tmp:
            log = Path(tmp) / "notes.jsonl"
            result = runner.invoke(draw.app, ["ints", "hello", "--count", "3", "--log", str(log)])
            self.assertEqual(result.exit_code, 0, result.output)
            result = runner.invoke(replay.app, [str(log), "--kind", "reseed"])
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertIn("reseed", result.output)

    def test_replay_missing_log(self):
        with tempfile.TemporaryDirectory() as tmp:
            result = runner.invoke(replay.app, [str(Path(tmp) / "absent.jsonl")])
            self.assertNotEqual(result.exit_code, 0)


if __name__ == "__main__":
    unittest.main()
