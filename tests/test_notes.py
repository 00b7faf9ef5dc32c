from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from xprng import construct
from xprng.core.events import JsonlEventLog, read_events
from xprng.core.notes import GeneratorNotes


class TestGeneratorNotes(unittest.TestCase):
    def test_notes_written_as_jsonl(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "logs" / "notes.jsonl"
            with JsonlEventLog(path) as log:
                rng = construct("hello", notes=GeneratorNotes(log))
                rng.save_status()
                rng.rand_int()
                rng.restore_status()
            events = read_events(path)
        self.assertEqual([e["kind"] for e in events], ["reseed", "save", "restore"])
        self.assertTrue(all(e["type"] == "note" for e in events))
        self.assertEqual(events[0]["payload"], {"source": "text", "seed": 907060870})
        self.assertEqual(events[2]["tick"], 1)

    def test_log_appends(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "notes.jsonl"
            for _ in range(2):
                with JsonlEventLog(path) as log:
                    log.write({"type": "note", "kind": "x", "payload": {}})
            self.assertEqual(len(read_events(path)), 2)

    def test_read_skips_malformed_lines(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "notes.jsonl"
            path.write_text('{"type": "note"}\nnot json\n{"type": "note"}\n', encoding="utf-8")
            self.assertEqual(len(read_events(path)), 2)

    def test_missing_log_reads_empty(self):
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(read_events(Path(tmp) / "absent.jsonl"), [])


if __name__ == "__main__":
    unittest.main()
