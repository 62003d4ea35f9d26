from __future__ import annotations
import json
from pathlib import Path
from threading import Lock
from typing import Any, Dict, List, Optional

from debate.models import HistoryRecord


class TranscriptRecorder:
    """Append-only newline-delimited JSON transcript of accepted records.

    Each accepted argue/rebut/judge record becomes one JSON object on its own
    line. The file is an operator side channel: the engine never reads it back,
    so a restart always begins with an empty debate.

    Usage:
        r = TranscriptRecorder("debate_transcript.ndjson")
        r.record_history(snapshot.record)
        r.load() -> list of dicts
    """

    def __init__(self, path: str, ensure_dir: bool = True):
        self.path = Path(path)
        if ensure_dir:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = Lock()

    def record(self, obj: Dict[str, Any]) -> None:
        """Append a single JSON record (one line per write)."""
        line = json.dumps(obj, ensure_ascii=False)
        with self._lock:
            with self.path.open("a", encoding="utf-8") as f:
                f.write(line + "\n")

    def record_history(self, rec: HistoryRecord) -> None:
        self.record({"event": rec.action.value, **rec.to_payload()})

    __call__ = record_history

    def load(self) -> List[Dict[str, Any]]:
        """Load all records, skipping blank or half-written lines."""
        if not self.path.exists():
            return []
        records: List[Dict[str, Any]] = []
        with self.path.open("r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                try:
                    records.append(json.loads(line))
                except json.JSONDecodeError:
                    continue
        return records


def initialize_transcript(path: Optional[str], reset: bool = False) -> Optional[TranscriptRecorder]:
    """Create a recorder for path, or None when no path is configured."""
    if not path:
        return None
    rec = TranscriptRecorder(path)
    if reset and rec.path.exists():
        rec.path.unlink()
    return rec
