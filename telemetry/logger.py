from __future__ import annotations

import json
import os
import threading
from typing import Any, Dict, Optional, TextIO


class TelemetryLogger:
    """Structured JSONL logger for rover command sessions.

    Thread-safe, append-only logging of dict records, one JSON object per line.
    Each record gets a monotonically increasing ``step`` field unless the
    caller already provides one.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        self._lock = threading.Lock()
        self._step = 0
        self._fp: Optional[TextIO] = open(self.path, "a", encoding="utf-8")

    def log_step(self, record: Dict[str, Any]) -> None:
        """Append a single telemetry record to the JSONL file."""
        if self._fp is None:
            return
        with self._lock:
            payload = {"step": self._step, **record}
            self._step += 1
            self._fp.write(json.dumps(payload, separators=(",", ":")) + "\n")
            self._fp.flush()

    @property
    def closed(self) -> bool:
        return self._fp is None

    def close(self) -> None:
        if self._fp is not None:
            self._fp.close()
            self._fp = None

    def __enter__(self) -> "TelemetryLogger":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
