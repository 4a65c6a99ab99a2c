from __future__ import annotations

import json

from telemetry.logger import TelemetryLogger


def test_logger_appends_numbered_records(tmp_path) -> None:
    path = tmp_path / "runs" / "telemetry.jsonl"
    with TelemetryLogger(str(path)) as logger:
        logger.log_step({"event": "land", "report": "(0, 0) EAST"})
        logger.log_step({"event": "execute", "commands": "FF"})
    assert logger.closed

    lines = path.read_text(encoding="utf-8").splitlines()
    records = [json.loads(line) for line in lines]
    assert records == [
        {"step": 0, "event": "land", "report": "(0, 0) EAST"},
        {"step": 1, "event": "execute", "commands": "FF"},
    ]


def test_logging_after_close_is_ignored(tmp_path) -> None:
    path = tmp_path / "telemetry.jsonl"
    logger = TelemetryLogger(str(path))
    logger.close()
    logger.log_step({"event": "execute"})
    logger.close()
    assert path.read_text(encoding="utf-8") == ""
