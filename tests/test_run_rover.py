from __future__ import annotations

import json
import textwrap

from scripts.run_rover import main


def write_config(tmp_path, telemetry: bool = False) -> str:
    body = textwrap.dedent(
        """
        rover:
          commands:
            F: forward
            B: backward
            R: right
            L: left
            U: [right, right]
          sensors:
            - type: always_safe
            - type: always_safe
        landing:
          x: 0
          y: 0
          heading: EAST
        """
    )
    if telemetry:
        body += f"logging:\n  telemetry_path: {tmp_path / 'out' / 'telemetry.jsonl'}\n"
    path = tmp_path / "rover.yaml"
    path.write_text(body, encoding="utf-8")
    return str(path)


def test_runs_command_strings(tmp_path, capsys) -> None:
    config = write_config(tmp_path)
    assert main(["--config", config, "FFBRLU", "FXFFF", "FFF"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Rover: unknown"
    assert out[1] == "Landed: (0, 0) EAST"
    assert out[2] == "FFBRLU: (1, 0) WEST"
    assert out[3].startswith("FXFFF: (0, 0) WEST stopped")
    assert "'X'" in out[3]
    assert out[4] == "FFF: (-3, 0) WEST"


def test_land_override_and_telemetry(tmp_path) -> None:
    config = write_config(tmp_path, telemetry=True)
    assert main(["--config", config, "--land", "-1", "-1", "west", "F"]) == 0

    path = tmp_path / "out" / "telemetry.jsonl"
    records = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    assert [r["event"] for r in records] == ["land", "execute"]
    assert records[0]["report"] == "(-1, -1) WEST"
    assert records[1]["state"] == {"landed": True, "stopped": False, "x": -2, "y": -1, "heading": "WEST"}


def test_commands_without_landing_fail(tmp_path, capsys) -> None:
    path = tmp_path / "bare.yaml"
    path.write_text("rover:\n  commands:\n    F: forward\n", encoding="utf-8")
    assert main(["--config", str(path), "F"]) == 1
    assert "Rover did not land" in capsys.readouterr().err


def test_bad_land_argument(tmp_path, capsys) -> None:
    config = write_config(tmp_path)
    assert main(["--config", config, "--land", "0", "0", "UP"]) == 1
    assert "Invalid --land" in capsys.readouterr().err


def test_malformed_landing_exits_cleanly(tmp_path, capsys) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("rover:\n  commands:\n    F: forward\nlanding: 5\n", encoding="utf-8")
    assert main(["--config", str(path), "F"]) == 1
    assert "landing" in capsys.readouterr().err


def test_malformed_map_exits_cleanly(tmp_path, capsys) -> None:
    (tmp_path / "map.json").write_text("[]", encoding="utf-8")
    path = tmp_path / "bad.yaml"
    path.write_text(
        "rover:\n  sensors:\n    - type: hazard_map\n      path: map.json\n", encoding="utf-8"
    )
    assert main(["--config", str(path)]) == 1
    assert "Hazard map" in capsys.readouterr().err
