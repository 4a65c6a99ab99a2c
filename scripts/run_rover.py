from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

# Ensure project root is on path when running this script directly
_script_dir = Path(__file__).resolve().parent
_project_root = _script_dir.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from grid_rover.config import builder_from_config, config_section, landing_from_config, load_yaml
from grid_rover.directions import parse_direction
from grid_rover.errors import ConfigError, RoverError
from grid_rover.position import Coordinates
from telemetry.logger import TelemetryLogger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Land a grid rover and run command strings.")
    parser.add_argument(
        "--config",
        type=str,
        default="configs/rover.yaml",
        help="Path to rover YAML config.",
    )
    parser.add_argument(
        "--land",
        nargs=3,
        metavar=("X", "Y", "HEADING"),
        default=None,
        help="Landing site; overrides the config's landing section.",
    )
    parser.add_argument(
        "--telemetry",
        type=str,
        default=None,
        help="JSONL telemetry path; overrides logging.telemetry_path.",
    )
    parser.add_argument(
        "commands",
        nargs="*",
        help="Command strings, executed in order (e.g. FFRBL).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    telemetry_logger: Optional[TelemetryLogger] = None
    try:
        cfg = load_yaml(args.config)
        base_dir = str(Path(args.config).resolve().parent)
        rover = builder_from_config(cfg, base_dir).build()

        if args.land is not None:
            x, y, heading = args.land
            try:
                landing = (Coordinates(int(x), int(y)), parse_direction(heading))
            except ValueError as exc:
                raise ConfigError(f"Invalid --land value: {exc}") from exc
        else:
            landing = landing_from_config(cfg)

        telemetry_path = args.telemetry or config_section(cfg, "logging", dict).get("telemetry_path")
        if telemetry_path:
            telemetry_logger = TelemetryLogger(telemetry_path)

        print(f"Rover: {rover}")
        if landing is not None:
            rover.land(*landing)
            print(f"Landed: {rover}")
            if telemetry_logger is not None:
                telemetry_logger.log_step(
                    {"event": "land", "commands": None, "report": str(rover), "state": rover.to_dict()}
                )

        for command_list in args.commands:
            report = rover.execute(command_list)
            suffix = ""
            if report.stopped:
                suffix = f"  [halted at {report.halt_symbol!r}: {report.halt_reason}]"
            print(f"{command_list}: {rover}{suffix}")
            if telemetry_logger is not None:
                telemetry_logger.log_step(
                    {
                        "event": "execute",
                        "commands": command_list,
                        "consumed": report.consumed,
                        "halt_reason": report.halt_reason,
                        "report": str(rover),
                        "state": rover.to_dict(),
                    }
                )
    except (RoverError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    finally:
        if telemetry_logger is not None:
            telemetry_logger.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
