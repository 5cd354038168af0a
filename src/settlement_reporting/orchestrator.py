"""Command-line entrypoint printing the daily settlement report."""
from __future__ import annotations

import argparse
import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

import yaml
from jsonschema import ValidationError

from .ingest import load_trade_events
from .reporter import daily_report
from .settlement import DIRECTIONS, normalize_direction
from .utils import DecimalEncoder, load_yaml

logger = logging.getLogger(__name__)

CONFIG_DIR = os.path.join(os.path.dirname(__file__), "config")
DEFAULT_CONFIG = os.path.join(CONFIG_DIR, "report.yaml")


@dataclass
class ReportConfig:
    directions: List[str] = field(default_factory=lambda: list(DIRECTIONS))
    log_level: str = "INFO"
    indent: int = 2

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> "ReportConfig":
        data = data or {}
        if not isinstance(data, dict):
            raise ValueError("Report config must be a mapping")
        directions = []
        for direction in data.get("directions") or DIRECTIONS:
            code = normalize_direction(str(direction))
            if code is None:
                raise ValueError(f"Unknown direction in config: {direction!r}")
            directions.append(code)
        return cls(
            directions=directions,
            log_level=str(data.get("log_level", "INFO")).upper(),
            indent=int(data.get("indent", 2)),
        )


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Report daily settlement totals and top instruments")
    parser.add_argument("events", help="Path to a JSON or YAML file of trade events")
    parser.add_argument("--config", default=DEFAULT_CONFIG, help="Report config YAML")
    parser.add_argument(
        "--direction",
        action="append",
        choices=["B", "S", "b", "s"],
        help="Trade direction to report (repeatable); defaults to the config",
    )
    parser.add_argument("--out", default=None, help="Write the JSON report here instead of stdout")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def run(args: argparse.Namespace | None = None) -> int:
    args = args or parse_args()
    try:
        cfg = ReportConfig.from_dict(load_yaml(args.config))
    except (OSError, ValueError, yaml.YAMLError) as exc:
        logger.error("Cannot load report config from %s: %s", args.config, exc)
        return 2
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, cfg.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    directions = [d.upper() for d in args.direction] if args.direction else cfg.directions

    try:
        events = load_trade_events(args.events)
    except (OSError, ValueError, ValidationError) as exc:
        logger.error("Cannot load trade events from %s: %s", args.events, getattr(exc, "message", exc))
        return 2

    report = daily_report(events, directions)
    payload = json.dumps(report, indent=cfg.indent, cls=DecimalEncoder)
    if args.out:
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(payload + "\n")
        logger.info("Wrote %s", args.out)
    else:
        print(payload)
    return 0


def main() -> None:
    raise SystemExit(run(parse_args()))


if __name__ == "__main__":
    main()
