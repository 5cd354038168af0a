"""Load trade events from JSON or YAML files."""
from __future__ import annotations

import datetime as dt
import json
import logging
import os
import pathlib
from typing import Any, Dict, List

from .trade_event import TradeEvent
from .utils import load_json_schema, load_yaml, validate_json

logger = logging.getLogger(__name__)

SCHEMA_DIR = os.path.join(os.path.dirname(__file__), "schemas")
TRADE_EVENT_SCHEMA = os.path.join(SCHEMA_DIR, "trade_event.schema.json")


def load_trade_events(path: str | pathlib.Path, schema: Dict[str, Any] | None = None) -> List[TradeEvent]:
    """Read, validate and build trade events.

    The file holds either a list of trade records or a mapping with a ``trades`` list.
    Raises jsonschema.ValidationError for a bad record and ValueError for an
    unsupported file.
    """
    path = pathlib.Path(path)
    schema = schema or load_json_schema(TRADE_EVENT_SCHEMA)
    records = _extract_records(_read(path), path)

    events = []
    for record in records:
        record = _normalize_dates(record)
        validate_json(record, schema)
        events.append(TradeEvent.from_dict(record))
    logger.info("Loaded %d trade events from %s", len(events), path)
    return events


def _read(path: pathlib.Path) -> Any:
    suffix = path.suffix.lower()
    if suffix == ".json":
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    if suffix in {".yaml", ".yml"}:
        return load_yaml(path)
    raise ValueError(f"Unsupported trade file type: {path.suffix or path.name}")


def _extract_records(data: Any, path: pathlib.Path) -> List[Any]:
    if isinstance(data, dict):
        data = data.get("trades")
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of trades in {path}")
    return data


def _normalize_dates(record: Any) -> Any:
    # YAML turns unquoted ISO dates into date objects; the schema expects strings
    if not isinstance(record, dict):
        return record
    return {
        key: _iso_date(value) if isinstance(value, dt.date) else value
        for key, value in record.items()
    }


def _iso_date(value: dt.date) -> str:
    # YAML timestamps keep only their calendar date
    if isinstance(value, dt.datetime):
        value = value.date()
    return value.isoformat()
