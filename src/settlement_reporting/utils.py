"""Utility helpers."""
from __future__ import annotations

import json
import pathlib
from decimal import Decimal
from typing import Any, Dict

import yaml
from jsonschema import validate


def load_yaml(path: str | pathlib.Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def load_json_schema(path: str | pathlib.Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def validate_json(data: Dict[str, Any], schema: Dict[str, Any]) -> None:
    validate(instance=data, schema=schema)


class DecimalEncoder(json.JSONEncoder):
    def default(self, o: Any):
        if isinstance(o, Decimal):
            return str(o)
        return super().default(o)
