from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from flask import request

from ..core.exceptions import ValidationError
from .datetime_utils import coerce_timestamp, parse_iso_date


def date_arg(name: str = "date", default: Optional[date] = None) -> date:
    """Read a YYYY-MM-DD query argument (defaults to today)."""
    value = request.args.get(name)
    if not value:
        return default or date.today()
    try:
        return parse_iso_date(value)
    except ValueError as exc:
        raise ValidationError(f"Invalid date: {value!r}") from exc


def datetime_arg(name: str) -> Optional[datetime]:
    value = request.args.get(name)
    if not value:
        return None
    return coerce_timestamp(value)


def json_body() -> dict:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError("Expected a JSON object body")
    return payload
