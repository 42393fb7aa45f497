from __future__ import annotations

from typing import Optional, Union

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    if not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def normalize_period_id(value: Union[int, str]) -> str:
    """Canonical string form of a period id ("3", "Interval").

    Persisted records carry numeric ids either as numbers or as strings, so
    every comparison goes through this function on both sides.
    """
    if value is None or isinstance(value, bool):
        raise ValidationError("Period id is required")
    normalized = str(value).strip()
    if not normalized:
        raise ValidationError("Period id is required")
    return normalized


def optional_text(value, field_name: str) -> Optional[str]:
    """Stripped text or None for missing/blank values."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    return value.strip() or None
