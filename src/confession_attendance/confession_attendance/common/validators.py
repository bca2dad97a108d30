from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def as_text(value: Any) -> str:
    """Trimmed string for optional payload fields (None becomes "")."""
    if value is None:
        return ""
    return str(value).strip()


def require_list(value: Any, field_name: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValidationError(f"{field_name} must be a list")
    return value


def as_raw_text(value: Any) -> str:
    """Like as_text but keeps surrounding whitespace."""
    return "" if value is None else str(value)
