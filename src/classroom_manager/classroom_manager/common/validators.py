from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} không hợp lệ")
    return value.strip()


def require_positive_id(value, field_name: str) -> int:
    try:
        v = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} không hợp lệ")
    if v <= 0:
        raise ValidationError(f"{field_name} không hợp lệ")
    return v


def optional_text(value) -> str | None:
    if value is None:
        return None
    v = str(value).strip()
    return v or None
