from __future__ import annotations

# submission_service/services/utils.py
from ..errors import ValidationError


def require_text(value, field: str, allow_blank: bool = True) -> str:
    """NOT NULL 列的入参检查；allow_blank=False 时空白串也视为缺失。"""
    if value is None or not isinstance(value, str):
        raise ValidationError(f"missing {field}")
    if not allow_blank and not value.strip():
        raise ValidationError(f"missing {field}")
    return value


def optional_text(value, field: str) -> str | None:
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"invalid {field}")
    return value


# SQLite INTEGER 为有符号 64 位
SQLITE_INT_MIN = -(2 ** 63)
SQLITE_INT_MAX = 2 ** 63 - 1


def as_id(value, field: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"invalid {field}")
    if isinstance(value, float) and not value.is_integer():
        raise ValidationError(f"invalid {field}")
    try:
        v = int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"invalid {field}")
    if not SQLITE_INT_MIN <= v <= SQLITE_INT_MAX:
        raise ValidationError(f"invalid {field}")
    return v
