from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def require_present(message: str, *values: object) -> None:
    """Raise ValidationError(message) if any value is None or blank."""
    for value in values:
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError(message)


def blank_to_none(value: Optional[str]) -> Optional[str]:
    if not isinstance(value, str):
        return value
    value = value.strip()
    return value or None
