"""Brazilian CPF (national ID) normalization and check-digit validation."""

from __future__ import annotations

import re

from ..core.constants import NATIONAL_ID_LENGTH
from ..core.exceptions import ValidationError

_NON_DIGITS = re.compile(r"\D")


def normalize(raw: str) -> str:
    """Strip every non-digit character."""
    return _NON_DIGITS.sub("", raw or "")


def _check_digit(digits: str, first_weight: int) -> int:
    total = sum(int(d) * w for d, w in zip(digits, range(first_weight, 1, -1)))
    result = (total * 10) % 11
    return 0 if result == 10 else result


def validate(raw: str) -> bool:
    digits = normalize(raw)

    if len(digits) != NATIONAL_ID_LENGTH:
        return False
    if len(set(digits)) == 1:
        return False

    d1 = _check_digit(digits[:9], 10)
    d2 = _check_digit(digits[:10], 11)
    return digits[9] == str(d1) and digits[10] == str(d2)


def format_national_id(raw: str) -> str:
    """Render 11 digits as 000.000.000-00."""
    digits = normalize(raw)
    if len(digits) != NATIONAL_ID_LENGTH:
        raise ValidationError("national ID must have 11 digits")
    return f"{digits[:3]}.{digits[3:6]}.{digits[6:9]}-{digits[9:]}"


def require_valid_national_id(raw: str) -> str:
    if not isinstance(raw, str) or not validate(raw):
        raise ValidationError("invalid national ID")
    return normalize(raw)
