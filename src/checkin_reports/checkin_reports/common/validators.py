from __future__ import annotations

import re
from typing import Optional

from ..core.constants import DATE_PATTERN, MSG_DATE_INVALID, MSG_DATE_REQUIRED
from ..core.exceptions import ValidationError

_DATE_RE = re.compile(DATE_PATTERN, re.ASCII)


def require_non_empty(value: Optional[str], message: str) -> str:
    if not value or not value.strip():
        raise ValidationError(message)
    return value.strip()


def require_report_date(value: Optional[str]) -> str:
    """Check a YYYY-MM-DD date parameter.

    Only the shape is checked, so "2024-13-99" passes. The string is returned
    untouched and handed to the store as-is.
    """
    if not value:
        raise ValidationError(MSG_DATE_REQUIRED)
    if not _DATE_RE.fullmatch(value):
        raise ValidationError(MSG_DATE_INVALID)
    return value


def parse_employee_filter(value: Optional[str]) -> tuple[bool, Optional[int]]:
    """Return (matchable, employee_id) for an optional employee_id parameter.

    Absent or empty means no filter. Any other value filters, and one that is
    not a number (whitespace only included) cannot match any integer id.
    """
    if value is None or value == "":
        return True, None
    raw = str(value).strip()
    if not (raw.isascii() and raw.isdigit()):
        return False, None
    return True, int(raw)
