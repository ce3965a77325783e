from __future__ import annotations

from enum import Enum
from typing import Optional


class Role(str, Enum):
    """User role used for authorization."""

    MANAGER = "manager"
    EMPLOYEE = "employee"

    @classmethod
    def parse(cls, value: object) -> Optional["Role"]:
        """Map a raw claim or column value to a Role, None when unknown."""
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None
