from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: a manager or field employee.

    Plain data object, no database access.
    """

    user_id: int
    name: str
    email: str
    password_hash: str
    role: Role


@dataclass(frozen=True)
class Caller:
    """Identity of the authenticated requester, read from the access token.

    ``role`` is None when the token carries a role this service does not know.
    """

    user_id: int
    role: Optional[Role]
    name: str = ""

    @property
    def is_manager(self) -> bool:
        return self.role is Role.MANAGER
