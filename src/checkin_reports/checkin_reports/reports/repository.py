from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import EmployeeDailyRow


class ReportRepository(Protocol):
    def daily_employee_rows(
        self,
        *,
        work_date: str,
        employee_id: Optional[int] = None,
    ) -> Sequence[EmployeeDailyRow]:
        """Aggregate check-ins per employee for one calendar date, ordered by name."""

        raise NotImplementedError
