from __future__ import annotations

from dataclasses import asdict, dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class EmployeeDailyRow:
    """Read model returned by the store: one row per employee for one date.

    Employees without check-ins that day come back zero-filled.
    """

    employee_id: int
    employee_name: str
    total_checkins: int
    clients_visited: int
    total_hours: Decimal


@dataclass(frozen=True)
class TeamSummary:
    total_employees: int
    total_checkins: int
    total_clients_visited: int
    total_hours: float


@dataclass(frozen=True)
class EmployeeBreakdown:
    employee_id: int
    employee_name: str
    checkins: int
    clients_visited: int
    working_hours: float


@dataclass(frozen=True)
class DailySummary:
    date: str
    team_summary: TeamSummary
    employee_breakdown: list[EmployeeBreakdown] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "team_summary": asdict(self.team_summary),
            "employee_breakdown": [asdict(e) for e in self.employee_breakdown],
        }
