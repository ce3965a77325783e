from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

from ..common.rounding import round_hours, to_decimal
from ..common.validators import parse_employee_filter, require_report_date
from ..core.constants import MSG_MANAGER_REQUIRED, MSG_TOKEN_REQUIRED
from ..core.exceptions import AuthenticationError, AuthorizationError
from ..users.model import Caller
from .model import DailySummary, EmployeeBreakdown, TeamSummary
from .repository import ReportRepository

logger = logging.getLogger(__name__)


class DailySummaryService:
    """Use case: manager-only daily attendance summary.

    Checks run in a fixed order (caller, role, date presence, date shape) and
    the first failure wins. Nothing is written to the store.
    """

    def __init__(self, reports: ReportRepository):
        self._reports = reports

    def build_daily_summary(
        self,
        caller: Optional[Caller],
        *,
        date: Optional[str],
        employee_id: Optional[str] = None,
    ) -> DailySummary:
        if caller is None:
            raise AuthenticationError(MSG_TOKEN_REQUIRED)
        if not caller.is_manager:
            raise AuthorizationError(MSG_MANAGER_REQUIRED)

        work_date = require_report_date(date)
        matchable, filter_id = parse_employee_filter(employee_id)

        if matchable:
            rows = list(self._reports.daily_employee_rows(work_date=work_date, employee_id=filter_id))
        else:
            # A non-numeric id can never equal an integer user id.
            rows = []

        logger.debug(
            "Daily summary date=%s employee_id=%r rows=%d requested_by=%s",
            work_date,
            employee_id,
            len(rows),
            caller.user_id,
        )

        total_checkins = 0
        total_clients = 0
        total_hours = Decimal(0)
        breakdown: list[EmployeeBreakdown] = []

        for r in rows:
            hours = to_decimal(r.total_hours)
            total_checkins += int(r.total_checkins)
            total_clients += int(r.clients_visited)
            total_hours += hours
            breakdown.append(
                EmployeeBreakdown(
                    employee_id=r.employee_id,
                    employee_name=r.employee_name,
                    checkins=int(r.total_checkins),
                    clients_visited=int(r.clients_visited),
                    working_hours=round_hours(hours),
                )
            )

        return DailySummary(
            date=work_date,
            team_summary=TeamSummary(
                total_employees=len(rows),
                total_checkins=total_checkins,
                total_clients_visited=total_clients,
                total_hours=round_hours(total_hours),
            ),
            employee_breakdown=breakdown,
        )
