from __future__ import annotations

from typing import Optional, Sequence

from ..common.rounding import seconds_to_hours
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import EmployeeDailyRow
from .repository import ReportRepository


class MySQLReportRepository(ReportRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def daily_employee_rows(
        self,
        *,
        work_date: str,
        employee_id: Optional[int] = None,
    ) -> Sequence[EmployeeDailyRow]:
        clauses = ["u.role = 'employee'"]
        params: list[object] = [work_date]

        if employee_id is not None:
            clauses.append("u.user_id = %s")
            params.append(int(employee_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT
                    u.user_id AS employee_id,
                    u.name AS employee_name,
                    COUNT(c.checkin_id) AS total_checkins,
                    COUNT(DISTINCT c.client_id) AS clients_visited,
                    COALESCE(SUM(
                        CASE
                            WHEN c.checkout_time IS NOT NULL
                            THEN TIMESTAMPDIFF(SECOND, c.checkin_time, c.checkout_time)
                            ELSE 0
                        END
                    ), 0) AS total_seconds
                FROM users u
                LEFT JOIN checkins c
                    ON c.employee_id = u.user_id
                    AND DATE(c.checkin_time) = %s
                WHERE {where}
                GROUP BY u.user_id, u.name
                ORDER BY u.name
                """,
                tuple(params),
            )
            rows = fetchall(cur)

            return [
                EmployeeDailyRow(
                    employee_id=int(r["employee_id"]),
                    employee_name=r["employee_name"],
                    total_checkins=int(r["total_checkins"] or 0),
                    clients_visited=int(r["clients_visited"] or 0),
                    total_hours=seconds_to_hours(r["total_seconds"]),
                )
                for r in rows
            ]
