from __future__ import annotations

from dataclasses import dataclass

from .database.connection import DBConfig, DatabaseConnection
from .reports.mysql_report_repository import MySQLReportRepository
from .reports.repository import ReportRepository
from .reports.service import DailySummaryService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    reports_repo: ReportRepository

    auth_service: AuthService
    daily_summary_service: DailySummaryService


def build_services(*, users_repo: UserRepository, reports_repo: ReportRepository) -> Container:
    return Container(
        users_repo=users_repo,
        reports_repo=reports_repo,
        auth_service=AuthService(users_repo),
        daily_summary_service=DailySummaryService(reports_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return build_services(
        users_repo=MySQLUserRepository(conn),
        reports_repo=MySQLReportRepository(conn),
    )
