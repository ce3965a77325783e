"""Example: call the service layer directly, without Flask.

Controllers stay thin; the report logic lives in DailySummaryService.
"""

import importlib
import json

from config import get_settings_module

from src.checkin_reports.checkin_reports.container import build_container
from src.checkin_reports.checkin_reports.core.enums import Role
from src.checkin_reports.checkin_reports.users.model import Caller


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    manager = Caller(user_id=1, role=Role.MANAGER, name="Amit Sharma")
    summary = container.daily_summary_service.build_daily_summary(manager, date="2024-01-25")
    print(json.dumps(summary.to_dict(), indent=2))


if __name__ == "__main__":
    main()
