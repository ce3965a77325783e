from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

import pytest
from flask_jwt_extended import create_access_token

from src.checkin_reports.checkin_reports.common.auth import issue_token
from src.checkin_reports.checkin_reports.container import build_services
from src.checkin_reports.checkin_reports.core.enums import Role
from src.checkin_reports.checkin_reports.main import create_app
from src.checkin_reports.checkin_reports.reports.model import EmployeeDailyRow
from src.checkin_reports.checkin_reports.users.model import User

URL = "/api/reports/daily-summary"

MANAGER = User(user_id=1, name="Amit Sharma", email="manager@unolo.com", password_hash="x", role=Role.MANAGER)
EMPLOYEE = User(user_id=2, name="Rahul Kumar", email="rahul@unolo.com", password_hash="x", role=Role.EMPLOYEE)


class FakeUsers:
    def get_by_id(self, user_id):
        return {1: MANAGER, 2: EMPLOYEE}.get(int(user_id))

    def get_by_email(self, email):
        return None


class FakeReportRepo:
    def __init__(self, rows=None, error=None):
        self._rows = rows or []
        self._error = error
        self.calls = []

    def daily_employee_rows(self, *, work_date, employee_id=None):
        self.calls.append((work_date, employee_id))
        if self._error:
            raise self._error
        if employee_id is None:
            return list(self._rows)
        return [r for r in self._rows if r.employee_id == employee_id]


ROWS = [
    EmployeeDailyRow(employee_id=3, employee_name="Priya Singh", total_checkins=1, clients_visited=1, total_hours=Decimal("2.25")),
    EmployeeDailyRow(employee_id=2, employee_name="Rahul Kumar", total_checkins=3, clients_visited=2, total_hours=Decimal("8.5")),
]


def _make_app(reports):
    container = build_services(users_repo=FakeUsers(), reports_repo=reports)
    return create_app(container=container, settings_module="config.testing")


@pytest.fixture
def reports():
    return FakeReportRepo(ROWS)


@pytest.fixture
def app(reports):
    return _make_app(reports)


@pytest.fixture
def client(app):
    return app.test_client()


def _auth(app, user):
    with app.app_context():
        token = issue_token(user)
    return {"Authorization": f"Bearer {token}"}


def test_requires_access_token(client):
    resp = client.get(f"{URL}?date=2024-01-25")

    assert resp.status_code == 401
    assert resp.get_json() == {"success": False, "message": "Access token required"}


def test_rejects_garbage_token(client):
    resp = client.get(f"{URL}?date=2024-01-25", headers={"Authorization": "Bearer not-a-token"})

    assert resp.status_code == 401
    assert resp.get_json()["message"] == "Access token required"


def test_rejects_expired_token(app, client):
    with app.app_context():
        token = create_access_token(
            identity="1",
            additional_claims={"role": "manager"},
            expires_delta=timedelta(seconds=-60),
        )

    resp = client.get(f"{URL}?date=2024-01-25", headers={"Authorization": f"Bearer {token}"})

    assert resp.status_code == 401
    assert resp.get_json()["message"] == "Access token required"


def test_employee_is_forbidden_even_with_valid_input(app, client, reports):
    resp = client.get(f"{URL}?date=2024-01-25", headers=_auth(app, EMPLOYEE))

    assert resp.status_code == 403
    assert resp.get_json() == {"success": False, "message": "Access denied. Manager role required."}
    assert reports.calls == []


def test_employee_is_forbidden_before_date_check(app, client):
    resp = client.get(URL, headers=_auth(app, EMPLOYEE))

    assert resp.status_code == 403


def test_missing_date(app, client):
    resp = client.get(URL, headers=_auth(app, MANAGER))

    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "message": "Date parameter is required (YYYY-MM-DD format)"}


def test_invalid_date_format(app, client):
    resp = client.get(f"{URL}?date=invalid-date", headers=_auth(app, MANAGER))

    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "message": "Invalid date format. Use YYYY-MM-DD"}


def test_manager_gets_summary(app, client, reports):
    resp = client.get(f"{URL}?date=2024-01-25", headers=_auth(app, MANAGER))

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["data"]["date"] == "2024-01-25"
    assert body["data"]["team_summary"] == {
        "total_employees": 2,
        "total_checkins": 4,
        "total_clients_visited": 3,
        "total_hours": 10.75,
    }
    assert isinstance(body["data"]["employee_breakdown"], list)
    assert body["data"]["employee_breakdown"][0] == {
        "employee_id": 3,
        "employee_name": "Priya Singh",
        "checkins": 1,
        "clients_visited": 1,
        "working_hours": 2.25,
    }
    assert reports.calls == [("2024-01-25", None)]


def test_manager_filters_by_employee(app, client, reports):
    resp = client.get(f"{URL}?date=2024-01-25&employee_id=2", headers=_auth(app, MANAGER))

    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["date"] == "2024-01-25"
    assert data["team_summary"]["total_employees"] == 1
    assert [e["employee_id"] for e in data["employee_breakdown"]] == [2]
    assert reports.calls == [("2024-01-25", 2)]


def test_empty_store_gives_empty_breakdown():
    app = _make_app(FakeReportRepo([]))
    resp = app.test_client().get(f"{URL}?date=2024-01-25", headers=_auth(app, MANAGER))

    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["employee_breakdown"] == []
    assert data["team_summary"]["total_employees"] == 0
    assert data["team_summary"]["total_hours"] == 0


def test_store_failure_is_not_leaked(caplog):
    app = _make_app(FakeReportRepo(error=RuntimeError("connection refused to db.internal:3306")))

    resp = app.test_client().get(f"{URL}?date=2024-01-25", headers=_auth(app, MANAGER))

    assert resp.status_code == 500
    assert resp.get_json() == {"success": False, "message": "Failed to generate daily summary"}
    assert "db.internal" not in resp.get_data(as_text=True)
    assert "connection refused" in caplog.text
