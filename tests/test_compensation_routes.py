from __future__ import annotations

import pytest

from src.compensation_system.compensation_system.container import Container
from src.compensation_system.compensation_system.main import create_app


@pytest.fixture
def client(monkeypatch, make_service, january_entries):
    monkeypatch.setenv("APP_ENV", "testing")
    service, attendance, compensations = make_service(entries=january_entries)
    container = Container(
        conn=None,
        attendance_repo=attendance,
        compensation_repo=compensations,
        settings_repo=service._settings,
        holiday_repo=service._holidays,
        employee_repo=service._employees,
        compensation_service=service,
    )
    app = create_app(container=container)
    return app.test_client()


def test_compute_then_list_month(client):
    res = client.post("/api/compensations/E1/2025/1/compute")
    assert res.status_code == 200
    body = res.get_json()
    assert [c["day"] for c in body["computed"]] == [6, 7, 8, 9]
    assert body["invalidDays"] == [40]
    assert body["missingTimeLogs"][0]["missingType"] == "timeOut"

    res = client.get("/api/compensations/E1/2025/1")
    assert res.status_code == 200
    days = res.get_json()
    assert days[1]["overtimePay"] == pytest.approx(250)
    assert days[2]["absence"] is True
    assert days[2]["manualOverride"] is True
    assert days[0]["manualOverride"] is False


def test_override_then_recompute_needs_force(client):
    client.post("/api/compensations/E1/2025/1/compute")

    res = client.post("/api/compensations/E1/2025/1/6/override", json={"netPay": 500, "notes": "approved"})
    assert res.status_code == 200
    assert res.get_json()["state"] == "MANUALLY_OVERRIDDEN"

    res = client.post("/api/compensations/E1/2025/1/6/recompute")
    assert res.status_code == 409

    res = client.post("/api/compensations/E1/2025/1/6/recompute?force=1")
    assert res.status_code == 200
    assert res.get_json()["netPay"] == pytest.approx(800)
    assert res.get_json()["notes"] == "approved"


def test_override_rejects_unknown_fields(client):
    client.post("/api/compensations/E1/2025/1/compute")

    res = client.post("/api/compensations/E1/2025/1/6/override", json={"hoursWorked": 4})

    assert res.status_code == 400
    assert "hoursWorked" in res.get_json()["error"]


def test_override_of_missing_record_is_404(client):
    res = client.post("/api/compensations/E1/2025/1/20/override", json={"netPay": 100})

    assert res.status_code == 404


def test_unknown_employee_is_404(client):
    res = client.get("/api/compensations/nobody/2025/1")

    assert res.status_code == 404


def test_bad_month_and_day_are_400(client):
    assert client.get("/api/compensations/E1/2025/13").status_code == 400
    assert client.post("/api/compensations/E1/2025/2/30/recompute").status_code == 400


def test_breakdown_route(client):
    res = client.get("/api/compensations/E1/2025/1/7/breakdown")

    assert res.status_code == 200
    body = res.get_json()
    assert body["deductions"]["late"] == pytest.approx(5)
    assert body["netPay"] == pytest.approx(1045)


def test_schedule_route(client):
    res = client.get("/api/compensations/E1/2025/1/schedule")

    assert res.status_code == 200
    days = res.get_json()
    assert len(days) == 31
    assert days[3]["isRestDay"] is True
    assert days[5]["formatted"] == "8:00AM - 4:00PM"
    assert days[5]["schedule"] == {"timeIn": "08:00", "timeOut": "16:00"}


def test_record_attendance_route(client):
    res = client.put("/api/attendance/E1/2025/1/13", json={"timeIn": "8:00", "timeOut": "16:00"})

    assert res.status_code == 200
    assert res.get_json()["compensation"]["netPay"] == pytest.approx(800)


def test_record_attendance_rejects_bad_clock(client):
    res = client.put("/api/attendance/E1/2025/1/13", json={"timeIn": "25:99", "timeOut": "16:00"})

    assert res.status_code == 400


def test_missing_schedule_is_reported_in_batch(client):
    client.put("/api/attendance/E2/2025/1/4", json={"timeIn": "08:00", "timeOut": "16:00"})

    res = client.post("/api/compensations/E2/2025/1/compute")

    assert res.status_code == 200
    assert res.get_json()["missingScheduleDays"] == [4]
