from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, request

from ..attendance.model import Attendance
from ..common.validators import require_clock
from ..core.constants import PRESENT_SENTINEL
from ..core.exceptions import (
    InvalidDateError,
    ManualOverrideError,
    MissingScheduleError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from ..container import Container

logger = logging.getLogger(__name__)

# camelCase body keys accepted by the override endpoint
_OVERRIDE_KEYS = {
    "grossPay": "gross_pay",
    "netPay": "net_pay",
    "deductions": "deductions",
    "lateDeduction": "late_deduction",
    "undertimeDeduction": "undertime_deduction",
    "overtimePay": "overtime_pay",
    "holidayBonus": "holiday_bonus",
    "nightDifferentialPay": "night_differential_pay",
    "dailyRate": "daily_rate",
    "notes": "notes",
}


def _flag(name: str) -> bool:
    return (request.args.get(name) or "").lower() in {"1", "true", "yes"}


def _punch(value):
    if value in (None, ""):
        return None
    if value == PRESENT_SENTINEL:
        return value
    return require_clock(str(value), "Time")


def register(app: Flask, container: Container) -> None:
    service = container.compensation_service

    def json_errors(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except NotFoundError as e:
                return jsonify({"error": str(e)}), 404
            except (ValidationError, InvalidDateError) as e:
                return jsonify({"error": str(e)}), 400
            except ManualOverrideError as e:
                return jsonify({"error": str(e)}), 409
            except MissingScheduleError as e:
                return jsonify({"error": str(e)}), 422
            except PersistenceError as e:
                logger.exception("[compensation] storage failure")
                return jsonify({"error": str(e)}), 503

        return wrapper

    @app.route(
        "/api/compensations/<employee_id>/<int:year>/<int:month>/compute",
        methods=["POST"],
        endpoint="compensation_compute_month",
    )
    @json_errors
    def compute_month(employee_id: str, year: int, month: int):
        result = service.compute_month(employee_id, year, month, recompute=_flag("recompute"))
        return jsonify(result.to_dict())

    @app.route(
        "/api/compensations/<employee_id>/<int:year>/<int:month>",
        methods=["GET"],
        endpoint="compensation_list_month",
    )
    @json_errors
    def list_month(employee_id: str, year: int, month: int):
        return jsonify([c.to_dict() for c in service.list_month(employee_id, year, month)])

    @app.route(
        "/api/compensations/<employee_id>/<int:year>/<int:month>/schedule",
        methods=["GET"],
        endpoint="compensation_month_schedule",
    )
    @json_errors
    def month_schedule(employee_id: str, year: int, month: int):
        return jsonify(
            [
                {
                    "day": day,
                    "hasSchedule": info.has_schedule,
                    "isRestDay": info.is_rest_day,
                    "schedule": info.schedule.to_mapping() if info.schedule else None,
                    "formatted": info.formatted,
                }
                for day, info in service.month_schedule(employee_id, year, month)
            ]
        )

    @app.route(
        "/api/compensations/<employee_id>/<int:year>/<int:month>/<int:day>/recompute",
        methods=["POST"],
        endpoint="compensation_recompute_day",
    )
    @json_errors
    def recompute_day(employee_id: str, year: int, month: int, day: int):
        record = service.compute_day(employee_id, year, month, day, force=_flag("force"))
        return jsonify(record.to_dict())

    @app.route(
        "/api/compensations/<employee_id>/<int:year>/<int:month>/<int:day>/override",
        methods=["POST"],
        endpoint="compensation_override_day",
    )
    @json_errors
    def override_day(employee_id: str, year: int, month: int, day: int):
        body = request.get_json(silent=True) or {}
        unknown = sorted(k for k in body if k not in _OVERRIDE_KEYS)
        if unknown:
            raise ValidationError(f"Unknown fields: {', '.join(unknown)}")
        fields = {_OVERRIDE_KEYS[k]: v for k, v in body.items()}
        record = service.apply_manual_override(employee_id, year, month, day, **fields)
        return jsonify(record.to_dict())

    @app.route(
        "/api/compensations/<employee_id>/<int:year>/<int:month>/<int:day>/breakdown",
        methods=["GET"],
        endpoint="compensation_breakdown_day",
    )
    @json_errors
    def breakdown_day(employee_id: str, year: int, month: int, day: int):
        return jsonify(service.breakdown(employee_id, year, month, day).to_dict())

    @app.route(
        "/api/attendance/<employee_id>/<int:year>/<int:month>/<int:day>",
        methods=["PUT"],
        endpoint="attendance_record_day",
    )
    @json_errors
    def record_day(employee_id: str, year: int, month: int, day: int):
        body = request.get_json(silent=True) or {}
        entry = Attendance(
            employee_id=employee_id,
            year=year,
            month=month,
            day=day,
            time_in=_punch(body.get("timeIn")),
            time_out=_punch(body.get("timeOut")),
        )
        record = service.record_attendance(entry)
        return jsonify({"compensation": record.to_dict() if record else None})
