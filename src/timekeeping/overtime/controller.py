from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.validators import try_float
from ..container import Container
from ..core.exceptions import ValidationFailed
from ..timesheets.model import TimesheetEntry


def _parse_date(value: str):
    try:
        return parse_iso_date(value)
    except (TypeError, ValueError):
        raise ValidationFailed(["Date must be YYYY-MM-DD"])


def _hours(value, field_name: str) -> float:
    errors: list[str] = []
    hours = try_float(value, field_name, errors)
    if errors:
        raise ValidationFailed(errors)
    return hours or 0.0


def _entry_from_json(data: dict) -> TimesheetEntry:
    raw_date = data.get("date")
    return TimesheetEntry(
        employee_id=data.get("employee_id"),
        work_date=_parse_date(raw_date) if raw_date else None,
        time_in=data.get("time_in"),
        time_out=data.get("time_out"),
        break_duration=data.get("break_duration") or 0,
        total_hours=data.get("total_hours"),
        is_manual_override=bool(data.get("is_manual_override", False)),
    )


def register(app: Flask, container: Container) -> None:
    service = container.overtime_service

    @app.route("/api/overtime/hours", methods=["POST"], endpoint="overtime_hours")
    def overtime_hours():
        data = request.get_json(silent=True) or {}
        hours = service.calculate_hours_worked(
            data.get("time_in"),
            data.get("time_out"),
            _hours(data.get("break_duration"), "Break duration"),
        )
        return jsonify({"success": True, "hours": hours})

    @app.route("/api/overtime/validate", methods=["POST"], endpoint="overtime_validate")
    def overtime_validate():
        result = service.validate_timesheet_entry(_entry_from_json(request.get_json(silent=True) or {}))
        return jsonify({"is_valid": result.is_valid, "errors": result.errors})

    @app.route("/api/overtime/entries", methods=["POST"], endpoint="overtime_save_entry")
    def overtime_save_entry():
        saved = service.save_timesheet_entry(_entry_from_json(request.get_json(silent=True) or {}))
        return jsonify(
            {
                "success": True,
                "record": saved.record.to_dict(),
                "recalculated": [r.to_dict() for r in saved.recalculated],
            }
        ), 201

    @app.route("/api/overtime/entries/<employee_id>/<work_date>", methods=["DELETE"], endpoint="overtime_delete_entry")
    def overtime_delete_entry(employee_id: str, work_date: str):
        updated = service.delete_timesheet_entry(employee_id, _parse_date(work_date))
        return jsonify({"success": True, "recalculated": [r.to_dict() for r in updated]})

    @app.route(
        "/api/overtime/weeks/<employee_id>/<work_date>/recalculate",
        methods=["POST"],
        endpoint="overtime_recalculate_week",
    )
    def overtime_recalculate_week(employee_id: str, work_date: str):
        updated = service.recalculate_week(employee_id, _parse_date(work_date))
        return jsonify({"success": True, "recalculated": [r.to_dict() for r in updated]})
