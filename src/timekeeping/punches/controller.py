from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.time_arithmetic import format_duration
from ..container import Container
from ..core.exceptions import ValidationFailed


def register(app: Flask, container: Container) -> None:
    service = container.punch_service

    @app.route("/api/punches/<employee_id>/status", methods=["GET"], endpoint="punch_status")
    def punch_status(employee_id: str):
        status = service.status(employee_id)
        summary = service.summary(employee_id)
        return jsonify(
            {
                "status": status.status.value,
                "can_clock_in": status.can_clock_in,
                "can_take_break": status.can_take_break,
                "can_clock_out": status.can_clock_out,
                "last_action": status.last_action,
                "last_time": status.last_time.isoformat() if status.last_time else None,
                "worked_hours": round(summary.worked_hours, 4),
                "worked": format_duration(summary.worked_hours),
                "break_hours": round(summary.break_hours, 4),
            }
        )

    @app.route("/api/punches/<employee_id>", methods=["POST"], endpoint="punch_record")
    def punch_record(employee_id: str):
        data = request.get_json(silent=True) or {}
        raw_type = data.get("type") or ""
        if not isinstance(raw_type, str):
            raise ValidationFailed(["Punch type must be one of: in, break, out"])
        punch_type = raw_type.strip().lower()

        check = service.check(employee_id, punch_type)
        if not check.valid:
            return jsonify({"success": False, "message": check.message}), 409

        result = service.record_punch(employee_id, punch_type)
        body = {
            "success": True,
            "status": result.status.value,
            "work_date": result.work_date.strftime("%Y-%m-%d"),
        }
        if result.saved:
            body["record"] = result.saved.record.to_dict()
            body["recalculated"] = [r.to_dict() for r in result.saved.recalculated]
        return jsonify(body), 201
