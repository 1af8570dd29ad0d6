from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, require_date
from ..common.validators import parse_bool
from ..container import Container
from ..payroll.serializers import attendance_view


def register(app: Flask, container: Container) -> None:
    service = container.payroll_service

    @app.route("/api/employees/<int:employee_id>/attendance", methods=["GET"], endpoint="list_attendance")
    def list_attendance(employee_id: int):
        ledger = service.get_employee(employee_id).attendance
        return jsonify(
            {
                "success": True,
                "present_days": ledger.present_days(),
                "absent_days": ledger.absent_days(),
                "records": [attendance_view(r) for r in ledger.records()],
            }
        )

    @app.route("/api/employees/<int:employee_id>/attendance", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance(employee_id: int):
        data = json_body()
        service.mark_attendance(
            employee_id=employee_id,
            work_date=require_date(data.get("work_date"), "work_date"),
            present=parse_bool(data.get("present")),
            hours=data.get("hours"),
        )
        return jsonify({"success": True, "message": "Attendance marked"})
