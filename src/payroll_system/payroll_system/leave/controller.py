from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import fail, json_body, require_date
from ..container import Container
from ..payroll.serializers import leave_view


def register(app: Flask, container: Container) -> None:
    service = container.payroll_service

    @app.route("/api/employees/<int:employee_id>/leaves", methods=["GET"], endpoint="list_leaves")
    def list_leaves(employee_id: int):
        employee = service.get_employee(employee_id)
        return jsonify(
            {
                "success": True,
                "available_leaves": employee.available_leaves(),
                "leaves": [leave_view(r) for r in employee.leave.history()],
            }
        )

    @app.route("/api/employees/<int:employee_id>/leaves", methods=["POST"], endpoint="apply_leave")
    def apply_leave(employee_id: int):
        data = json_body()
        req = service.apply_leave(
            employee_id=employee_id,
            start_date=require_date(data.get("start_date"), "start_date"),
            end_date=require_date(data.get("end_date"), "end_date"),
            reason=data.get("reason", ""),
        )
        return jsonify({"success": True, "leave": leave_view(req)}), 201

    @app.route(
        "/api/employees/<int:employee_id>/leaves/<int:request_id>/approve",
        methods=["POST"],
        endpoint="approve_leave",
    )
    def approve_leave(employee_id: int, request_id: int):
        if not service.approve_leave(employee_id=employee_id, request_id=request_id):
            return fail(f"Leave request {request_id} not found", 404)
        return jsonify({"success": True})

    @app.route(
        "/api/employees/<int:employee_id>/leaves/<int:request_id>/reject",
        methods=["POST"],
        endpoint="reject_leave",
    )
    def reject_leave(employee_id: int, request_id: int):
        if not service.reject_leave(employee_id=employee_id, request_id=request_id):
            return fail(f"Leave request {request_id} not found", 404)
        return jsonify({"success": True})

    @app.route("/api/leaves/pending", methods=["GET"], endpoint="pending_leaves")
    def pending_leaves():
        items = [
            {"employee_id": e.employee_id, "name": e.name, **leave_view(req)}
            for e, req in service.pending_leaves()
        ]
        return jsonify({"success": True, "pending": items})
