from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, require_date
from ..common.validators import require_int
from ..container import Container
from ..payroll.serializers import employee_view

PROFILE_KEYS = ("name", "email", "phone", "department", "position", "address", "bank_account")


def register(app: Flask, container: Container) -> None:
    service = container.payroll_service

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        return jsonify({"success": True, "employees": [employee_view(e) for e in service.list_employees()]})

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    def create_employee():
        data = json_body()
        employee = service.hire(
            employee_id=data.get("employee_id"),
            kind=data.get("kind", ""),
            name=data.get("name", ""),
            hire_date=require_date(data.get("hire_date"), "hire_date"),
            compensation=data.get("compensation") or {},
            **{k: data.get(k, "") for k in PROFILE_KEYS if k != "name"},
        )
        return jsonify({"success": True, "employee": employee_view(employee)}), 201

    @app.route("/api/employees/<int:employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: int):
        return jsonify({"success": True, "employee": employee_view(service.get_employee(employee_id))})

    @app.route("/api/employees/<int:employee_id>", methods=["PATCH"], endpoint="update_employee")
    def update_employee(employee_id: int):
        data = json_body()
        changes = {k: data[k] for k in PROFILE_KEYS if k in data}
        employee = service.update_profile(employee_id=employee_id, **changes)
        return jsonify({"success": True, "employee": employee_view(employee)})

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(employee_id: int):
        service.dismiss(employee_id=employee_id)
        return jsonify({"success": True})

    @app.route("/api/employees/<int:employee_id>/overtime", methods=["PUT"], endpoint="set_overtime")
    def set_overtime(employee_id: int):
        service.set_overtime_hours(employee_id=employee_id, hours=json_body().get("hours"))
        return jsonify({"success": True, "employee": employee_view(service.get_employee(employee_id))})

    @app.route("/api/employees/<int:employee_id>/hours", methods=["PUT"], endpoint="set_part_time_hours")
    def set_part_time_hours(employee_id: int):
        service.set_part_time_hours(employee_id=employee_id, hours=json_body().get("hours"))
        return jsonify({"success": True, "employee": employee_view(service.get_employee(employee_id))})

    @app.route("/api/managers/<int:manager_id>/subordinates", methods=["GET"], endpoint="list_subordinates")
    def list_subordinates(manager_id: int):
        team = container.directory.subordinates_of(manager_id)
        return jsonify({"success": True, "subordinates": [employee_view(e) for e in team]})

    @app.route("/api/managers/<int:manager_id>/subordinates", methods=["POST"], endpoint="add_subordinate")
    def add_subordinate(manager_id: int):
        subordinate_id = require_int(json_body().get("employee_id"), "employee_id", min_value=1)
        added = service.assign_subordinate(manager_id=manager_id, subordinate_id=subordinate_id)
        return jsonify({"success": True, "added": added})

    @app.route(
        "/api/managers/<int:manager_id>/subordinates/<int:employee_id>",
        methods=["DELETE"],
        endpoint="remove_subordinate",
    )
    def remove_subordinate(manager_id: int, employee_id: int):
        removed = service.unassign_subordinate(manager_id=manager_id, subordinate_id=employee_id)
        return jsonify({"success": True, "removed": removed})
