from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import today
from ..common.http import json_body, optional_date_arg
from ..container import Container
from .rendering import payslip_filename, render_payslip, render_report_csv, write_payslip
from .serializers import payslip_view, report_view


def register(app: Flask, container: Container) -> None:
    service = container.payroll_service

    def _period() -> tuple:
        current = today()
        return (
            request.args.get("month", current.month),
            request.args.get("year", current.year),
            optional_date_arg("as_of"),
        )

    @app.route("/api/employees/<int:employee_id>/payslip", methods=["GET"], endpoint="payslip")
    def payslip(employee_id: int):
        month, year, as_of = _period()
        slip = service.payslip(employee_id=employee_id, month=month, year=year, as_of=as_of)
        return jsonify({"success": True, "payslip": payslip_view(slip)})

    @app.route("/api/employees/<int:employee_id>/payslip.txt", methods=["GET"], endpoint="payslip_txt")
    def payslip_txt(employee_id: int):
        month, year, as_of = _period()
        slip = service.payslip(employee_id=employee_id, month=month, year=year, as_of=as_of)
        if request.args.get("save") == "1":
            write_payslip(slip, container.payslip_dir)
        filename = payslip_filename(slip.employee_id, slip.month, slip.year)
        return app.response_class(
            render_payslip(slip),
            mimetype="text/plain",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/employees/<int:employee_id>/hours/sync", methods=["POST"], endpoint="sync_hours")
    def sync_hours(employee_id: int):
        data = json_body()
        hours = service.sync_part_time_hours(employee_id=employee_id, month=data.get("month"), year=data.get("year"))
        return jsonify({"success": True, "hours_worked": hours})

    @app.route("/api/payroll/report", methods=["GET"], endpoint="payroll_report")
    def payroll_report():
        month, year, as_of = _period()
        report = service.payroll_report(month=month, year=year, as_of=as_of)
        return jsonify({"success": True, "report": report_view(report)})

    @app.route("/api/payroll/report.csv", methods=["GET"], endpoint="payroll_report_csv")
    def payroll_report_csv():
        month, year, as_of = _period()
        report = service.payroll_report(month=month, year=year, as_of=as_of)
        filename = f"payroll_report_{report.year}_{report.month:02d}.csv"
        return app.response_class(
            render_report_csv(report).encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
