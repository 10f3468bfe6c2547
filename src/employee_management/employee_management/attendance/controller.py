from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, message
from ..common.validators import as_date
from ..container import Container


def register(app: Flask, container: Container) -> None:
    prefix = app.config["API_PREFIX"]
    service = container.attendance_service

    @app.route(f"{prefix}/attendance", methods=["GET"], endpoint="list_attendance")
    def list_attendance():
        raw_date = request.args.get("date")
        work_date = as_date(raw_date, "date") if raw_date else None
        return jsonify([r.to_dict() for r in service.list_all(work_date=work_date)])

    @app.route(f"{prefix}/attendance/employee/<int:employee_id>", methods=["GET"], endpoint="employee_attendance")
    def employee_attendance(employee_id: int):
        return jsonify([r.to_dict() for r in service.list_for_employee(employee_id)])

    @app.route(f"{prefix}/attendance", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        body = json_body(allowed=("employeeId", "date", "status"))
        record = service.mark(
            employee_id=body.get("employeeId"),
            work_date=body.get("date"),
            status=body.get("status"),
        )
        return jsonify(record.to_dict()), 201

    @app.route(f"{prefix}/attendance/<int:attendance_id>", methods=["DELETE"], endpoint="delete_attendance")
    def delete_attendance(attendance_id: int):
        service.delete(attendance_id)
        return jsonify(message("Attendance record deleted successfully"))
