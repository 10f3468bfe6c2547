from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    prefix = app.config["API_PREFIX"]
    service = container.work_hours_service

    @app.route(f"{prefix}/workhours", methods=["GET"], endpoint="list_work_hours")
    def list_work_hours():
        return jsonify([e.to_dict() for e in service.list_all()])

    @app.route(f"{prefix}/workhours/employee/<int:employee_id>", methods=["GET"], endpoint="employee_work_hours")
    def employee_work_hours(employee_id: int):
        return jsonify([e.to_dict() for e in service.list_for_employee(employee_id)])

    @app.route(f"{prefix}/workhours/checkin", methods=["POST"], endpoint="check_in")
    def check_in():
        body = json_body(allowed=("employeeId",))
        return jsonify(service.check_in(body.get("employeeId")).to_dict()), 201

    @app.route(f"{prefix}/workhours/checkout", methods=["POST"], endpoint="check_out")
    def check_out():
        body = json_body(allowed=("employeeId",))
        return jsonify(service.check_out(body.get("employeeId")).to_dict())

    @app.route(f"{prefix}/workhours/weekly/<int:employee_id>", methods=["GET"], endpoint="weekly_work_hours")
    def weekly_work_hours(employee_id: int):
        return jsonify(service.weekly_summary(employee_id).to_dict())
