from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, message
from ..container import Container


def register(app: Flask, container: Container) -> None:
    prefix = app.config["API_PREFIX"]
    service = container.leave_service

    @app.route(f"{prefix}/leave", methods=["GET"], endpoint="list_leave")
    def list_leave():
        leaves = service.list_all(status=request.args.get("status"))
        return jsonify([leave.to_dict() for leave in leaves])

    @app.route(f"{prefix}/leave/<int:request_id>", methods=["GET"], endpoint="get_leave")
    def get_leave(request_id: int):
        return jsonify(service.get(request_id).to_dict())

    @app.route(f"{prefix}/leave/employee/<int:employee_id>", methods=["GET"], endpoint="employee_leave")
    def employee_leave(employee_id: int):
        return jsonify([leave.to_dict() for leave in service.list_for_employee(employee_id)])

    @app.route(f"{prefix}/leave", methods=["POST"], endpoint="create_leave")
    def create_leave():
        body = json_body(allowed=("employeeId", "startDate", "endDate", "type", "reason"))
        leave = service.create(
            employee_id=body.get("employeeId"),
            start_date=body.get("startDate"),
            end_date=body.get("endDate"),
            leave_type=body.get("type"),
            reason=body.get("reason"),
        )
        return jsonify(leave.to_dict()), 201

    @app.route(f"{prefix}/leave/<int:request_id>", methods=["PUT"], endpoint="review_leave")
    def review_leave(request_id: int):
        body = json_body(allowed=("status",))
        return jsonify(service.review(request_id, status=body.get("status")).to_dict())

    @app.route(f"{prefix}/leave/<int:request_id>", methods=["DELETE"], endpoint="delete_leave")
    def delete_leave(request_id: int):
        service.delete(request_id)
        return jsonify(message("Leave request deleted successfully"))
