from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, message
from ..container import Container
from .service import UPDATABLE_FIELDS


def register(app: Flask, container: Container) -> None:
    prefix = app.config["API_PREFIX"]
    service = container.employee_service

    @app.route(f"{prefix}/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        return jsonify([e.to_dict() for e in service.list_all()])

    @app.route(f"{prefix}/employees/<int:employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: int):
        return jsonify(service.get(employee_id).to_dict())

    @app.route(f"{prefix}/employees", methods=["POST"], endpoint="create_employee")
    def create_employee():
        body = json_body(allowed=UPDATABLE_FIELDS)
        employee = service.create(
            name=body.get("name"),
            email=body.get("email"),
            position=body.get("position"),
            department=body.get("department"),
            role=body.get("role"),
        )
        return jsonify(employee.to_dict()), 201

    @app.route(f"{prefix}/employees/<int:employee_id>", methods=["PUT"], endpoint="update_employee")
    def update_employee(employee_id: int):
        body = json_body(allowed=UPDATABLE_FIELDS)
        return jsonify(service.update(employee_id, body).to_dict())

    @app.route(f"{prefix}/employees/<int:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(employee_id: int):
        service.delete(employee_id)
        return jsonify(message("Employee deleted successfully"))
