from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, message
from ..container import Container


def register(app: Flask, container: Container) -> None:
    prefix = app.config["API_PREFIX"]
    service = container.issue_service

    @app.route(f"{prefix}/issues", methods=["GET"], endpoint="list_issues")
    def list_issues():
        return jsonify([i.to_dict() for i in service.list_all()])

    @app.route(f"{prefix}/issues/employee/<int:employee_id>", methods=["GET"], endpoint="employee_issues")
    def employee_issues(employee_id: int):
        return jsonify([i.to_dict() for i in service.list_for_employee(employee_id)])

    @app.route(f"{prefix}/issues/department/<department>", methods=["GET"], endpoint="department_issues")
    def department_issues(department: str):
        return jsonify([i.to_dict() for i in service.list_for_department(department)])

    @app.route(f"{prefix}/issues", methods=["POST"], endpoint="create_issue")
    def create_issue():
        body = json_body(allowed=("employeeId", "title", "description", "priority", "assignedTo", "department"))
        issue = service.create(
            employee_id=body.get("employeeId"),
            title=body.get("title"),
            description=body.get("description"),
            priority=body.get("priority"),
            assigned_to=body.get("assignedTo"),
            department=body.get("department"),
        )
        return jsonify(issue.to_dict()), 201

    @app.route(f"{prefix}/issues/<int:issue_id>", methods=["PUT"], endpoint="update_issue")
    def update_issue(issue_id: int):
        body = json_body(
            allowed=("status", "assignedTo", "department", "priority", "resolvedBy", "resolution")
        )
        issue = service.update(
            issue_id,
            status=body.get("status"),
            assigned_to=body.get("assignedTo"),
            department=body.get("department"),
            priority=body.get("priority"),
            resolved_by=body.get("resolvedBy"),
            resolution=body.get("resolution"),
        )
        return jsonify(issue.to_dict())

    @app.route(f"{prefix}/issues/<int:issue_id>", methods=["DELETE"], endpoint="delete_issue")
    def delete_issue(issue_id: int):
        service.delete(issue_id)
        return jsonify(message("Issue deleted successfully"))
