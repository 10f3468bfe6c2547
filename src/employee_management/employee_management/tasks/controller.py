from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, message
from ..container import Container


def register(app: Flask, container: Container) -> None:
    prefix = app.config["API_PREFIX"]
    service = container.task_service

    @app.route(f"{prefix}/tasks", methods=["GET"], endpoint="list_tasks")
    def list_tasks():
        tasks = service.list_all(status=request.args.get("status"))
        return jsonify([t.to_dict() for t in tasks])

    @app.route(f"{prefix}/tasks/<int:task_id>", methods=["GET"], endpoint="get_task")
    def get_task(task_id: int):
        return jsonify(service.get(task_id).to_dict())

    @app.route(f"{prefix}/tasks/employee/<int:employee_id>", methods=["GET"], endpoint="employee_tasks")
    def employee_tasks(employee_id: int):
        return jsonify([t.to_dict() for t in service.list_for_employee(employee_id)])

    @app.route(f"{prefix}/tasks", methods=["POST"], endpoint="create_task")
    def create_task():
        body = json_body(allowed=("employeeId", "title", "description", "deadline", "isRecurring"))
        task = service.create(
            employee_id=body.get("employeeId"),
            title=body.get("title"),
            description=body.get("description"),
            deadline=body.get("deadline"),
            is_recurring=body.get("isRecurring"),
        )
        return jsonify(task.to_dict()), 201

    @app.route(f"{prefix}/tasks/<int:task_id>", methods=["PUT"], endpoint="update_task")
    def update_task(task_id: int):
        body = json_body(allowed=("status", "action"))
        task = service.update(task_id, status=body.get("status"), action=body.get("action"))
        return jsonify(task.to_dict())

    @app.route(f"{prefix}/tasks/<int:task_id>", methods=["DELETE"], endpoint="delete_task")
    def delete_task(task_id: int):
        service.delete(task_id)
        return jsonify(message("Task deleted successfully"))
