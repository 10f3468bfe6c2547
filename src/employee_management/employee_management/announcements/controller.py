from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, message
from ..container import Container


def register(app: Flask, container: Container) -> None:
    prefix = app.config["API_PREFIX"]
    service = container.announcement_service

    @app.route(f"{prefix}/announcements", methods=["GET"], endpoint="list_announcements")
    def list_announcements():
        return jsonify([a.to_dict() for a in service.list_all()])

    @app.route(f"{prefix}/announcements", methods=["POST"], endpoint="create_announcement")
    def create_announcement():
        body = json_body(allowed=("title", "message", "type", "targetEmployeeId"))
        announcement = service.create(
            title=body.get("title"),
            message=body.get("message"),
            announcement_type=body.get("type"),
            target_employee_id=body.get("targetEmployeeId"),
        )
        return jsonify(announcement.to_dict()), 201

    @app.route(f"{prefix}/announcements/<int:announcement_id>", methods=["DELETE"], endpoint="delete_announcement")
    def delete_announcement(announcement_id: int):
        service.delete(announcement_id)
        return jsonify(message("Announcement deleted successfully"))
