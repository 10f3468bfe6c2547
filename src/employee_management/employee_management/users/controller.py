from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    prefix = app.config["API_PREFIX"]
    service = container.auth_service

    @app.route(f"{prefix}/auth/login", methods=["POST"], endpoint="login")
    def login():
        body = json_body(allowed=("username", "password"))
        user = service.login(body.get("username"), body.get("password"))
        return jsonify({"message": "Login successful", "user": user.to_profile()})

    @app.route(f"{prefix}/auth/validate", methods=["POST"], endpoint="validate_session")
    def validate_session():
        body = json_body(allowed=("userId",))
        return jsonify({"user": service.validate(body.get("userId")).to_profile()})

    @app.route(f"{prefix}/auth/users", methods=["GET"], endpoint="list_users")
    def list_users():
        return jsonify([u.to_profile() for u in service.list_users()])

    @app.route(f"{prefix}/auth/register", methods=["POST"], endpoint="register_user")
    def register_user():
        body = json_body(allowed=("username", "password", "role", "name", "employeeId", "department"))
        user = service.register(
            username=body.get("username"),
            password=body.get("password"),
            role=body.get("role"),
            name=body.get("name"),
            employee_id=body.get("employeeId"),
            department=body.get("department"),
        )
        return jsonify({"message": "Account created successfully", "user": user.to_profile()}), 201
