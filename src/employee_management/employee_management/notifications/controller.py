from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container


def register(app: Flask, container: Container) -> None:
    prefix = app.config["API_PREFIX"]
    notifier = container.notification_service

    @app.route(f"{prefix}/test-email", methods=["GET"], endpoint="test_email")
    def test_email():
        result = notifier.send_test_email()
        return jsonify(result.to_dict()), 200 if result.success else 500
