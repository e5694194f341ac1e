from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container
from ..core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        try:
            user = container.auth_service.authenticate(data.get("username"), data.get("password"))
        except AuthenticationError as e:
            logger.info("Failed login for %r", data.get("username"))
            return jsonify({"success": False, "error": str(e)}), 401
        return jsonify({"success": True, "user": user.to_dict()})
