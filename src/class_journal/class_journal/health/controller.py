from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.datetime_utils import iso_timestamp
from ..container import Container
from ..core.exceptions import StorageError
from ..database.mysql_base import ping

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        try:
            ping(container.conn)
        except StorageError as e:
            logger.warning("Health check failed: %s", e)
            return jsonify(
                {"status": "Error", "timestamp": iso_timestamp(), "database": "Disconnected", "error": str(e)}
            ), 500
        return jsonify({"status": "OK", "timestamp": iso_timestamp(), "database": "Connected"})
