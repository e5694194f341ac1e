from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.http import json_body
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["GET"], endpoint="list_attendance")
    def list_attendance():
        return jsonify(container.attendance_service.overview().to_dict())

    @app.route("/api/attendance", methods=["POST"], endpoint="record_attendance")
    def record_attendance():
        data = json_body()
        logger.info(
            "Saving attendance: studentId=%r date=%r status=%r hour=%r",
            data.get("studentId"), data.get("date"), data.get("status"), data.get("hour"),
        )
        applied = container.attendance_service.record(
            student_id=data.get("studentId"),
            date=data.get("date"),
            status=data.get("status"),
            hour=data.get("hour"),
        )
        return jsonify(applied.to_dict())

    @app.route("/api/attendance/period", methods=["GET"], endpoint="attendance_period")
    def attendance_period():
        rows = container.attendance_service.period(
            start_date=request.args.get("startDate"),
            end_date=request.args.get("endDate"),
            group=request.args.get("group"),
        )
        return jsonify([r.to_dict() for r in rows])

    @app.route("/api/stats/daily/<date>", methods=["GET"], endpoint="daily_stats")
    def daily_stats(date: str):
        return jsonify([s.to_dict() for s in container.attendance_service.daily_stats(date)])
