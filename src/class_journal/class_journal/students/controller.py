from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container
from .service import students_to_dicts

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    def list_students():
        return jsonify(students_to_dicts(container.student_service.list_students()))

    @app.route("/api/students", methods=["POST"], endpoint="create_student")
    def create_student():
        data = json_body()
        logger.info("Adding student: name=%r group=%r course=%r", data.get("name"), data.get("group"), data.get("course"))
        student = container.student_service.create_student(
            name=data.get("name"),
            group=data.get("group"),
            course=data.get("course"),
        )
        return jsonify(student.to_dict())

    @app.route("/api/students/<int:student_id>", methods=["DELETE"], endpoint="delete_student")
    def delete_student(student_id: int):
        logger.info("Deleting student: %s", student_id)
        deleted_id = container.student_service.delete_student(student_id)
        return jsonify({"deletedId": deleted_id, "message": "Student deleted successfully"})

    @app.route("/api/students/batch", methods=["POST"], endpoint="batch_students")
    def batch_students():
        items = json_body().get("students")
        result = container.student_service.batch_register(items)
        logger.info("Batch add: added=%s errors=%s", result.added, result.errors)
        return jsonify(result.to_dict())
