from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/entries", methods=["GET"], endpoint="list_entries")
    def list_entries():
        return jsonify([e.to_dict() for e in container.entry_service.list_entries()])

    @app.route("/api/entries", methods=["POST"], endpoint="create_entry")
    def create_entry():
        data = json_body()
        entry = container.entry_service.create_entry(name=data.get("name"), date=data.get("date"), note=data.get("note"))
        return jsonify(entry.to_dict())

    @app.route("/api/entries/<int:entry_id>", methods=["PUT"], endpoint="update_entry")
    def update_entry(entry_id: int):
        data = json_body()
        entry = container.entry_service.update_entry(
            entry_id, name=data.get("name"), date=data.get("date"), note=data.get("note")
        )
        return jsonify(entry.to_dict())

    @app.route("/api/entries/<int:entry_id>", methods=["DELETE"], endpoint="delete_entry")
    def delete_entry(entry_id: int):
        return jsonify({"deletedId": container.entry_service.delete_entry(entry_id)})
