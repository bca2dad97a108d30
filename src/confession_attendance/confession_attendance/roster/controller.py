from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_errors
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/roster/build", methods=["POST"], endpoint="api_roster_build")
    @json_errors
    def api_roster_build():
        data = request.get_json(silent=True) or {}
        result = container.roster_service.build_roster(data.get("date") or None)
        return jsonify(result.to_dict())

    @app.route("/api/roster", methods=["GET"], endpoint="api_roster")
    @json_errors
    def api_roster():
        """Rebuilds the roster from the calendar, then returns it with history."""
        result = container.history_service.get_roster_and_history(request.args.get("date") or None)
        return jsonify(result.to_dict())
