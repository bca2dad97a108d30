from __future__ import annotations

from flask import Flask, jsonify, render_template, request

from ..common.http import json_errors
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET"], endpoint="attendance_form")
    def attendance_form():
        return render_template("attendance.html", date=request.args.get("date", ""))

    @app.route("/api/draft", methods=["GET"], endpoint="api_draft_get")
    @json_errors
    def api_draft_get():
        draft = container.draft_service.get_draft(request.args.get("date", ""))
        return jsonify({key: sel.to_dict() for key, sel in draft.items()})

    @app.route("/api/draft", methods=["POST"], endpoint="api_draft_save")
    @json_errors
    def api_draft_save():
        result = container.draft_service.save_draft(request.get_json(silent=True))
        return jsonify(result.to_dict())

    @app.route("/api/attendance", methods=["POST"], endpoint="api_attendance_submit")
    @json_errors
    def api_attendance_submit():
        result = container.attendance_service.finalize(request.get_json(silent=True))
        return jsonify(result.to_dict())
