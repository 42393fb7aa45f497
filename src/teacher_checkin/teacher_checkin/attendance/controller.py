from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container
from ..core.exceptions import ValidationError
from .model import CheckInResult


def checkin_to_dict(result: CheckInResult) -> dict:
    r = result.record
    return {
        "record_id": r.record_id,
        "teacher_id": r.teacher_id,
        "teacher_name": r.teacher_name,
        "classroom_id": r.classroom_id,
        "class_name": r.class_name,
        "subject": r.subject,
        "period": r.period_id,
        "timestamp": r.timestamp.isoformat(timespec="seconds"),
        "date": r.work_date.isoformat(),
        "status": result.classification.outcome.value,
        "delay_minutes": result.classification.delay_minutes,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/checkins", methods=["POST"], endpoint="api_checkin")
    def api_checkin():
        payload = json_body()
        result = container.checkin_service.check_in(
            str(payload.get("teacher_id") or ""),
            str(payload.get("classroom_id") or ""),
        )
        return jsonify(checkin_to_dict(result)), 201

    @app.route("/api/checkins/import", methods=["POST"], endpoint="api_checkin_import")
    def api_checkin_import():
        payload = json_body()
        records = payload.get("records")
        if not isinstance(records, list):
            raise ValidationError("Expected a 'records' list")
        return jsonify(container.checkin_service.import_records(records)), 201
