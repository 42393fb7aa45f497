from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..common.http import date_arg
from ..container import Container
from ..core.enums import SummaryWindow
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    reports = container.report_service

    @app.route("/api/dashboard/overview", methods=["GET"], endpoint="api_overview")
    def api_overview():
        day = date_arg()
        data = reports.daily_overview(day)
        return jsonify(
            {
                "date": day.isoformat(),
                "on_time": data.on_time,
                "late": data.late,
                "absent": data.absent,
                "trend": [{"date": d.isoformat(), "count": n} for d, n in data.trend],
                "recent": data.recent,
            }
        )

    @app.route("/api/teachers/<teacher_id>/daily", methods=["GET"], endpoint="api_teacher_daily")
    def api_teacher_daily(teacher_id: str):
        day = date_arg()
        return jsonify({"date": day.isoformat(), "rows": reports.teacher_daily_rows(teacher_id, day)})

    @app.route("/api/teachers/<teacher_id>/summary", methods=["GET"], endpoint="api_teacher_summary")
    def api_teacher_summary(teacher_id: str):
        raw = (request.args.get("window") or SummaryWindow.MONTHLY.value).lower()
        try:
            window = SummaryWindow(raw)
        except ValueError as exc:
            raise ValidationError(f"Unknown window: {raw!r}") from exc
        today = date_arg("today", date.today())
        return jsonify(reports.teacher_summary(teacher_id, window=window, today=today))

    @app.route("/api/matrix", methods=["GET"], endpoint="api_matrix")
    def api_matrix():
        day = date_arg()
        grade_s = request.args.get("grade")
        try:
            grade = int(grade_s) if grade_s else None
        except ValueError as exc:
            raise ValidationError(f"Invalid grade: {grade_s!r}") from exc

        data = reports.class_period_matrix(day, grade=grade)
        return jsonify({"date": day.isoformat(), "columns": data.columns, "rows": data.rows})
