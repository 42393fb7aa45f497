from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify, request

from ..common.http import json_body
from ..container import Container
from .model import Classroom


def classroom_to_dict(c: Classroom) -> dict:
    data = asdict(c)
    data["name"] = c.name
    return data


def register(app: Flask, container: Container) -> None:
    roster = container.roster_service

    @app.route("/api/teachers", methods=["GET"], endpoint="api_teachers")
    def api_teachers():
        return jsonify([asdict(t) for t in roster.list_teachers()])

    @app.route("/api/teachers", methods=["POST"], endpoint="api_teacher_create")
    def api_teacher_create():
        payload = json_body()
        teacher = roster.add_teacher(
            name=payload.get("name", ""),
            subject=payload.get("subject"),
            teacher_id=payload.get("teacher_id"),
        )
        return jsonify(asdict(teacher)), 201

    @app.route("/api/teachers/<teacher_id>", methods=["PUT"], endpoint="api_teacher_update")
    def api_teacher_update(teacher_id: str):
        payload = json_body()
        teacher = roster.update_teacher(teacher_id, name=payload.get("name", ""), subject=payload.get("subject"))
        return jsonify(asdict(teacher))

    @app.route("/api/teachers/<teacher_id>", methods=["DELETE"], endpoint="api_teacher_delete")
    def api_teacher_delete(teacher_id: str):
        roster.delete_teacher(teacher_id)
        return "", 204

    @app.route("/api/classrooms", methods=["GET"], endpoint="api_classrooms")
    def api_classrooms():
        grade = request.args.get("grade", type=int)
        return jsonify([classroom_to_dict(c) for c in roster.list_classrooms(grade=grade)])

    @app.route("/api/classrooms", methods=["POST"], endpoint="api_classroom_create")
    def api_classroom_create():
        payload = json_body()
        classroom = roster.add_classroom(
            grade=payload.get("grade"),
            section=payload.get("section", ""),
            subject=payload.get("subject"),
        )
        return jsonify(classroom_to_dict(classroom)), 201

    @app.route("/api/classrooms/<classroom_id>", methods=["PUT"], endpoint="api_classroom_update")
    def api_classroom_update(classroom_id: str):
        payload = json_body()
        classroom = roster.update_classroom(
            classroom_id,
            grade=payload.get("grade"),
            section=payload.get("section", ""),
            subject=payload.get("subject"),
        )
        return jsonify(classroom_to_dict(classroom))

    @app.route("/api/classrooms/<classroom_id>", methods=["DELETE"], endpoint="api_classroom_delete")
    def api_classroom_delete(classroom_id: str):
        roster.delete_classroom(classroom_id)
        return "", 204
