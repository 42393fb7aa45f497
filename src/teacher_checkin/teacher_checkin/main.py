from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, g, jsonify, request

from .attendance.controller import register as register_attendance
from .config import get_settings_module
from .container import Container, build_container
from .core.exceptions import NotFoundError, ValidationError
from .logging_config import bind_request_context, clear_request_context, get_logger, setup_logging
from .reports.controller import register as register_reports
from .roster.controller import register as register_roster
from .schedule.controller import register as register_schedule

log = get_logger(__name__)


def create_app(*, settings_module: Optional[str] = None, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    setup_logging(
        json_output=bool(getattr(settings, "LOG_JSON", False)),
        log_level=str(getattr(settings, "LOG_LEVEL", "INFO")),
    )

    if container is None:
        container = build_container(
            grace_minutes=int(getattr(settings, "GRACE_MINUTES", 5)),
            minor_late_max_minutes=int(getattr(settings, "MINOR_LATE_MAX_MINUTES", 15)),
            weekend_off=bool(getattr(settings, "WEEKEND_OFF", False)),
            seed_demo_data=bool(getattr(settings, "SEED_DEMO_DATA", False)),
        )
    app.extensions["checkin_container"] = container

    @app.before_request
    def bind_log_context():
        g.request_id = bind_request_context(
            method=request.method,
            path=request.path,
            request_id=request.headers.get("X-Request-ID"),
        )

    @app.after_request
    def add_request_id_header(response):
        if "request_id" in g:
            response.headers["X-Request-ID"] = g.request_id
        return response

    @app.teardown_request
    def unbind_log_context(exc):
        clear_request_context()

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        log.warning("request_rejected", error=str(e))
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        log.info("not_found", error=str(e))
        return jsonify({"error": str(e)}), 404

    register_schedule(app, container)
    register_attendance(app, container)
    register_reports(app, container)
    register_roster(app, container)

    log.info(
        "app_started",
        settings=settings_module,
        grace_minutes=container.classifier.grace_minutes,
        teachers=len(container.roster_repo.list_teachers()),
    )
    return app


def main() -> None:
    app = create_app()
    app.run(debug=app.config["DEBUG"])


if __name__ == "__main__":
    main()
