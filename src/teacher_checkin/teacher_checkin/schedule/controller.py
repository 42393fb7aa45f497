from __future__ import annotations

from typing import Optional

from flask import Flask, jsonify

from ..common.datetime_utils import format_clock
from ..common.http import date_arg, datetime_arg
from ..container import Container
from .model import Period


def period_to_dict(p: Optional[Period]) -> Optional[dict]:
    if p is None:
        return None
    return {
        "id": p.period_id,
        "name": p.name,
        "start": format_clock(p.start),
        "end": format_clock(p.end),
        "kind": p.kind.value,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/schedule", methods=["GET"], endpoint="api_schedule")
    def api_schedule():
        day = date_arg()
        variant = container.calendar.variant_for(day)
        return jsonify(
            {
                "date": day.isoformat(),
                "variant": variant.name if variant else None,
                "periods": [period_to_dict(p) for p in container.calendar.periods_for(day)],
            }
        )

    @app.route("/api/schedule/current", methods=["GET"], endpoint="api_schedule_current")
    def api_schedule_current():
        moment = datetime_arg("at")
        period = container.calendar.current_period(moment)
        if period is None:
            state = "none"
        elif period.is_break:
            state = "break"
        else:
            state = "teaching"
        return jsonify({"state": state, "period": period_to_dict(period)})
