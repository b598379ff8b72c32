from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import to_iso
from ..common.responses import error_response
from ..container import Container
from ..core.exceptions import DomainError
from .model import ShiftRecord


def _record_json(r: ShiftRecord) -> dict:
    return {
        "shift_id": r.shift_id,
        "employee_id": r.employee_id,
        "shift_date": r.shift_date.isoformat(),
        "start_time": to_iso(r.start_time),
        "end_time": to_iso(r.end_time),
    }


def register(app: Flask, container: Container) -> None:
    service = container.shift_service

    @app.route("/attendance/<code>/start", methods=["POST"], endpoint="shift_start")
    def shift_start(code: str):
        try:
            record = service.start(code)
        except DomainError as e:
            return error_response(e)
        return jsonify(_record_json(record)), 201

    @app.route("/attendance/<code>/end", methods=["POST"], endpoint="shift_end")
    def shift_end(code: str):
        try:
            record = service.end(code)
        except DomainError as e:
            return error_response(e)
        return jsonify(_record_json(record)), 200

    @app.route("/attendance/<code>/today", methods=["GET"], endpoint="shift_hours_today")
    def shift_hours_today(code: str):
        try:
            today = service.hours_today(code)
        except DomainError as e:
            return error_response(e)
        return jsonify(
            {
                "start_time": to_iso(today.start_time),
                "end_time": to_iso(today.end_time),
                "worked_hours": today.worked_hours,
            }
        )

    @app.route("/attendance/<code>/past", methods=["GET"], endpoint="shift_hours_history")
    def shift_hours_history(code: str):
        try:
            entries = service.hours_history(code)
        except DomainError as e:
            return error_response(e)
        return jsonify(
            [
                {
                    "date": entry.date.isoformat(),
                    "start_time": to_iso(entry.start_time),
                    "end_time": to_iso(entry.end_time),
                    "worked_hours": entry.worked_hours,
                }
                for entry in entries
            ]
        )

    @app.route("/attendance/<code>/total", methods=["GET"], endpoint="shift_total_today")
    def shift_total_today(code: str):
        try:
            total = service.total_today(code)
        except DomainError as e:
            return error_response(e)
        return jsonify({"total_worked": total})
