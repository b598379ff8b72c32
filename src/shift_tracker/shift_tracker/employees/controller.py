from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import to_iso
from ..common.responses import error_response
from ..container import Container
from ..core.exceptions import DomainError, ValidationError
from .model import Employee
from .national_id import format_national_id
from .service import UNSET


def _employee_json(e: Employee) -> dict:
    return {
        "id": e.employee_id,
        "name": e.name,
        "national_id": format_national_id(e.national_id),
        "code": e.code,
        "hired_at": to_iso(e.hired_at),
        "terminated_at": to_iso(e.terminated_at),
        "created_at": to_iso(e.created_at),
    }


def _json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("request body must be a JSON object")
    return data


def _optional_field(payload: dict, key: str):
    """Value from the payload, or UNSET when the key is absent."""
    return payload[key] if key in payload else UNSET


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/employees", methods=["POST"], endpoint="employees_create")
    def employees_create():
        try:
            data = _json_body()
            employee = service.create(
                name=data.get("name"),
                national_id=data.get("national_id") or "",
                hired_at=data.get("hired_at"),
                terminated_at=data.get("terminated_at"),
            )
        except DomainError as e:
            return error_response(e)
        return jsonify(_employee_json(employee)), 201

    @app.route("/employees", methods=["GET"], endpoint="employees_list")
    def employees_list():
        return jsonify([_employee_json(e) for e in service.list_all()])

    @app.route("/employees/<employee_id>", methods=["GET"], endpoint="employees_get")
    def employees_get(employee_id: str):
        try:
            employee = service.get(employee_id)
        except DomainError as e:
            return error_response(e)
        return jsonify(_employee_json(employee))

    @app.route("/employees/<employee_id>", methods=["PATCH"], endpoint="employees_update")
    def employees_update(employee_id: str):
        try:
            data = _json_body()
            if "national_id" in data or "code" in data:
                raise ValidationError("national_id and code cannot be changed")
            employee = service.update(
                employee_id,
                name=_optional_field(data, "name"),
                hired_at=_optional_field(data, "hired_at"),
                terminated_at=_optional_field(data, "terminated_at"),
            )
        except DomainError as e:
            return error_response(e)
        return jsonify(_employee_json(employee))

    @app.route("/employees/<employee_id>/terminate", methods=["POST"], endpoint="employees_terminate")
    def employees_terminate(employee_id: str):
        try:
            employee = service.terminate(employee_id)
        except DomainError as e:
            return error_response(e)
        return jsonify(_employee_json(employee))

    @app.route("/employees/<employee_id>", methods=["DELETE"], endpoint="employees_delete")
    def employees_delete(employee_id: str):
        try:
            service.delete(employee_id)
        except DomainError as e:
            return error_response(e)
        return "", 204
