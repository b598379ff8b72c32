from __future__ import annotations

from flask import jsonify

from ..core.exceptions import ConflictError, DomainError, NotFoundError, ValidationError

_STATUS = {
    ValidationError: 400,
    NotFoundError: 404,
    ConflictError: 409,
}


def error_response(err: DomainError):
    status = next((code for cls, code in _STATUS.items() if isinstance(err, cls)), 400)
    return jsonify({"error": str(err)}), status
