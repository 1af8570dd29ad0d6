from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional

from flask import Flask, jsonify, request

from ..core.exceptions import DuplicateIdentifier, EmployeeNotFound, PersistenceFailure, ValidationError
from .datetime_utils import parse_iso_date

logger = logging.getLogger(__name__)


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def require_date(value: Any, field_name: str) -> date:
    try:
        return parse_iso_date(str(value or ""))
    except ValueError:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")


def optional_date_arg(name: str) -> Optional[date]:
    raw = request.args.get(name)
    return require_date(raw, name) if raw else None


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return fail(str(e), 400)

    @app.errorhandler(EmployeeNotFound)
    def _not_found(e: EmployeeNotFound):
        return fail(str(e), 404)

    @app.errorhandler(DuplicateIdentifier)
    def _duplicate(e: DuplicateIdentifier):
        return fail(str(e), 409)

    @app.errorhandler(PersistenceFailure)
    def _persistence(e: PersistenceFailure):
        logger.error("Request %s %s failed to persist: %s", request.method, request.path, e)
        return fail("Changes could not be saved", 500)
