from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..core.exceptions import (
    CascadeIncomplete,
    DomainError,
    EmployeeLookupFailed,
    InvalidTransition,
    MalformedTime,
    StoreUnavailable,
    ValidationFailed,
)

logger = logging.getLogger(__name__)

_STATUS_CODES = (
    (ValidationFailed, 400),
    (MalformedTime, 400),
    (InvalidTransition, 409),
    (EmployeeLookupFailed, 404),
    (CascadeIncomplete, 503),
    (StoreUnavailable, 503),
)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def _domain_error(e: DomainError):
        status = next((code for cls, code in _STATUS_CODES if isinstance(e, cls)), 400)
        if isinstance(e, EmployeeLookupFailed) and e.transient:
            status = 503
        body = {"success": False, "error": type(e).__name__, "message": str(e)}
        if isinstance(e, ValidationFailed):
            body["errors"] = e.errors
        if isinstance(e, CascadeIncomplete):
            body["last_written_date"] = e.last_written_date.isoformat() if e.last_written_date else None
        if status >= 500:
            logger.warning("request_failed", extra={"error": type(e).__name__, "reason": str(e)})
        return jsonify(body), status
