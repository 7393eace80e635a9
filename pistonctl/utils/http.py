"""
JSON envelopes for the pistons API.

Every body has the shape ``{"ok": bool, "data": ..., "error": ...}``. On
failure ``error`` carries ``status``, ``message``, ``details`` and a
``timestamp``; ``data`` is null.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable

from flask import Response, jsonify

from pistonctl.domain.exceptions import PistonCtlError
from pistonctl.utils.time import iso_now

logger = logging.getLogger(__name__)


def _envelope(ok: bool, data: Any, error: dict | None, status: int) -> Response:
    response = jsonify({"ok": ok, "data": data, "error": error})
    response.status_code = status
    return response


def success_response(data: dict | list | None = None, status: int = 200) -> Response:
    return _envelope(True, data, None, status)


def error_response(message: str, status: int = 400, *, details: dict | None = None) -> Response:
    error = {
        "status": status,
        "message": message,
        "details": details or {},
        "timestamp": iso_now(),
    }
    return _envelope(False, None, error, status)


def safe_route(context: str) -> Callable:
    """
    Turn failures inside a route into error envelopes.

    A :class:`PistonCtlError` below 500 is the caller's fault, so its message
    and detail are returned as they are. Server-side failures are logged with
    their traceback and answered with ``context`` only.
    """

    def decorator(fn: Callable) -> Callable:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Response:
            try:
                return fn(*args, **kwargs)
            except PistonCtlError as exc:
                if exc.http_status < 500:
                    logger.info("%s: %s", context, exc)
                    return error_response(str(exc) or context, exc.http_status, details=exc.detail)
                logger.exception(context)
                return error_response(context, exc.http_status)
            except Exception:
                logger.exception(context)
                return error_response(context, 500)

        return wrapper

    return decorator
