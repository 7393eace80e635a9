"""
Blueprint Common Utilities
==========================

Shared helper functions for the API blueprints.

Usage:
    from pistonctl.blueprints.api._common import get_container, get_json, success
"""
from __future__ import annotations

import logging

from flask import current_app, request

from pistonctl.utils.http import success_response

logger = logging.getLogger("api._common")


def get_container():
    """
    Get the piston container from Flask app config.

    Raises:
        RuntimeError: If container is not configured
    """
    container = current_app.config.get("CONTAINER")
    if not container:
        raise RuntimeError("PistonContainer not found in app config")
    return container


def get_json() -> dict:
    """Get JSON request body, or an empty dict if absent or unparsable."""
    return request.get_json(silent=True) or {}


def success(data: dict | list | None = None, status: int = 200):
    """Flask Response with format: {"ok": true, "data": ..., "error": null}"""
    return success_response(data, status)
