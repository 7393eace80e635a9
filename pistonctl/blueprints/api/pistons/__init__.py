"""Pistons API module; imports register the endpoints."""

from __future__ import annotations

from flask import Blueprint

pistons_api = Blueprint("pistons_api", __name__, url_prefix="/api/pistons")

from . import routes  # noqa: E402

__all__ = ["pistons_api", "routes"]
