"""Centralized exception hierarchy for pistonctl.

The control loop itself never raises: malformed settings, removed pistons and
unknown commands are all resolved by branching. These exceptions belong to the
outer surfaces (world loading, HTTP handlers, CLI).

Blueprint-level error handling (see ``pistonctl/utils/http.safe_route``) maps
these to the correct HTTP status codes automatically.

Hierarchy
---------
::

    PistonCtlError (base, maps to 500)
    ├── ValidationError      (400, bad input from caller)
    ├── NotFoundError        (404, piston does not exist)
    ├── ConflictError        (409, runtime state conflict)
    └── ConfigurationError   (500, missing / invalid config or world file)
"""

from __future__ import annotations


class PistonCtlError(Exception):
    """Base exception for all pistonctl errors.

    Parameters
    ----------
    message:
        Human-readable description.
    detail:
        Optional machine-readable context dict attached to the error for
        structured logging.
    """

    http_status: int = 500

    def __init__(self, message: str = "", *, detail: dict | None = None) -> None:
        super().__init__(message)
        self.detail = detail or {}


class ValidationError(PistonCtlError):
    """Caller supplied invalid or incomplete input (HTTP 400)."""

    http_status: int = 400


class NotFoundError(PistonCtlError):
    """Requested piston does not exist (HTTP 404)."""

    http_status: int = 404


class ConflictError(PistonCtlError):
    """Operation conflicts with the running runtime (HTTP 409)."""

    http_status: int = 409


class ConfigurationError(PistonCtlError):
    """Missing or invalid application configuration (HTTP 500)."""

    http_status: int = 500
