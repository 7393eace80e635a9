"""
Pistons API
Status, registry listing, terminal commands and manual ticking.
"""

import logging

from pydantic import ValidationError as PydanticValidationError

from pistonctl.domain.exceptions import ConflictError, NotFoundError, ValidationError
from pistonctl.schemas.pistons import CommandRequest, PistonEntryResponse, StatusResponse, TickRequest
from pistonctl.utils.http import safe_route

from .._common import get_container, get_json, success
from . import pistons_api

logger = logging.getLogger(__name__)


def _status_payload(container) -> dict:
    program = container.program
    return StatusResponse(
        pistons_monitored=len(program.registry),
        schedule_state=program.scheduler.state,
        last_message=program.last_message,
        last_run_ms=program.last_run_ms,
        interval_ms=program.interval_ms,
        runs=program.runs,
        text=program.output,
    ).model_dump(mode="json")


def _entry_payload(entry) -> dict:
    piston = entry.piston
    return PistonEntryResponse(
        status=None if piston.closed else piston.status,
        velocity=piston.velocity,
        working=piston.is_working,
        **entry.to_dict(),
    ).model_dump(mode="json")


def _validate(model, payload: dict):
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(
            f"Invalid {model.__name__} payload",
            detail={"errors": exc.errors(include_url=False, include_context=False)},
        ) from exc


@pistons_api.get("/status")
@safe_route("Failed to read piston status")
def get_status():
    """Current status block and counters."""
    container = get_container()
    data = _status_payload(container)
    data["runner"] = container.runner.get_status()
    return success(data)


@pistons_api.get("")
@safe_route("Failed to list pistons")
def list_pistons():
    """Pistons currently under control, in discovery order."""
    registry = get_container().program.registry
    return success([_entry_payload(entry) for entry in registry])


@pistons_api.get("/<name>")
@safe_route("Failed to read piston")
def get_piston(name: str):
    registry = get_container().program.registry
    entry = next((e for e in registry if e.piston.name == name), None)
    if entry is None:
        raise NotFoundError(f"Piston {name!r} is not under control")
    return success(_entry_payload(entry))


@pistons_api.post("/command")
@safe_route("Failed to run command")
def run_command():
    """
    Issue a terminal command.

    Request body:
        {"command": "reset" | "clear"}
    """
    body = _validate(CommandRequest, get_json())
    container = get_container()
    container.run_command(body.command, actor="api")
    return success(_status_payload(container))


@pistons_api.post("/tick")
@safe_route("Failed to advance ticks")
def advance_ticks():
    """
    Advance the runtime by a number of base ticks.

    Request body:
        {"ticks": 10}
    """
    body = _validate(TickRequest, get_json())
    container = get_container()
    if container.runner.is_running():
        raise ConflictError("Tick runner is running in the background")
    fired = container.runner.run_ticks(body.ticks)
    data = _status_payload(container)
    data["fired"] = fired
    return success(data)
