"""
Schemas Module
==============

Pydantic models for world files and HTTP request/response validation.
"""

from pistonctl.schemas.pistons import (
    CommandRequest,
    PistonEntryResponse,
    SimulatedPistonSpec,
    StatusResponse,
    TickRequest,
    WorldFile,
)

__all__ = [
    "CommandRequest",
    "PistonEntryResponse",
    "SimulatedPistonSpec",
    "StatusResponse",
    "TickRequest",
    "WorldFile",
]
