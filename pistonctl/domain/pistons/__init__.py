"""Piston domain: handle protocol, control entries and the registry."""

from pistonctl.domain.pistons.piston_entity import PistonControlEntry, PistonHandle
from pistonctl.domain.pistons.registry import PistonRegistry

__all__ = [
    "PistonControlEntry",
    "PistonHandle",
    "PistonRegistry",
]
