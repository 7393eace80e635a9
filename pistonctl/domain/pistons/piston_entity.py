"""
Piston Domain Entities

Domain model for controlled pistons with dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol as TypingProtocol

from pistonctl.constants import PistonDefaults
from pistonctl.enums.device import PistonStatus


class PistonHandle(TypingProtocol):
    """
    A piston owned by the host world.

    The controller only reads status flags and writes ``velocity``; it never
    creates or destroys pistons.
    """

    name: str
    custom_data: str
    velocity: float

    @property
    def closed(self) -> bool: ...

    @property
    def is_working(self) -> bool: ...

    @property
    def status(self) -> PistonStatus: ...


@dataclass
class PistonControlEntry:
    """A piston together with the parameters resolved from its settings block."""

    piston: PistonHandle
    retract_speed: float = PistonDefaults.RETRACT_SPEED
    extend_speed: float = PistonDefaults.EXTEND_SPEED
    auto_retract: bool = PistonDefaults.AUTO_RETRACT
    auto_extend: bool = PistonDefaults.AUTO_EXTEND

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary (for API responses)."""
        return {
            "name": self.piston.name,
            "retract_speed": self.retract_speed,
            "extend_speed": self.extend_speed,
            "auto_retract": self.auto_retract,
            "auto_extend": self.auto_extend,
        }
