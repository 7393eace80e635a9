"""
Piston Schemas
==============

Pydantic models for the simulated world file and the pistons API.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from pistonctl.enums import PistonStatus, ScheduleState


# ============================================================================
# World File Schemas
# ============================================================================


class SimulatedPistonSpec(BaseModel):
    """One piston in a world file"""

    name: str = Field(..., min_length=1, max_length=100, description="Piston name")
    custom_data: str = Field(default="", description="Free-form annotation text")
    position: float = Field(default=0.0, description="Current extension (m)")
    min_limit: float = Field(default=0.0, ge=0.0, description="Lowest position (m)")
    max_limit: float = Field(default=10.0, gt=0.0, description="Highest position (m)")
    velocity: float = Field(default=0.0, description="Initial velocity (m/s)")
    enabled: bool = Field(default=True, description="Powered on")
    damaged: bool = Field(default=False, description="Non-functional")

    @model_validator(mode="after")
    def _check_limits(self):
        if self.min_limit >= self.max_limit:
            raise ValueError("min_limit must be lower than max_limit")
        if not self.min_limit <= self.position <= self.max_limit:
            raise ValueError("position must lie between min_limit and max_limit")
        return self


class WorldFile(BaseModel):
    """A simulated grid loaded from JSON"""

    pistons: List[SimulatedPistonSpec] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "pistons": [
                    {
                        "name": "Lift Piston",
                        "custom_data": "[Piston Settings]\nAutoExtend=true\nAutoRetract=true",
                        "position": 0.0,
                        "max_limit": 10.0,
                    }
                ]
            }
        }
    )


# ============================================================================
# API Schemas
# ============================================================================


class CommandRequest(BaseModel):
    """Request model for issuing a terminal command"""

    command: str = Field(default="", max_length=200, description="Argument string, e.g. 'reset'")


class TickRequest(BaseModel):
    """Request model for advancing the runtime manually"""

    ticks: int = Field(default=1, ge=1, le=1000, description="Number of base ticks to run")


class PistonEntryResponse(BaseModel):
    """A controlled piston"""

    name: str
    status: Optional[PistonStatus] = None
    velocity: float
    working: bool
    retract_speed: float
    extend_speed: float
    auto_retract: bool
    auto_extend: bool


class StatusResponse(BaseModel):
    """Snapshot of the controller"""

    pistons_monitored: int
    schedule_state: ScheduleState
    last_message: str
    last_run_ms: float
    interval_ms: float
    runs: int
    text: str
