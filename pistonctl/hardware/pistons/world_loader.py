"""Build a SimulatedGrid from a JSON world file."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from pistonctl.domain.exceptions import ConfigurationError
from pistonctl.hardware.pistons.simulated import SimulatedGrid, SimulatedPiston
from pistonctl.schemas.pistons import WorldFile

logger = logging.getLogger(__name__)


def build_grid(world: WorldFile) -> SimulatedGrid:
    return SimulatedGrid(
        SimulatedPiston(
            spec.name,
            spec.custom_data,
            position=spec.position,
            min_limit=spec.min_limit,
            max_limit=spec.max_limit,
            velocity=spec.velocity,
            enabled=spec.enabled,
            damaged=spec.damaged,
        )
        for spec in world.pistons
    )


def load_world(path: str | Path) -> SimulatedGrid:
    """
    Load a world file.

    Raises:
        ConfigurationError: file missing, not JSON, or failing schema validation
    """
    world_path = Path(path)
    try:
        raw = json.loads(world_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ConfigurationError(f"World file not found: {world_path}") from None
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigurationError(f"World file unreadable: {world_path}", detail={"reason": str(exc)}) from exc

    try:
        world = WorldFile.model_validate(raw)
    except PydanticValidationError as exc:
        raise ConfigurationError(
            f"Invalid world file: {world_path}",
            detail={"errors": exc.errors(include_url=False, include_context=False)},
        ) from exc

    grid = build_grid(world)
    logger.info("Loaded %d piston(s) from %s", len(grid), world_path)
    return grid
