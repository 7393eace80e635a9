from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from infrastructure.logging.audit import AuditLogger
from pistonctl.config import AppConfig
from pistonctl.control_loops.discovery import SettingsDefaults
from pistonctl.hardware.pistons import SimulatedGrid, load_world
from pistonctl.workers.program import PistonProgram
from pistonctl.workers.tick_runner import TickRunner

logger = logging.getLogger(__name__)


@dataclass
class PistonContainer:
    """Aggregate and manage the controller runtime."""

    config: AppConfig
    grid: SimulatedGrid
    program: PistonProgram
    runner: TickRunner
    audit_logger: Optional[AuditLogger] = None

    @classmethod
    def build(cls, config: AppConfig, *, grid: SimulatedGrid | None = None) -> "PistonContainer":
        """Construct the runtime.

        Args:
            config: Application configuration
            grid: Host world to control; loaded from ``config.world_file`` when omitted
        """
        if grid is None:
            grid = load_world(config.world_file) if config.world_file else SimulatedGrid()

        program = PistonProgram(grid, defaults=SettingsDefaults.from_config(config))
        runner = TickRunner(
            program,
            grid,
            base_tick_seconds=config.base_tick_seconds,
            simulate=config.simulate_motion,
        )
        audit_logger = AuditLogger(config.audit_log_path) if config.audit_log_path else None

        logger.info("PistonContainer built (%d piston(s) in world)", len(grid))
        return cls(config=config, grid=grid, program=program, runner=runner, audit_logger=audit_logger)

    def run_command(self, argument: str, *, actor: str = "terminal") -> str:
        """Fire a terminal command and record it in the audit trail."""
        output = self.runner.submit_command(argument)
        if self.audit_logger is not None:
            self.audit_logger.log_event(
                actor=actor,
                action="command",
                resource="pistons",
                outcome="ok",
                argument=argument,
                pistons_monitored=len(self.program.registry),
                schedule_state=self.program.scheduler.state.value,
            )
        return output

    def shutdown(self) -> None:
        """Release resources before process exit."""
        try:
            self.runner.stop()
        except RuntimeError as e:
            logger.warning(f"Failed to stop TickRunner: {e}")
        logger.info("PistonContainer shut down")
