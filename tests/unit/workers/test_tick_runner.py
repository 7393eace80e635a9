"""
Tests for TickRunner: which sources fire on which base tick, and the
end-to-end oscillation of a simulated piston with both auto flags set.
"""

import time

from pistonctl.enums import PistonStatus, ScheduleState, UpdateSource
from pistonctl.hardware.pistons import SimulatedGrid, SimulatedPiston
from pistonctl.workers.program import PistonProgram
from pistonctl.workers.tick_runner import TickRunner


def test_first_tick_fires_once_then_every_tenth(runner):
    fired = [runner.step() for _ in range(21)]

    assert fired[0] == UpdateSource.ONCE
    assert [i for i, source in enumerate(fired) if source] == [0, 10, 20]
    assert all(fired[i] == UpdateSource.UPDATE10 for i in (10, 20))


def test_idle_runner_never_fires():
    empty = SimulatedGrid()
    runner = TickRunner(PistonProgram(empty), empty)

    fired = runner.run_ticks(50)

    assert fired == 1
    assert runner.program.scheduler.state is ScheduleState.IDLE
    assert runner.firings == 1


def test_command_wakes_idle_runner():
    grid = SimulatedGrid()
    runner = TickRunner(PistonProgram(grid), grid)
    runner.run_ticks(5)

    grid.add(SimulatedPiston("Late", "[Piston Settings]\nAutoExtend=true"))
    runner.submit_command("reset")

    assert runner.program.scheduler.state is ScheduleState.PERIODIC
    assert runner.run_ticks(10) == 1


def test_auto_piston_oscillates_between_limits():
    piston = SimulatedPiston(
        "Osc",
        "[Piston Settings]\nExtendSpeed=1.0\nRetractSpeed=1.0\nAutoExtend=true\nAutoRetract=true",
        max_limit=1.0,
    )
    grid = SimulatedGrid([piston])
    runner = TickRunner(PistonProgram(grid), grid, base_tick_seconds=0.1)

    seen = set()
    for _ in range(100):
        runner.step()
        seen.add(piston.status)

    assert {PistonStatus.EXTENDING, PistonStatus.EXTENDED, PistonStatus.RETRACTING, PistonStatus.RETRACTED} <= seen


def test_piston_without_auto_flags_holds_retracted():
    piston = SimulatedPiston("Hold", "[Piston Settings]", max_limit=1.0)
    grid = SimulatedGrid([piston])
    runner = TickRunner(PistonProgram(grid), grid, base_tick_seconds=0.1)

    runner.run_ticks(30)

    assert piston.status is PistonStatus.RETRACTED
    assert piston.velocity == -0.5
    assert piston.position == 0.0


def test_removed_piston_is_dropped(runner, grid):
    runner.run_ticks(1)
    assert len(runner.program.registry) == 2

    grid.remove(grid.get("Lift"))
    runner.run_ticks(10)

    assert [e.piston.name for e in runner.program.registry] == ["Hold"]
    assert "removed from grid" in runner.program.last_message


def test_background_thread_start_stop(runner):
    runner.base_tick_seconds = 0.001
    runner.start()
    try:
        deadline = time.time() + 2.0
        while runner.tick_count < 15 and time.time() < deadline:
            time.sleep(0.005)
    finally:
        runner.stop()

    assert not runner.is_running()
    assert runner.tick_count >= 15
    assert runner.program.scheduler.state is ScheduleState.PERIODIC


def test_status_reports_wanted_sources(runner):
    assert runner.get_status()["update_frequency"] == ["ONCE"]

    runner.step()

    status = runner.get_status()
    assert status["update_frequency"] == ["UPDATE10"]
    assert status["tick_count"] == 1
    assert status["firings"] == 1
