"""
Tests for PistonDriver: the velocity table, eviction of removed pistons and
skipping of non-working pistons.
"""

import pytest

from pistonctl.constants import Messages
from pistonctl.control_loops import PistonDriver, StatusReporter, commanded_velocity
from pistonctl.domain.pistons import PistonControlEntry, PistonRegistry
from pistonctl.enums import PistonStatus


def _entry(piston, **params):
    params.setdefault("retract_speed", 2.0)
    params.setdefault("extend_speed", 1.0)
    return PistonControlEntry(piston=piston, **params)


@pytest.mark.parametrize(
    "status, auto_retract, auto_extend, expected",
    [
        (PistonStatus.EXTENDED, False, False, 1.0),
        (PistonStatus.EXTENDED, False, True, 1.0),
        (PistonStatus.EXTENDED, True, False, -2.0),
        (PistonStatus.EXTENDED, True, True, -2.0),
        (PistonStatus.RETRACTED, False, False, -2.0),
        (PistonStatus.RETRACTED, True, False, -2.0),
        (PistonStatus.RETRACTED, False, True, 1.0),
        (PistonStatus.RETRACTED, True, True, 1.0),
        (PistonStatus.EXTENDING, False, False, 1.0),
        (PistonStatus.EXTENDING, True, True, 1.0),
        (PistonStatus.RETRACTING, False, False, -2.0),
        (PistonStatus.RETRACTING, True, True, -2.0),
    ],
)
def test_commanded_velocity_table(make_piston, status, auto_retract, auto_extend, expected):
    entry = _entry(make_piston(), auto_retract=auto_retract, auto_extend=auto_extend)

    assert commanded_velocity(entry, status) == expected


@pytest.fixture
def reporter():
    return StatusReporter()


def test_tick_writes_velocity_every_pass(make_piston, reporter):
    piston = make_piston(status=PistonStatus.EXTENDING)
    registry = PistonRegistry([_entry(piston)])
    driver = PistonDriver(registry, reporter)

    driver.tick()
    driver.tick()

    assert piston.writes == [1.0, 1.0]


def test_non_working_piston_is_not_written(make_piston, reporter):
    off = make_piston(name="Off", status=PistonStatus.EXTENDING, working=False, velocity=0.3)
    on = make_piston(name="On", status=PistonStatus.RETRACTING)
    driver = PistonDriver(PistonRegistry([_entry(off), _entry(on)]), reporter)

    result = driver.tick()

    assert off.writes == []
    assert off.velocity == 0.3
    assert on.writes == [-2.0]
    assert result.skipped == 1
    assert result.commanded == 1


def test_closed_piston_is_evicted_with_message(make_piston, reporter):
    gone = make_piston(name="Gone")
    gone.closed = True
    driver = PistonDriver(PistonRegistry([_entry(gone)]), reporter)

    result = driver.tick()

    assert len(driver.registry) == 0
    assert result.evicted == 1
    assert reporter.last_message.text == Messages.PISTON_REMOVED
    assert gone.writes == []


def test_eviction_stops_the_pass_until_next_tick(make_piston, reporter):
    first = make_piston(name="First", status=PistonStatus.EXTENDING)
    gone = make_piston(name="Gone")
    gone.closed = True
    last = make_piston(name="Last", status=PistonStatus.EXTENDING)
    registry = PistonRegistry([_entry(first), _entry(gone), _entry(last)])
    driver = PistonDriver(registry, reporter)

    driver.tick()

    assert first.writes == [1.0]
    assert last.writes == []
    assert [e.piston.name for e in registry] == ["First", "Last"]

    driver.tick()

    assert first.writes == [1.0, 1.0]
    assert last.writes == [1.0]


def test_tick_on_empty_registry_is_noop(reporter):
    driver = PistonDriver(PistonRegistry(), reporter)

    result = driver.tick()

    assert (result.commanded, result.skipped, result.evicted) == (0, 0, 0)
    assert reporter.last_message.text == ""
