import json

import pytest

from pistonctl.domain.exceptions import ConfigurationError
from pistonctl.enums import PistonStatus
from pistonctl.hardware.pistons import SimulatedGrid, SimulatedPiston, load_world


def test_status_follows_position_and_velocity():
    piston = SimulatedPiston("P", max_limit=1.0)
    assert piston.status is PistonStatus.RETRACTED

    piston.velocity = 1.0
    piston.step(0.5)
    assert piston.status is PistonStatus.EXTENDING
    assert piston.position == pytest.approx(0.5)

    piston.step(1.0)
    assert piston.position == 1.0
    assert piston.status is PistonStatus.EXTENDED

    piston.velocity = -1.0
    piston.step(0.25)
    assert piston.status is PistonStatus.RETRACTING


def test_disabled_piston_does_not_move():
    piston = SimulatedPiston("P", velocity=1.0, enabled=False)

    piston.step(1.0)

    assert piston.position == 0.0
    assert not piston.is_working


def test_grid_remove_closes_handle():
    piston = SimulatedPiston("P")
    grid = SimulatedGrid([piston])

    grid.remove(piston)

    assert piston.closed
    assert not piston.is_working
    assert grid.get_pistons() == []


def test_load_world(tmp_path):
    path = tmp_path / "world.json"
    path.write_text(
        json.dumps(
            {
                "pistons": [
                    {"name": "A", "custom_data": "[Piston Settings]", "max_limit": 3.0, "position": 3.0},
                    {"name": "B", "damaged": True},
                ]
            }
        ),
        encoding="utf-8",
    )

    grid = load_world(path)

    a, b = grid.get_pistons()
    assert a.status is PistonStatus.EXTENDED
    assert a.custom_data == "[Piston Settings]"
    assert not b.is_working


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        json.dumps({"pistons": [{"custom_data": "missing name"}]}),
        json.dumps({"pistons": [{"name": "A", "min_limit": 5.0, "max_limit": 2.0}]}),
    ],
)
def test_load_world_rejects_bad_files(tmp_path, content):
    path = tmp_path / "world.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_world(path)


def test_load_world_missing_file(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        load_world(tmp_path / "absent.json")
