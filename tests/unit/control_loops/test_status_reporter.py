from pistonctl.constants import ACTIVITY_FRAMES
from pistonctl.control_loops import ActivityIndicator, LastMessage, StatusReporter


def test_last_message_overwrites_and_clears():
    message = LastMessage()
    assert message.text == ""

    message.set("first")
    message.set("second")
    assert message.text == "second"

    message.clear()
    assert not message


def test_activity_indicator_wraps():
    indicator = ActivityIndicator()

    frames = [indicator.advance() for _ in range(len(ACTIVITY_FRAMES) + 2)]

    assert frames[: len(ACTIVITY_FRAMES)] == list(ACTIVITY_FRAMES)
    assert frames[-2:] == ["    ", ".   "]
    assert indicator.index == 2


def test_render_without_message():
    reporter = StatusReporter()

    text = reporter.render(3, 0.1234, 166.6)

    assert text == (
        "-- Configurable Pistons --\n"
        "\n"
        "  Pistons Monitored: 3\n"
        "\n"
        "  - Stats -\n"
        "  Runtime 0.123 ms every 167 ms\n"
        "\n"
        "    "
    )


def test_render_with_message_and_rotating_glyph():
    reporter = StatusReporter()
    reporter.set_message("Piston cache updated...")

    first = reporter.render(1, 0.0, 0.0)
    second = reporter.render(1, 0.0, 0.0)

    assert "\n  - Message -\nPiston cache updated...\n\n\n" in first
    assert first.endswith("    ")
    assert second.endswith(".   ")
