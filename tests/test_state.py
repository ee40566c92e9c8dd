import pytest

from patternkit.state import GreenState, RedState, TrafficLight, YellowState, main


@pytest.mark.parametrize(
    "start, message, after",
    [
        (RedState, "Red -> Green", GreenState),
        (GreenState, "Green -> Yellow", YellowState),
        (YellowState, "Yellow -> Red", RedState),
    ],
)
def test_single_transition(start, message, after):
    light = TrafficLight(start())
    assert light.request_change() == message
    assert type(light.state) is after


def test_three_changes_return_to_start():
    light = TrafficLight(GreenState())
    messages = [light.request_change() for _ in range(3)]
    assert messages == ["Green -> Yellow", "Yellow -> Red", "Red -> Green"]
    assert type(light.state) is GreenState


def test_each_change_installs_new_state_object():
    start = RedState()
    light = TrafficLight(start)
    light.request_change()
    light.request_change()
    light.request_change()
    assert type(light.state) is RedState
    assert light.state is not start


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Red -> Green",
        "Green -> Yellow",
        "Yellow -> Red",
        "Red -> Green",
    ]