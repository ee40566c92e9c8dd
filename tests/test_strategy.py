import pytest

from patternkit.strategy import Bicycle, Bike, Car, ChooseStrategy, main


@pytest.mark.parametrize(
    "way, name", [(Bicycle, "Bicycle"), (Bike, "Bike"), (Car, "Car")]
)
def test_each_way_names_itself(way, name):
    assert way().go_to_airport(200) == f"If you have 200, go to airport via {name}."


def test_start_journey_lines():
    strategy = ChooseStrategy(Bicycle())
    assert strategy.start_journey(200) == [
        "You have started your journey!!",
        "If you have 200, go to airport via Bicycle.",
    ]


def test_switching_strategy_changes_journey():
    strategy = ChooseStrategy(Bicycle())
    strategy.way = Car()
    assert strategy.start_journey(1000)[1] == Car().go_to_airport(1000)


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "You have started your journey!!",
        "If you have 200, go to airport via Bicycle.",
        "You have started your journey!!",
        "If you have 500, go to airport via Bike.",
        "You have started your journey!!",
        "If you have 1000, go to airport via Car.",
    ]