import pytest

from roulette_cli.engine import GameSession
from roulette_cli.game_logic import RouletteWheel


class FixedRandom:
    """Random source that lands on the given numbers in order, then repeats the last one."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)

    def choice(self, seq):
        if len(self.outcomes) > 1:
            return self.outcomes.pop(0)
        return self.outcomes[0]

    def random(self):
        return 0.5


@pytest.fixture
def make_session():
    def _make(*outcomes, balance=1000):
        wheel = RouletteWheel(FixedRandom(*outcomes)) if outcomes else None
        return GameSession(starting_balance=balance, spin_seconds=0, wheel=wheel)

    return _make
