import random
from dataclasses import dataclass
from enum import Enum

# European single-zero wheel, clockwise from zero
WHEEL_SEQUENCE = (
    0, 32, 15, 19, 4, 21, 2, 25, 17, 34, 6, 27, 13, 36, 11, 30, 8, 23, 10,
    5, 24, 16, 33, 1, 20, 14, 31, 9, 22, 18, 29, 7, 28, 12, 35, 3, 26,
)

RED_NUMBERS = frozenset(
    [
        1,
        3,
        5,
        7,
        9,
        12,
        14,
        16,
        18,
        19,
        21,
        23,
        25,
        27,
        30,
        32,
        34,
        36,
    ]
)

COLORS = {
    0: "green",
    **{n: "red" if n in RED_NUMBERS else "black" for n in range(1, 37)},
}


class BetType(str, Enum):
    STRAIGHT = "STRAIGHT"
    RED = "RED"
    BLACK = "BLACK"
    EVEN = "EVEN"
    ODD = "ODD"
    LOW = "LOW"
    HIGH = "HIGH"

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                return None
        return None


PAYOUTS = {
    BetType.STRAIGHT: 35,
    BetType.RED: 1,
    BetType.BLACK: 1,
    BetType.EVEN: 1,
    BetType.ODD: 1,
    BetType.LOW: 1,
    BetType.HIGH: 1,
}

BET_LABELS = {
    BetType.RED: "RED",
    BetType.BLACK: "BLACK",
    BetType.EVEN: "EVEN",
    BetType.ODD: "ODD",
    BetType.LOW: "1-18",
    BetType.HIGH: "19-36",
}


@dataclass(frozen=True)
class Bet:
    bet_type: BetType
    target: object
    amount: int

    @property
    def label(self):
        if self.target is None:
            return BET_LABELS.get(self.bet_type, self.bet_type.value)
        return str(self.target)


def color_of(number: int) -> str:
    try:
        return COLORS[number]
    except KeyError:
        raise ValueError(f"{number!r} is not on a European wheel") from None


def payout_for(bet: Bet) -> int:
    return PAYOUTS[bet.bet_type]


def is_winner(bet: Bet, number: int) -> bool:
    t = bet.bet_type
    if t is BetType.STRAIGHT:
        return bet.target == number
    if t is BetType.RED:
        return color_of(number) == "red"
    if t is BetType.BLACK:
        return color_of(number) == "black"
    # Zero is neither even nor odd
    if t is BetType.EVEN:
        return number != 0 and number % 2 == 0
    if t is BetType.ODD:
        return number % 2 == 1
    if t is BetType.LOW:
        return 1 <= number <= 18
    if t is BetType.HIGH:
        return 19 <= number <= 36
    return False


def calculate_payout(bet: Bet, number: int) -> int:
    """Chips returned for ``bet``: stake plus winnings, or 0 on a loss."""
    if is_winner(bet, number):
        return bet.amount + bet.amount * payout_for(bet)
    return 0


class RouletteWheel:
    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()

    def spin(self):
        res = self.rng.choice(WHEEL_SEQUENCE)
        return res, COLORS[res]

    def next_rotation(self, current: float) -> float:
        # five full turns plus a random offset
        return current + 360 * 5 + self.rng.random() * 360
