from dataclasses import dataclass, field
from typing import Optional, Tuple

from .game_logic import Bet

HISTORY_SIZE = 10
WELCOME_MESSAGE = "Welcome to Monte Carlo Royale. Place your bets!"


@dataclass(frozen=True)
class RoundResult:
    outcome: int
    color: str
    bets: Tuple[Bet, ...]
    winning_bets: Tuple[Bet, ...]
    total_winnings: int

    @property
    def won(self) -> bool:
        return self.total_winnings > 0


@dataclass(frozen=True)
class SessionState:
    """Read-only snapshot of a game session, safe to hand to a renderer."""

    balance: int
    active_bets: Tuple[Bet, ...] = ()
    is_spinning: bool = False
    last_result: Optional[int] = None
    history: Tuple[int, ...] = ()
    message: str = WELCOME_MESSAGE
    rotation: float = 0.0
    last_round: Optional[RoundResult] = field(default=None, compare=False)

    @property
    def total_bet(self) -> int:
        return sum(b.amount for b in self.active_bets)
