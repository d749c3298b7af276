import logging
from enum import Enum

from .game_logic import Bet, BetType

logger = logging.getLogger(__name__)


class LedgerError(Exception):
    """Raised when a ledger operation would break balance conservation."""


class BetStatus(Enum):
    ACCEPTED = "accepted"
    LOCKED = "locked"
    INVALID = "invalid"
    INSUFFICIENT_FUNDS = "insufficient_funds"


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


class BetLedger:
    """Player balance plus the wagers currently on the table.

    Stakes leave the balance when a bet is placed and come back only through
    ``refund_all`` or ``settle``, so ``balance + total_staked`` is constant
    between rounds.
    """

    def __init__(self, balance: int):
        if not _is_int(balance) or balance < 0:
            raise LedgerError(f"starting balance must be a non-negative int, got {balance!r}")
        self.balance = balance
        self.bets = []
        self.locked = False

    @property
    def total_staked(self) -> int:
        return sum(b.amount for b in self.bets)

    def place(self, bet_type, target, amount):
        if self.locked:
            logger.debug("Bet rejected, ledger locked")
            return BetStatus.LOCKED, None

        kind = BetType.parse(bet_type)
        if kind is None or not _is_int(amount) or amount <= 0:
            logger.debug("Bet rejected: type=%r amount=%r", bet_type, amount)
            return BetStatus.INVALID, None
        if kind is BetType.STRAIGHT and not (_is_int(target) and 0 <= target <= 36):
            logger.debug("Straight bet rejected: target=%r", target)
            return BetStatus.INVALID, None

        if amount > self.balance:
            logger.debug("Bet of %d rejected, balance %d", amount, self.balance)
            return BetStatus.INSUFFICIENT_FUNDS, None

        bet = Bet(kind, target, amount)
        self.balance -= amount
        self.bets.append(bet)
        logger.info("Placed %d on %s", amount, bet.label)
        return BetStatus.ACCEPTED, bet

    def refund_all(self):
        if self.locked:
            return None
        refunded = self.total_staked
        self.bets = []
        self.balance += refunded
        logger.info("Refunded %d", refunded)
        return refunded

    def settle(self, winnings: int):
        """Credit ``winnings`` and consume every active bet."""
        if not _is_int(winnings) or winnings < 0:
            raise LedgerError(f"winnings must be a non-negative int, got {winnings!r}")
        consumed = tuple(self.bets)
        self.bets = []
        self.balance += winnings
        return consumed
