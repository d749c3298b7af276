import asyncio
import logging
from collections import deque

from .config import DEFAULT_SPIN_SECONDS, DEFAULT_STARTING_BALANCE
from .game_logic import RouletteWheel, calculate_payout, color_of
from .ledger import BetLedger, BetStatus
from .session import HISTORY_SIZE, WELCOME_MESSAGE, RoundResult, SessionState

logger = logging.getLogger(__name__)

MSG_BETS_CLOSED = "Bets are closed while the wheel is spinning."
MSG_INVALID_BET = "Invalid bet."
MSG_INSUFFICIENT = "Insufficient balance!"
MSG_CLEARED = "All bets cleared."
MSG_NO_BETS = "Please place a bet first!"
MSG_ALREADY_SPINNING = "The wheel is already spinning."
MSG_SPINNING = "The wheel is spinning..."


class RoundResolver:
    def resolve(self, bets, outcome: int) -> RoundResult:
        bets = tuple(bets)
        winners = []
        total = 0
        for bet in bets:
            returned = calculate_payout(bet, outcome)
            if returned:
                winners.append(bet)
                total += returned
        return RoundResult(
            outcome=outcome,
            color=color_of(outcome),
            bets=bets,
            winning_bets=tuple(winners),
            total_winnings=total,
        )

    @staticmethod
    def describe(result: RoundResult) -> str:
        if result.won:
            return (
                f"Winner! Number {result.outcome} ({result.color.upper()}). "
                f"Won {result.total_winnings} chips!"
            )
        return f"Better luck next time. Number was {result.outcome}."


class GameSession:
    """One player's table: ledger, wheel and the idle/spinning state machine.

    ``place_bet``, ``clear_bets`` and ``spin`` never raise for user mistakes;
    a rejected call leaves the table alone and explains itself through
    ``message``. An accepted ``spin`` draws the outcome up front and settles
    it from a single asyncio task after ``spin_seconds``.
    """

    def __init__(self, starting_balance=DEFAULT_STARTING_BALANCE, spin_seconds=DEFAULT_SPIN_SECONDS, wheel=None):
        self.ledger = BetLedger(starting_balance)
        self.wheel = wheel if wheel is not None else RouletteWheel()
        self.resolver = RoundResolver()
        self.spin_seconds = spin_seconds

        self.is_spinning = False
        self.last_result = None
        self.last_round = None
        self.history = deque(maxlen=HISTORY_SIZE)
        self.message = WELCOME_MESSAGE
        self.rotation = 0.0

        self._round_id = 0
        self._task = None
        self._listeners = []

    @classmethod
    def from_settings(cls, settings, wheel=None):
        return cls(
            starting_balance=settings.starting_balance,
            spin_seconds=settings.spin_seconds,
            wheel=wheel,
        )

    # -------------------------
    # Observation
    # -------------------------
    def get_state(self) -> SessionState:
        return SessionState(
            balance=self.ledger.balance,
            active_bets=tuple(self.ledger.bets),
            is_spinning=self.is_spinning,
            last_result=self.last_result,
            history=tuple(self.history),
            message=self.message,
            rotation=self.rotation,
            last_round=self.last_round,
        )

    def subscribe(self, callback):
        """Call ``callback(state)`` after every change. Returns an unsubscribe function.

        A callback that raises is logged and skipped; the change it was told
        about has already been applied.
        """
        self._listeners.append(callback)

        def unsubscribe():
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _publish(self, message):
        self.message = message
        state = self.get_state()
        for callback in list(self._listeners):
            try:
                callback(state)
            except Exception:
                logger.exception("Subscriber %r failed on %r", callback, message)
        return state

    # -------------------------
    # Betting
    # -------------------------
    def place_bet(self, bet_type, target, amount) -> SessionState:
        status, bet = self.ledger.place(bet_type, target, amount)
        if status is BetStatus.LOCKED:
            return self._publish(MSG_BETS_CLOSED)
        if status is BetStatus.INVALID:
            return self._publish(MSG_INVALID_BET)
        if status is BetStatus.INSUFFICIENT_FUNDS:
            return self._publish(MSG_INSUFFICIENT)
        return self._publish(f"Placed {bet.amount} on {bet.label}")

    def clear_bets(self) -> SessionState:
        if self.ledger.refund_all() is None:
            return self._publish(MSG_BETS_CLOSED)
        return self._publish(MSG_CLEARED)

    # -------------------------
    # Rounds
    # -------------------------
    def spin(self):
        if self.is_spinning:
            self._publish(MSG_ALREADY_SPINNING)
            return None
        if not self.ledger.bets:
            self._publish(MSG_NO_BETS)
            return None

        loop = asyncio.get_running_loop()
        outcome, color = self.wheel.spin()

        self._round_id += 1
        self.is_spinning = True
        self.ledger.locked = True
        self.last_result = None
        self.rotation = self.wheel.next_rotation(self.rotation)
        logger.info("Round %d started with %d bet(s)", self._round_id, len(self.ledger.bets))
        logger.debug("Round %d outcome drawn: %d %s", self._round_id, outcome, color)

        self._task = loop.create_task(self._run_round(self._round_id, outcome))
        self._publish(MSG_SPINNING)
        return self._task

    async def _run_round(self, round_id, outcome):
        await asyncio.sleep(self.spin_seconds)
        self._settle(round_id, outcome)
        return self.get_state()

    def _settle(self, round_id, outcome):
        if not self.is_spinning or round_id != self._round_id:
            logger.warning("Ignoring settlement for stale round %d", round_id)
            return

        result = self.resolver.resolve(self.ledger.bets, outcome)
        self.ledger.settle(result.total_winnings)
        self.ledger.locked = False

        self.history.appendleft(outcome)
        self.last_result = outcome
        self.last_round = result
        self.is_spinning = False
        self._task = None
        logger.info(
            "Round %d settled: %d %s, returned %d", round_id, outcome, result.color, result.total_winnings
        )
        self._publish(self.resolver.describe(result))

    async def wait_for_result(self) -> SessionState:
        if self._task is not None:
            await self._task
        return self.get_state()
