from .config import CHIP_VALUES, Settings, get_settings
from .engine import GameSession, RoundResolver
from .game_logic import PAYOUTS, WHEEL_SEQUENCE, Bet, BetType, RouletteWheel, color_of
from .ledger import BetLedger, BetStatus, LedgerError
from .session import HISTORY_SIZE, RoundResult, SessionState

__version__ = "0.2.0"
