import logging
import math
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

CHIP_VALUES = (5, 10, 25, 50, 100, 500)

DEFAULT_STARTING_BALANCE = 1000
DEFAULT_SPIN_SECONDS = 6.0
DEFAULT_CHIP = 10
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    starting_balance: int
    spin_seconds: float
    default_chip: int
    log_level: str


def _get_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


def _get_float(name: str, default: float) -> float:
    try:
        value = float(os.getenv(name, default))
    except (TypeError, ValueError):
        return default
    # float() accepts "inf" and "nan"
    if not math.isfinite(value):
        return default
    return value


def get_settings() -> Settings:
    starting_balance = _get_int("ROULETTE_STARTING_BALANCE", DEFAULT_STARTING_BALANCE)
    if starting_balance < 0:
        starting_balance = DEFAULT_STARTING_BALANCE

    spin_seconds = _get_float("ROULETTE_SPIN_SECONDS", DEFAULT_SPIN_SECONDS)
    if spin_seconds < 0:
        spin_seconds = DEFAULT_SPIN_SECONDS

    default_chip = _get_int("ROULETTE_DEFAULT_CHIP", DEFAULT_CHIP)
    if default_chip not in CHIP_VALUES:
        default_chip = DEFAULT_CHIP

    log_level = (os.getenv("ROULETTE_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        log_level = DEFAULT_LOG_LEVEL

    return Settings(
        starting_balance=starting_balance,
        spin_seconds=spin_seconds,
        default_chip=default_chip,
        log_level=log_level,
    )
