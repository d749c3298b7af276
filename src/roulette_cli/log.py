import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level="WARNING", console: Console = None):
    """Send library logs through rich so they share the game's console."""
    handler = RichHandler(console=console, show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root = logging.getLogger("roulette_cli")
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False
    return root
