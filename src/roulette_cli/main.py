import asyncio

from rich.console import Console, Group
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.prompt import IntPrompt, Prompt
from rich.table import Table

from .config import CHIP_VALUES, get_settings
from .engine import GameSession
from .game_logic import BetType, color_of
from .log import setup_logging

console = Console()

COLOR_STYLES = {"red": "bold white on red", "black": "bold white on grey15", "green": "bold white on green"}

OUTSIDE_BETS = {
    "red": BetType.RED,
    "black": BetType.BLACK,
    "even": BetType.EVEN,
    "odd": BetType.ODD,
    "low": BetType.LOW,
    "high": BetType.HIGH,
}


# -------------------------
# Async-safe prompt wrapper
# -------------------------
async def ask_prompt(func, *args, **kwargs):
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, lambda: func(*args, **kwargs))


# -------------------------
# UI Rendering
# -------------------------
def number_badge(num):
    return f"[{COLOR_STYLES[color_of(num)]}] {num:>2} [/]"


def render_ui(state, chip, logs):
    header = Panel(
        f"🎰 Monte Carlo Royale | Balance: {state.balance:,} chips | Chip: {chip} | On table: {state.total_bet:,}",
        style="bold magenta",
    )

    bets_table = Table(title="Your Bets", expand=True)
    bets_table.add_column("Bet")
    bets_table.add_column("Amount", justify="right")
    if state.active_bets:
        for bet in state.active_bets:
            bets_table.add_row(f"{bet.bet_type.value} {bet.label}", str(bet.amount))
    else:
        bets_table.add_row("(no bets)", "-")

    history = " ".join(number_badge(n) for n in state.history) or "No spins yet..."
    history_panel = Panel(history, title="Last Outcomes")

    status_style = "yellow" if state.is_spinning else "white"
    status_panel = Panel(f"[{status_style}]{state.message}[/]", title="Table")

    log_panel = Panel("\n".join(logs[-8:]) or "(no activity yet)", title="Log")

    middle = Table.grid(expand=True)
    middle.add_column(ratio=1)
    middle.add_column(ratio=1)
    middle.add_row(bets_table, Group(history_panel, status_panel))

    return Group(header, middle, log_panel)


# -------------------------
# Player actions
# -------------------------
async def choose_chip(current):
    value = await ask_prompt(
        IntPrompt.ask,
        "Chip value",
        choices=[str(v) for v in CHIP_VALUES],
        default=current,
    )
    return value


async def betting_process(session, chip):
    kind = await ask_prompt(
        Prompt.ask,
        "Bet on",
        choices=["number", *OUTSIDE_BETS],
    )

    if kind == "number":
        target = await ask_prompt(
            IntPrompt.ask,
            "Pick number (0-36)",
            choices=[str(n) for n in range(37)],
            show_choices=False,
        )
        session.place_bet(BetType.STRAIGHT, target, chip)
    else:
        session.place_bet(OUTSIDE_BETS[kind], None, chip)


async def spin_process(session):
    if session.spin() is None:
        return

    with Progress(SpinnerColumn(), TextColumn("Spinning..."), transient=True, console=console) as p:
        p.add_task("spin", total=None)
        await session.wait_for_result()


async def game_loop(session, chip):
    logs = []
    session.subscribe(lambda state: logs.append(f"> {state.message}"))

    while True:
        console.print(render_ui(session.get_state(), chip, logs))
        action = await ask_prompt(
            Prompt.ask,
            "Action",
            choices=["bet", "chip", "clear", "spin", "quit"],
            default="bet",
        )

        if action == "bet":
            await betting_process(session, chip)
        elif action == "chip":
            chip = await choose_chip(chip)
        elif action == "clear":
            session.clear_bets()
        elif action == "spin":
            await spin_process(session)
        elif action == "quit":
            # stakes still on the table go back to the player
            session.clear_bets()
            break

    return session.get_state()


# -------------------------
# Main
# -------------------------
async def main():
    settings = get_settings()
    setup_logging(settings.log_level, console=console)

    session = GameSession.from_settings(settings)
    final = await game_loop(session, settings.default_chip)
    console.print(f"[bold]Leaving the table with {final.balance:,} chips.[/]")


def run():
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, EOFError):
        console.print("\n[red]Bye[/]")


if __name__ == "__main__":
    run()
