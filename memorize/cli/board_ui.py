"""
Command-line board for playing the memory game.
"""

import logging

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from memorize.deck import visible_cards
from memorize.game import GameSession
from memorize.models import Card, Deck

logger = logging.getLogger(__name__)
console = Console()

CARDS_PER_ROW = 6
FACE_DOWN_SYMBOL = "▒▒"


def _card_panel(card: Card, position: int) -> Panel:
    if card.is_face_up:
        return Panel(
            card.content,
            title=str(position),
            border_style="red",
            width=9,
        )
    return Panel(
        FACE_DOWN_SYMBOL,
        title=str(position),
        border_style="red",
        style="on red",
        width=9,
    )


def render_board(deck: Deck) -> Table:
    """
    Lay out the visible cards of a deck as a grid of panels.

    Parameters:
        deck (Deck): Deck snapshot to draw.

    Returns:
        Table: A Rich grid with up to CARDS_PER_ROW cards per row, each titled
        with its 1-based position.
    """
    grid = Table.grid(padding=(0, 1))
    for _ in range(CARDS_PER_ROW):
        grid.add_column()
    cards = visible_cards(deck)
    for start in range(0, len(cards), CARDS_PER_ROW):
        row = [
            _card_panel(card, start + offset + 1)
            for offset, card in enumerate(cards[start : start + CARDS_PER_ROW])
        ]
        grid.add_row(*row)
    return grid


def board_status(deck: Deck) -> str:
    """One-line summary of the visible window and how many cards are face up."""
    return (
        f"{deck.visible_count} of {len(deck)} cards showing, "
        f"{deck.face_up_count} face up."
    )


def _print_board(session: GameSession) -> None:
    deck = session.deck
    console.print(render_board(deck))
    console.print(f"[dim]{board_status(deck)}[/dim]")


def start_play_flow(session: GameSession) -> None:
    """
    Runs the interactive game loop.

    Commands: a card position flips that card, `+` shows one more card,
    `-` shows one fewer, `r` deals a new deck, `q` quits. The board is only
    redrawn when the session reports a change.

    Args:
        session: An instance of GameSession.
    """
    console.print("[bold cyan]Memorize! Tap a card by its number.[/bold cyan]")
    _print_board(session)
    last_version = session.version

    while True:
        command = console.input(
            "[bold]Card number, + / - , r(eset) or q(uit): [/bold]"
        ).strip().lower()
        logger.debug(f"Received command {command!r}")

        if command in ("q", "quit"):
            break
        elif command == "+":
            session.add_card()
        elif command == "-":
            session.remove_card()
        elif command in ("r", "reset"):
            session.reset()
        else:
            try:
                position = int(command)
            except ValueError:
                console.print(
                    "[bold red]Invalid input. Enter a number, +, -, r or q.[/bold red]"
                )
                continue
            if not session.tap_position(position):
                console.print(
                    f"[bold yellow]No visible card at position {position}.[/bold yellow]"
                )
                continue

        if session.has_changed_since(last_version):
            _print_board(session)
            last_version = session.version

    console.print("[bold cyan]Thanks for playing![/bold cyan]")
