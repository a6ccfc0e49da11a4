"""
CLI entry point for memorize.
"""

# Standard library imports
import logging
from typing import List, Optional

# Third-party imports
import typer
from rich.console import Console
from rich.markup import escape

# Local application imports
from memorize.cli.board_ui import board_status, render_board, start_play_flow
from memorize.constants import DEFAULT_CONTENT_POOL, DEFAULT_VISIBLE_COUNT
from memorize.exceptions import MemorizeError
from memorize.game import GameConfig, GameSession


console = Console()

app = typer.Typer(
    name="memorize",
    help="Memorize: a tiny card-flipping memory game.",
    add_completion=False,
    rich_markup_mode="markdown",
)


# Common typer options reused across commands
_count_option = typer.Option(  # noqa: B008
    None,
    "--count",
    "-n",
    help=f"Number of cards showing when the game starts. "
    f"Defaults to {DEFAULT_VISIBLE_COUNT}, or the pool size if smaller.",
    envvar="MEMORIZE_COUNT",
)

_pool_option = typer.Option(  # noqa: B008
    None,
    "--pool",
    help="Comma-separated symbols to deal instead of the vehicle emojis.",
)

_verbose_option = typer.Option(  # noqa: B008
    False,
    "--verbose",
    "-v",
    help="Log every state change to stderr.",
)


def _parse_pool(pool: Optional[str]) -> List[str]:
    """
    Split a comma-separated pool string into symbols.

    Returns:
        List[str]: The stripped, non-empty symbols, or the default pool when
        `pool` is None.
    """
    if pool is None:
        return list(DEFAULT_CONTENT_POOL)
    return [symbol.strip() for symbol in pool.split(",") if symbol.strip()]


def _build_session(count: Optional[int], pool: Optional[str]) -> GameSession:
    """Create a GameSession from CLI options. Exits with code 1 on bad input."""
    content_pool = _parse_pool(pool)
    if count is None:
        count = min(DEFAULT_VISIBLE_COUNT, len(content_pool))
    config = GameConfig(
        content_pool=content_pool, initial_visible_count=count
    )
    try:
        return GameSession(config)
    except MemorizeError as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        raise typer.Exit(code=1)


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )


@app.command()
def play(
    count: Optional[int] = _count_option,
    pool: Optional[str] = _pool_option,
    verbose: bool = _verbose_option,
):
    """
    Start an interactive game in the terminal.
    """
    _configure_logging(verbose)
    session = _build_session(count, pool)
    start_play_flow(session)


@app.command()
def show(
    count: Optional[int] = _count_option,
    pool: Optional[str] = _pool_option,
    verbose: bool = _verbose_option,
):
    """
    Print the opening board once and exit.
    """
    _configure_logging(verbose)
    session = _build_session(count, pool)
    console.print(render_board(session.deck))
    console.print(board_status(session.deck))


if __name__ == "__main__":
    app()
