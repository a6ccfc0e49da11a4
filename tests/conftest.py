import pytest

from memorize.deck import create_deck
from memorize.game import GameConfig, GameSession
from memorize.models import Deck


# --- Deck Fixtures ---
@pytest.fixture
def vehicle_pool() -> list[str]:
    """
    Provide the four-vehicle pool used by the end-to-end scenarios.

    Returns:
        list[str]: Train, ambulance, police car and ship emojis, in that order.
    """
    return ["🚂", "🚑", "🚔", "🛳"]


@pytest.fixture
def letter_deck() -> Deck:
    """A three-card deck (A, B, C) with every card visible."""
    return create_deck(["A", "B", "C"], 3)


@pytest.fixture
def session() -> GameSession:
    """
    Provide a GameSession over a small letter pool with two cards showing.

    Returns:
        GameSession: A fresh session dealt from ["a", "b", "c"].
    """
    return GameSession(
        GameConfig(content_pool=["a", "b", "c"], initial_visible_count=2)
    )
