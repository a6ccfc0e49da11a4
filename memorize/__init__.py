"""Memorize - the deck state model behind a card-matching memory game."""

from .models import Card, CardFace, Deck
from .constants import DEFAULT_CONTENT_POOL, DEFAULT_VISIBLE_COUNT
from .deck import (
    create_deck,
    decrease_visible,
    first_index,
    increase_visible,
    toggle_face,
    visible_cards,
)
from .game import GameConfig, GameSession

__all__ = [
    "Card",
    "CardFace",
    "Deck",
    "DEFAULT_CONTENT_POOL",
    "DEFAULT_VISIBLE_COUNT",
    "create_deck",
    "decrease_visible",
    "first_index",
    "increase_visible",
    "toggle_face",
    "visible_cards",
    "GameConfig",
    "GameSession",
]
