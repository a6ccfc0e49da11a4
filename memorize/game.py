"""
This module defines the GameSession class, the single owner of the deck for
one interactive game. A presentation layer forwards taps and +/- presses to
the session and re-renders whenever the session's version moves.
"""

import logging
from typing import List, Optional, Tuple
from uuid import UUID

from pydantic import BaseModel, Field

from .constants import DEFAULT_CONTENT_POOL, DEFAULT_VISIBLE_COUNT
from .deck import (
    create_deck,
    decrease_visible,
    increase_visible,
    toggle_face,
    visible_cards,
)
from .exceptions import CardNotFoundError
from .models import Card, Deck

logger = logging.getLogger(__name__)


class GameConfig(BaseModel):
    """Settings used to build (and rebuild) a session's deck."""

    content_pool: List[str] = Field(
        default_factory=lambda: list(DEFAULT_CONTENT_POOL),
        description="Symbols dealt onto the cards, in order.",
    )
    initial_visible_count: int = Field(
        default=DEFAULT_VISIBLE_COUNT,
        description="Number of cards shown when the game starts.",
    )


class GameSession:
    """
    Manages the deck for a single game.

    This class is responsible for:
    - Building the deck from a GameConfig.
    - Routing taps and +/- presses to the deck operations.
    - Ignoring stale taps for cards that no longer exist.
    - Exposing a version so the UI knows when to redraw.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Create a session and deal its first deck.

        Parameters:
            config (Optional[GameConfig]): Deck settings; defaults to the
                vehicle pool with four cards showing.

        Raises:
            InvalidContentPoolError: If the configured pool is empty or has duplicates.
            InvalidVisibleCountError: If the configured visible count does not fit the pool.
        """
        self.config = config or GameConfig()
        self._deck: Deck = create_deck(
            self.config.content_pool, self.config.initial_visible_count
        )
        # Bumped on reset so versions keep increasing across rebuilt decks.
        self._generation_offset = 0
        logger.info(
            f"Started game with {len(self._deck)} cards, "
            f"{self._deck.visible_count} visible."
        )

    @property
    def deck(self) -> Deck:
        return self._deck

    @property
    def version(self) -> int:
        return self._generation_offset + self._deck.version

    def has_changed_since(self, version: int) -> bool:
        """True when the deck has changed after the given version was read."""
        return self.version != version

    def visible_cards(self) -> Tuple[Card, ...]:
        return visible_cards(self._deck)

    def add_card(self) -> None:
        self._deck = increase_visible(self._deck)
        logger.debug(f"Visible count is now {self._deck.visible_count}.")

    def remove_card(self) -> None:
        self._deck = decrease_visible(self._deck)
        logger.debug(f"Visible count is now {self._deck.visible_count}.")

    def tap(self, card_id: UUID) -> bool:
        """
        Flip the card with the given id.

        Returns:
            bool: True if a card was flipped, False if the id was stale.
        """
        try:
            self._deck = toggle_face(self._deck, card_id)
        except CardNotFoundError as e:
            logger.warning(f"Ignoring tap: {e}")
            return False
        return True

    def tap_position(self, position: int) -> bool:
        """
        Flip the card at a 1-based position within the visible window.

        Returns:
            bool: True if a card was flipped, False if the position is not visible.
        """
        cards = self.visible_cards()
        if not 1 <= position <= len(cards):
            logger.warning(
                f"Ignoring tap at position {position}: "
                f"only {len(cards)} cards are visible."
            )
            return False
        return self.tap(cards[position - 1].id)

    def reset(self) -> None:
        """Deal a fresh deck from the config. Previous card ids become stale."""
        self._generation_offset = self.version + 1
        self._deck = create_deck(
            self.config.content_pool, self.config.initial_visible_count
        )
        logger.info("Game reset with a freshly dealt deck.")
