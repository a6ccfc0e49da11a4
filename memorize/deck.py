"""
Operations on the Deck model.

Every operation takes a Deck snapshot and returns a Deck snapshot; the input
is never mutated. Operations that change nothing (a saturated +/- tap) hand
back the input unchanged so callers can compare versions to decide whether
to re-render.
"""

import logging
from typing import Sequence, Tuple
from uuid import UUID

from .exceptions import (
    CardNotFoundError,
    InvalidContentPoolError,
    InvalidVisibleCountError,
)
from .models import Card, Deck

logger = logging.getLogger(__name__)


def create_deck(content_pool: Sequence[str], initial_visible_count: int) -> Deck:
    """
    Build a new deck from a pool of distinct symbols.

    Parameters:
        content_pool (Sequence[str]): Symbols in the order the cards should appear.
        initial_visible_count (int): Number of leading cards exposed at start.

    Returns:
        Deck: A deck with one face-up card per symbol, each with a fresh id.

    Raises:
        InvalidContentPoolError: If the pool is empty, holds an empty symbol,
            or contains duplicates.
        InvalidVisibleCountError: If `initial_visible_count` is not in 1..len(pool).
    """
    pool = list(content_pool)
    if not pool:
        raise InvalidContentPoolError("Content pool must not be empty.")
    if any(not content for content in pool):
        raise InvalidContentPoolError(
            "Content pool must not contain empty symbols."
        )
    seen = set()
    duplicates = []
    for content in pool:
        if content in seen and content not in duplicates:
            duplicates.append(content)
        seen.add(content)
    if duplicates:
        raise InvalidContentPoolError(
            f"Content pool contains duplicate symbols: {duplicates}"
        )
    if not 1 <= initial_visible_count <= len(pool):
        raise InvalidVisibleCountError(initial_visible_count, len(pool))

    cards = tuple(Card(content=content) for content in pool)
    logger.debug(
        f"Created deck of {len(cards)} cards, {initial_visible_count} visible."
    )
    return Deck(cards=cards, visible_count=initial_visible_count)


def increase_visible(deck: Deck) -> Deck:
    """Show one more card, saturating at the deck size."""
    if deck.visible_count >= len(deck):
        return deck
    return deck.model_copy(
        update={
            "visible_count": deck.visible_count + 1,
            "version": deck.version + 1,
        }
    )


def decrease_visible(deck: Deck) -> Deck:
    """Show one card fewer, saturating at one."""
    if deck.visible_count <= 1:
        return deck
    return deck.model_copy(
        update={
            "visible_count": deck.visible_count - 1,
            "version": deck.version + 1,
        }
    )


def first_index(cards: Sequence[Card], card_id: UUID) -> int:
    """
    Find the position of the card carrying `card_id`.

    Raises:
        CardNotFoundError: If no card matches. There is no fallback position.
    """
    for index, card in enumerate(cards):
        if card.id == card_id:
            return index
    raise CardNotFoundError(card_id)


def toggle_face(deck: Deck, target_id: UUID) -> Deck:
    """
    Flip the card whose id matches `target_id`.

    Parameters:
        deck (Deck): Current deck snapshot.
        target_id (UUID): Id of the card that was tapped.

    Returns:
        Deck: A new snapshot in which only the matching card changed face.

    Raises:
        CardNotFoundError: If the deck holds no card with `target_id`.
    """
    index = first_index(deck.cards, target_id)
    target = deck.cards[index]
    cards = list(deck.cards)
    cards[index] = target.model_copy(update={"is_face_up": not target.is_face_up})
    logger.debug(
        f"Card {target_id} ({target.content}) turned "
        f"{'face down' if target.is_face_up else 'face up'}."
    )
    return deck.model_copy(
        update={"cards": tuple(cards), "version": deck.version + 1}
    )


def visible_cards(deck: Deck) -> Tuple[Card, ...]:
    """Return the leading `visible_count` cards, in deck order."""
    count = min(deck.visible_count, len(deck))
    return deck.cards[:count]
