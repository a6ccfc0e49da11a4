"""
Card and Deck models for the memory game.
"""

from __future__ import annotations

import uuid
from enum import IntEnum
from uuid import UUID
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CardFace(IntEnum):
    """
    The two display states of a card.
    """

    FaceDown = 0
    FaceUp = 1


class Card(BaseModel):
    """
    A single identified, flippable game tile.

    Identity lives in `id`, never in `content`: two cards may show the same
    symbol and still be told apart. Cards are immutable; flipping one means
    building a new Card with `model_copy`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: UUID = Field(
        default_factory=uuid.uuid4,
        description="Unique UUIDv4 for the card. Never reassigned.",
    )
    content: str = Field(
        ...,
        min_length=1,
        description="Symbol shown on the face of the card (e.g. an emoji).",
    )
    is_face_up: bool = Field(
        default=True,
        description="Whether the card currently shows its content.",
    )

    @property
    def face(self) -> CardFace:
        return CardFace.FaceUp if self.is_face_up else CardFace.FaceDown


class Deck(BaseModel):
    """
    Ordered collection of all cards for a session plus the visible window.

    Decks are treated as snapshots: the functions in `memorize.deck` return
    new Deck values and bump `version` whenever something changed.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    cards: Tuple[Card, ...] = Field(
        ...,
        min_length=1,
        description="Cards in insertion order.",
    )
    visible_count: int = Field(
        ...,
        ge=1,
        description="How many leading cards are exposed to the player.",
    )
    version: int = Field(
        default=0,
        ge=0,
        description="Incremented on every state change (for re-render checks).",
    )

    @model_validator(mode="after")
    def check_deck_invariants(self) -> "Deck":
        """Ensure card ids are unique and the visible window fits the deck."""
        ids = [card.id for card in self.cards]
        if len(set(ids)) != len(ids):
            raise ValueError("Card ids in a deck must be unique.")
        if self.visible_count > len(self.cards):
            raise ValueError(
                f"visible_count {self.visible_count} exceeds deck size "
                f"{len(self.cards)}."
            )
        return self

    def __len__(self) -> int:
        return len(self.cards)

    @property
    def face_up_count(self) -> int:
        """Number of cards currently face up, visible or not."""
        return sum(1 for card in self.cards if card.is_face_up)
