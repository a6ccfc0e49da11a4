from typing import Optional
from uuid import UUID


class MemorizeError(Exception):
    """Base exception for deck and game errors."""

    def __init__(
        self, message: str, original_exception: Optional[Exception] = None
    ):
        super().__init__(message)
        self.original_exception = original_exception


class InvalidVisibleCountError(MemorizeError):
    """Raised when a deck is built with a visible count outside 1..len(deck)."""

    def __init__(self, requested: int, deck_size: int):
        super().__init__(
            f"Visible count {requested} is out of range "
            f"(must be between 1 and {deck_size})."
        )
        self.requested = requested
        self.deck_size = deck_size


class InvalidContentPoolError(MemorizeError):
    """Raised when the content pool is empty or holds duplicate symbols."""

    pass


class CardNotFoundError(MemorizeError):
    """Raised when no card in the deck carries the requested id."""

    def __init__(self, card_id: UUID):
        super().__init__(f"Card {card_id} not found in deck.")
        self.card_id = card_id
