import pytest
import uuid

from pydantic import ValidationError

from memorize.models import Card, CardFace, Deck


# --- Card Model Tests ---

class TestCardModel:
    def test_card_creation_minimal_required(self):
        """Test Card creation with only the content (others have defaults)."""
        card = Card(content="🚂")
        assert isinstance(card.id, uuid.UUID)
        assert card.content == "🚂"
        assert card.is_face_up is True
        assert card.face == CardFace.FaceUp

    def test_card_id_default_generation(self):
        """Ensure ids differ between instances, even with the same content."""
        card1 = Card(content="🚂")
        card2 = Card(content="🚂")
        assert card1.id != card2.id

    def test_card_face_follows_is_face_up(self):
        card = Card(content="🚑", is_face_up=False)
        assert card.face == CardFace.FaceDown

    def test_card_content_min_length(self):
        with pytest.raises(ValidationError) as excinfo:
            Card(content="")
        assert "String should have at least 1 character" in str(excinfo.value)

    @pytest.mark.parametrize("field, value", [
        ("id", uuid.uuid4()),
        ("content", "🚔"),
        ("is_face_up", False),
    ])
    def test_card_fields_are_frozen(self, field, value):
        card = Card(content="🚂")
        with pytest.raises(ValidationError) as excinfo:
            setattr(card, field, value)
        assert "frozen" in str(excinfo.value).lower()

    def test_card_flips_only_through_copy(self):
        card = Card(content="🚂")
        flipped = card.model_copy(update={"is_face_up": False})
        assert flipped.id == card.id
        assert flipped.face == CardFace.FaceDown
        assert card.face == CardFace.FaceUp

    def test_card_extra_fields_forbidden(self):
        """Test that extra fields raise an error due to extra='forbid'."""
        with pytest.raises(ValidationError) as excinfo:
            Card(content="🚂", matched=True)
        assert "Extra inputs are not permitted" in str(excinfo.value)


# --- Deck Model Tests ---

class TestDeckModel:
    def test_deck_defaults(self):
        deck = Deck(cards=[Card(content="a"), Card(content="b")], visible_count=1)
        assert len(deck) == 2
        assert isinstance(deck.cards, tuple)
        assert deck.version == 0
        assert deck.face_up_count == 2

    def test_face_up_count(self):
        deck = Deck(
            cards=[Card(content="a", is_face_up=False), Card(content="b")],
            visible_count=1,
        )
        assert deck.face_up_count == 1

    @pytest.mark.parametrize("field, value", [
        ("visible_count", 2),
        ("version", 5),
        ("cards", ()),
    ])
    def test_deck_fields_are_frozen(self, field, value):
        deck = Deck(cards=[Card(content="a"), Card(content="b")], visible_count=1)
        with pytest.raises(ValidationError) as excinfo:
            setattr(deck, field, value)
        assert "frozen" in str(excinfo.value).lower()

    def test_deck_rejects_duplicate_ids(self):
        card = Card(content="a")
        with pytest.raises(ValidationError) as excinfo:
            Deck(cards=[card, card], visible_count=1)
        assert "Card ids in a deck must be unique." in str(excinfo.value)

    def test_deck_rejects_visible_count_above_size(self):
        with pytest.raises(ValidationError) as excinfo:
            Deck(cards=[Card(content="a")], visible_count=2)
        assert "exceeds deck size" in str(excinfo.value)

    def test_deck_rejects_zero_visible_count(self):
        with pytest.raises(ValidationError) as excinfo:
            Deck(cards=[Card(content="a")], visible_count=0)
        assert "Input should be greater than or equal to 1" in str(excinfo.value)

    def test_deck_rejects_empty_cards(self):
        with pytest.raises(ValidationError):
            Deck(cards=[], visible_count=1)

    def test_deck_equality_compares_snapshots(self):
        cards = [Card(content="a"), Card(content="b")]
        assert Deck(cards=cards, visible_count=1) == Deck(
            cards=list(cards), visible_count=1
        )
        assert Deck(cards=cards, visible_count=1) != Deck(
            cards=cards, visible_count=2
        )
