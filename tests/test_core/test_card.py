"""
Tests for Rank, Suit and Card.
"""

import pytest
from pokerrange.core.card import (
    Card, Rank, Suit, RANKS_DESCENDING, SUITS,
    parse_cards, rank_from_char, rank_index,
)
from pokerrange.core.errors import InvalidHandNotation


class TestRankSuitTables:
    """Tests for the static ordering tables."""

    def test_ranks_descending(self):
        """Grid order runs Ace to Two."""
        assert len(RANKS_DESCENDING) == 13
        assert RANKS_DESCENDING[0] == Rank.ACE
        assert RANKS_DESCENDING[-1] == Rank.TWO

    def test_suit_enumeration_order(self):
        """Suits enumerate clubs, diamonds, hearts, spades."""
        assert SUITS == (Suit.CLUBS, Suit.DIAMONDS, Suit.HEARTS, Suit.SPADES)

    def test_rank_index(self):
        """Test grid index of each rank."""
        assert rank_index(Rank.ACE) == 0
        assert rank_index(Rank.KING) == 1
        assert rank_index(Rank.TWO) == 12

    def test_rank_from_char_case_insensitive(self):
        """Test rank chars in either case."""
        assert rank_from_char("t") == Rank.TEN
        assert rank_from_char("A") == Rank.ACE
        assert rank_from_char("9") == Rank.NINE

    def test_rank_from_char_invalid(self):
        """Test unknown rank chars are rejected."""
        with pytest.raises(InvalidHandNotation):
            rank_from_char("X")


class TestCard:
    """Tests for Card class."""

    def test_card_from_string(self):
        """Test creating cards from string notation."""
        card = Card.from_string("As")
        assert card.rank == Rank.ACE
        assert card.suit == Suit.SPADES

        card = Card.from_string("K♥")
        assert card.rank == Rank.KING
        assert card.suit == Suit.HEARTS

        card = Card.from_string("td")
        assert card.rank == Rank.TEN
        assert card.suit == Suit.DIAMONDS

    def test_card_from_string_invalid(self):
        """Unknown ranks and suits are notation errors."""
        for text in ["Xs", "Ax", "A", "Asd"]:
            with pytest.raises(InvalidHandNotation):
                Card.from_string(text)

    def test_notation_errors_are_value_errors(self):
        """Test card errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            Card.from_string("Zz")

    def test_card_to_int(self):
        """Test converting card to integer."""
        assert Card(Rank.ACE, Suit.SPADES).to_int() == 51
        assert Card(Rank.TWO, Suit.CLUBS).to_int() == 0

    def test_card_equality_and_hash(self):
        """Test card equality and hashing."""
        card1 = Card(Rank.ACE, Suit.SPADES)
        card2 = Card.from_string("As")
        card3 = Card(Rank.KING, Suit.SPADES)

        assert card1 == card2
        assert card1 != card3
        assert card2 in {card1}

    def test_card_str(self):
        """Test card string representation."""
        card = Card(Rank.ACE, Suit.SPADES)
        assert str(card) == "As"
        assert card.short_str == "As"


class TestParseCards:
    """Tests for parse_cards function."""

    def test_parse_concatenated(self):
        """Test parsing concatenated cards."""
        cards = parse_cards("AhKs")
        assert cards == [Card(Rank.ACE, Suit.HEARTS), Card(Rank.KING, Suit.SPADES)]

    def test_parse_odd_length(self):
        """Test a dangling character is rejected."""
        with pytest.raises(InvalidHandNotation):
            parse_cards("AhK")
