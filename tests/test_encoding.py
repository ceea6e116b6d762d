"""Tests for card indices and numpy card-set encoding."""
import numpy as np
import pytest

from tarot_cards.cards import Color, ColorCard, Face, FOOL, Theme, TRUMP_THEME, TrumpCard
from tarot_cards.deck import make_deck_78
from tarot_cards.encoding import (
    FOOL_INDEX,
    NUM_CARDS,
    card_from_index,
    card_index,
    decode_card_set,
    encode_card_set,
    rank_vector,
)


def test_card_index_covers_full_deck_without_collision():
    deck = make_deck_78()
    indices = [card_index(c) for c in deck]
    assert indices == list(range(NUM_CARDS))
    assert card_index(FOOL) == FOOL_INDEX == 77
    assert card_index(TrumpCard.little_one()) == 56
    assert card_index(ColorCard.new_face(Face.KING, Color.HEARTS)) == 55


def test_card_from_index_is_inverse():
    for i in range(NUM_CARDS):
        assert card_index(card_from_index(i)) == i
    with pytest.raises(IndexError):
        card_from_index(78)
    with pytest.raises(IndexError):
        card_from_index(-1)


def test_card_index_rejects_other_objects():
    with pytest.raises(TypeError):
        card_index("KH")  # type: ignore[arg-type]


def test_encode_card_set_dimension_and_bits():
    deck = make_deck_78()
    hand = deck[:18]
    vec = encode_card_set(hand)
    assert vec.shape == (NUM_CARDS,)
    assert vec.dtype == np.int8
    assert int(vec.sum()) == len(hand)
    assert decode_card_set(vec) == hand


def test_decode_card_set_checks_shape():
    with pytest.raises(ValueError):
        decode_card_set([1, 0, 1])
    assert decode_card_set([0] * NUM_CARDS) == []


def test_rank_vector_picks_trick_leader():
    trick = [
        ColorCard.new_pip(9, Color.SPADES),
        ColorCard.new_face(Face.KING, Color.SPADES),
        FOOL,
        ColorCard.new_face(Face.KING, Color.HEARTS),
    ]
    ranks = rank_vector(trick, Theme.of(Color.SPADES))
    assert ranks.tolist() == [9, 14, 0, 0]
    assert int(np.argmax(ranks)) == 1

    trick.append(TrumpCard.new_trump_card(2))
    ranks = rank_vector(trick, Theme.of(Color.SPADES))
    assert int(np.argmax(ranks)) == 4
    assert rank_vector(trick, TRUMP_THEME).tolist() == [0, 0, 0, 0, 2]
