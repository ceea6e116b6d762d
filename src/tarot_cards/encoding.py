"""
Numeric encoding of cards for engines and learning code.

Every card gets a stable index 0..77 matching ``make_deck_78()``:
  - 0..55  : suited cards (4 suits × 14, suit-major then number 1..14)
  - 56..76 : trumps 1..21
  - 77     : the Fool
"""
from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from .cards import Card, Color, ColorCard, FOOL, Theme, TrumpCard
from .deck import DECK_SIZE, make_color_card

NUM_CARDS: int = DECK_SIZE
_SUIT_SIZE = 14
_FIRST_TRUMP_INDEX = len(Color) * _SUIT_SIZE  # 56
FOOL_INDEX = NUM_CARDS - 1

_COLORS = list(Color)


def card_index(card: Card) -> int:
    if isinstance(card, ColorCard):
        return _COLORS.index(card.color) * _SUIT_SIZE + (card.number - 1)
    if isinstance(card, TrumpCard):
        if card.number is None:
            return FOOL_INDEX
        return _FIRST_TRUMP_INDEX + (card.number - 1)
    raise TypeError(f"not a tarot card: {card!r}")


def card_from_index(index: int) -> Card:
    """Inverse of card_index. Raises IndexError outside 0..77."""
    if not 0 <= index < NUM_CARDS:
        raise IndexError(f"card index out of range: {index}")
    if index == FOOL_INDEX:
        return FOOL
    if index >= _FIRST_TRUMP_INDEX:
        return TrumpCard.new_trump_card(index - _FIRST_TRUMP_INDEX + 1)
    suit, offset = divmod(index, _SUIT_SIZE)
    return make_color_card(_COLORS[suit], offset + 1)


def encode_card_set(cards: Iterable[Card]) -> np.ndarray:
    """
    Binary 78-dim vector for a set of cards: 1 if the card is present, else 0.
    Used for hands, won tricks, the dog...
    """
    vec = np.zeros(NUM_CARDS, dtype=np.int8)
    for c in cards:
        vec[card_index(c)] = 1
    return vec


def decode_card_set(vec: Sequence[int] | np.ndarray) -> list[Card]:
    """Cards whose bit is set, in deck order."""
    arr = np.asarray(vec)
    if arr.shape != (NUM_CARDS,):
        raise ValueError(f"expected a vector of shape ({NUM_CARDS},), got {arr.shape}")
    return [card_from_index(int(i)) for i in np.flatnonzero(arr)]


def rank_vector(cards: Sequence[Card], theme: Theme) -> np.ndarray:
    """Ranks of ``cards`` under ``theme``, in the same order."""
    return np.array([c.rank(theme) for c in cards], dtype=np.int16)


__all__ = [
    "NUM_CARDS",
    "FOOL_INDEX",
    "card_index",
    "card_from_index",
    "encode_card_set",
    "decode_card_set",
    "rank_vector",
]
