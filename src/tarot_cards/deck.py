"""
Tarot deck: 78 cards (4 suits × 14, 21 trumps, the Fool).
Card labels for display/input, and counting helpers over sets of cards.
"""
from __future__ import annotations

import re
from typing import Iterable

from .cards import (
    Card,
    Color,
    ColorCard,
    Face,
    FOOL,
    MAX_TRUMP,
    MIN_TRUMP,
    TrumpCard,
)
from .errors import CardParseError

DECK_SIZE = 78
DECK_POINTS = 91.0

_SUIT_BY_CHAR = {
    "♣": Color.CLUBS,
    "C": Color.CLUBS,
    "♠": Color.SPADES,
    "S": Color.SPADES,
    "♦": Color.DIAMONDS,
    "D": Color.DIAMONDS,
    "♥": Color.HEARTS,
    "H": Color.HEARTS,
}
_FACE_BY_LETTER = {face.letter: face for face in Face}

_COLOR_LABEL = re.compile(r"^(?P<label>[KQNJ]|\d{1,2})(?P<suit>[♣♠♦♥CSDH])$")
_TRUMP_LABEL = re.compile(r"^T(?P<number>\d{1,3})$")


def make_color_card(color: Color, number: int) -> ColorCard:
    """Suited card from its number in the suit (1..10 pips, 11..14 faces)."""
    if int(Face.JACK) <= number <= int(Face.KING):
        return ColorCard.new_face(Face(number), color)
    return ColorCard.new_pip(number, color)


def make_deck_78() -> list[Card]:
    """Build the full deck: each suit 1..14 in Color order, trumps 1..21, then the Fool."""
    deck: list[Card] = []
    for color in Color:
        for number in range(1, 15):
            deck.append(make_color_card(color, number))
    for n in range(MIN_TRUMP, MAX_TRUMP + 1):
        deck.append(TrumpCard.new_trump_card(n))
    deck.append(FOOL)
    return deck


def parse_card(text: str) -> Card:
    """
    Parse a card label as produced by ``str(card)``.

    Accepted: ``"K♥"`` / ``"KH"``, ``"7D"``, ``"10♣"``, ``"T21"``, ``"Fool"``.
    Letters are case-insensitive. Raises CardParseError for anything else;
    a well-formed label with an out-of-range number raises PipValueError or
    TrumpValueError.
    """
    label = text.strip().upper()
    if label in ("FOOL", "EXCUSE"):
        return FOOL
    m = _TRUMP_LABEL.match(label)
    if m:
        return TrumpCard.new_trump_card(int(m.group("number")))
    m = _COLOR_LABEL.match(label)
    if not m:
        raise CardParseError(text)
    color = _SUIT_BY_CHAR[m.group("suit")]
    rank_label = m.group("label")
    if rank_label in _FACE_BY_LETTER:
        return ColorCard.new_face(_FACE_BY_LETTER[rank_label], color)
    return ColorCard.new_pip(int(rank_label), color)


def total_points(cards: Iterable[Card]) -> float:
    """Sum of card points (91 for the whole deck)."""
    return sum(c.points() for c in cards)


def count_oudlers(cards: Iterable[Card]) -> int:
    return sum(1 for c in cards if c.is_oudler())


__all__ = [
    "DECK_SIZE",
    "DECK_POINTS",
    "make_color_card",
    "make_deck_78",
    "parse_card",
    "total_points",
    "count_oudlers",
]
