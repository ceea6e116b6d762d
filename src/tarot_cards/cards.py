"""
French Tarot cards: suited cards, trumps and the Fool.

Every card implements :class:`Card`: ``points()`` gives its value when
counting tricks, ``rank(theme)`` its strength inside a trick of the given
theme. The card with the highest rank wins the trick; a rank of 0 means the
card cannot win it (off-suit card, or the Fool).

Oudlers = the Fool, trump 1 (the little one) and trump 21 (the world).
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional

from .errors import (
    CardAccessError,
    FaceValueError,
    InvalidThemeAccess,
    PipValueError,
    TrumpValueError,
)


class Color(Enum):
    """The four suits. Declaration order is the deck order."""
    CLUBS = "clubs"
    SPADES = "spades"
    DIAMONDS = "diamonds"
    HEARTS = "hearts"

    @property
    def symbol(self) -> str:
        return _COLOR_SYMBOLS[self]


_COLOR_SYMBOLS = {
    Color.CLUBS: "♣",
    Color.SPADES: "♠",
    Color.DIAMONDS: "♦",
    Color.HEARTS: "♥",
}


class Face(IntEnum):
    """Face ranks; the value is the card's number inside its suit."""
    KING = 14
    QUEEN = 13
    KNIGHT = 12
    JACK = 11

    @property
    def letter(self) -> str:
        return self.name[0] if self is not Face.KNIGHT else "N"


MIN_PIP = 1
MAX_PIP = 10
MIN_TRUMP = 1
MAX_TRUMP = 21
LITTLE_ONE = 1
THE_WORLD = 21

OUDLER_POINTS = 4.5
LOW_CARD_POINTS = 0.5
FACE_POINTS = {
    Face.KING: 4.5,
    Face.QUEEN: 3.5,
    Face.KNIGHT: 2.5,
    Face.JACK: 1.5,
}

# Highest rank a suited card can reach; trumps rank above it in a suit trick.
MAX_COLOR_RANK = int(Face.KING)


def _is_card_number(value: object) -> bool:
    # bool is an int subclass but never a card number
    return isinstance(value, int) and not isinstance(value, bool)


def _check_color(value: object) -> None:
    if not isinstance(value, Color):
        raise TypeError(f"expected a Color, got {value!r}")


@dataclass(frozen=True)
class Theme:
    """
    Theme of a trick: either trump, or a suit.

    ``color`` is the suit of a suit trick and ``None`` for a trump trick.
    """

    color: Optional[Color] = None

    def __post_init__(self) -> None:
        if self.color is not None:
            _check_color(self.color)

    @classmethod
    def trump(cls) -> "Theme":
        return cls()

    @classmethod
    def of(cls, color: Color) -> "Theme":
        return cls(color=color)

    def is_color(self) -> bool:
        return self.color is not None

    def is_trump(self) -> bool:
        return not self.is_color()

    def color_checked(self) -> Color:
        """
        Suit of the trick.

        Only valid on a suit theme: raises InvalidThemeAccess for a trump
        trick, which callers should rule out with ``is_color()`` first.
        """
        if self.color is None:
            raise InvalidThemeAccess("color asked for a trump trick")
        return self.color

    def __str__(self) -> str:
        return "trump" if self.color is None else self.color.value


TRUMP_THEME = Theme.trump()


class Card(ABC):
    """Behaviour shared by every card."""

    @abstractmethod
    def points(self) -> float:
        """Points scored by the card when counting won tricks."""

    @abstractmethod
    def rank(self, theme: Theme) -> int:
        """Strength of the card in a trick of the given theme (0 = cannot win)."""

    def is_oudler(self) -> bool:
        return False


@dataclass(frozen=True)
class ColorCard(Card):
    """
    A suited card: pip 1..10, or a face (Jack=11 .. King=14).

    Build it with :meth:`new_face` or :meth:`new_pip`. Direct construction is
    validated the same way, so ``number`` always matches ``face``.
    """

    color: Color
    number: int
    face: Optional[Face] = None

    def __post_init__(self) -> None:
        _check_color(self.color)
        if self.face is None:
            if not _is_card_number(self.number) or not MIN_PIP <= self.number <= MAX_PIP:
                raise PipValueError(self.number)
        elif not isinstance(self.face, Face):
            raise TypeError(f"expected a Face, got {self.face!r}")
        elif not _is_card_number(self.number) or self.number != int(self.face):
            raise FaceValueError(self.number, self.face.name)

    @classmethod
    def new_face(cls, face: Face, color: Color) -> "ColorCard":
        return cls(color=color, number=int(face), face=face)

    @classmethod
    def new_pip(cls, number: int, color: Color) -> "ColorCard":
        """Raises PipValueError unless 1 <= number <= 10."""
        return cls(color=color, number=number)

    def is_face(self) -> bool:
        return self.face is not None

    def is_pip(self) -> bool:
        return not self.is_face()

    def face_checked(self) -> Face:
        """Face of the card. Caller must check ``is_face()`` first."""
        if self.face is None:
            raise CardAccessError(f"{self} is a pip card and has no face")
        return self.face

    def points(self) -> float:
        if self.face is None:
            return LOW_CARD_POINTS
        return FACE_POINTS[self.face]

    def rank(self, theme: Theme) -> int:
        if theme.is_color() and theme.color_checked() == self.color:
            return self.number
        return 0

    def __str__(self) -> str:
        label = self.face.letter if self.face is not None else str(self.number)
        return f"{label}{self.color.symbol}"


@dataclass(frozen=True)
class TrumpCard(Card):
    """
    A trump: numbered 1..21, or the Fool (``number is None``).

    The Fool counts as an oudler but never wins a trick.
    """

    number: Optional[int] = None

    def __post_init__(self) -> None:
        if self.number is None:
            return
        if not _is_card_number(self.number) or not MIN_TRUMP <= self.number <= MAX_TRUMP:
            raise TrumpValueError(self.number)

    @classmethod
    def new_trump_card(cls, value: int) -> "TrumpCard":
        """Raises TrumpValueError unless 1 <= value <= 21."""
        if value is None:
            raise TrumpValueError(value)
        return cls(number=value)

    @classmethod
    def little_one(cls) -> "TrumpCard":
        return cls(number=LITTLE_ONE)

    @classmethod
    def the_world(cls) -> "TrumpCard":
        return cls(number=THE_WORLD)

    @classmethod
    def fool(cls) -> "TrumpCard":
        return cls()

    def is_fool(self) -> bool:
        return self.number is None

    def is_oudler(self) -> bool:
        return self.number in (None, LITTLE_ONE, THE_WORLD)

    def points(self) -> float:
        return OUDLER_POINTS if self.is_oudler() else LOW_CARD_POINTS

    def rank(self, theme: Theme) -> int:
        if self.number is None:
            return 0
        if theme.is_color():
            return MAX_COLOR_RANK + self.number
        return self.number

    def __str__(self) -> str:
        if self.number is None:
            return "Fool"
        return f"T{self.number}"


FOOL = TrumpCard.fool()


__all__ = [
    "Color",
    "Face",
    "Theme",
    "TRUMP_THEME",
    "Card",
    "ColorCard",
    "TrumpCard",
    "FOOL",
]
