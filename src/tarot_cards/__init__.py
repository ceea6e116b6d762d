"""French Tarot card model: card identity, points and trick rank."""

__version__ = "0.1.0"

from .errors import (
    CardAccessError,
    CardParseError,
    FaceValueError,
    InvalidThemeAccess,
    PipValueError,
    TarotValueError,
    TrumpValueError,
)
from .cards import Card, Color, ColorCard, Face, FOOL, Theme, TRUMP_THEME, TrumpCard
from .deck import (
    DECK_POINTS,
    DECK_SIZE,
    count_oudlers,
    make_color_card,
    make_deck_78,
    parse_card,
    total_points,
)
from .encoding import (
    FOOL_INDEX,
    NUM_CARDS,
    card_from_index,
    card_index,
    decode_card_set,
    encode_card_set,
    rank_vector,
)
