"""
Errors raised by the card model.

Invalid construction values (a pip of 0, trump 22, ...) are ``ValueError``
subclasses the caller can recover from. Calling an accessor against its
precondition is a ``CardAccessError``: a bug in the calling code.
"""
from __future__ import annotations


class TarotValueError(ValueError):
    """A numeric value that does not correspond to any card."""

    kind = "tarot card"

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"the value {value} doesn't represent any {self.kind}")


class PipValueError(TarotValueError):
    """Pip numbers must be in 1..10."""

    kind = "pip card"


class TrumpValueError(TarotValueError):
    """Trump numbers must be in 1..21."""

    kind = "trump card"


class FaceValueError(TarotValueError):
    """A face card whose number is not the face's own number."""

    def __init__(self, value: int, face_name: str) -> None:
        self.kind = f"{face_name.lower()} card"
        super().__init__(value)


class CardParseError(ValueError):
    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"unknown card label: {text!r}")


class CardAccessError(RuntimeError):
    """An accessor was called on a value that does not satisfy its precondition."""


class InvalidThemeAccess(CardAccessError):
    """color_checked() called on a trump theme."""


__all__ = [
    "TarotValueError",
    "PipValueError",
    "TrumpValueError",
    "FaceValueError",
    "CardParseError",
    "CardAccessError",
    "InvalidThemeAccess",
]
