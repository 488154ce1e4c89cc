"""A conventional 52-card deck and simple layouts for it."""

from __future__ import annotations

import math
import random
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

from mcg_visual.card import MEDIA_ROOT
from mcg_visual.geometry import Rect, Vec2


def _checked_index(enum_cls: type[IntEnum], index: int) -> IntEnum:
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"index must be an int, not {type(index).__name__}")
    if not 0 <= index < len(enum_cls):
        raise ValueError(f"Invalid index: {index}")
    return enum_cls(index)


class Suit(IntEnum):
    """The four suits, in their fixed order."""

    HEART = 0
    DIAMOND = 1
    CLUB = 2
    SPADE = 3

    @classmethod
    def from_index(cls, index: int) -> Suit:
        return _checked_index(cls, index)

    def __str__(self) -> str:
        return self.name.capitalize()


class Rank(IntEnum):
    """The thirteen ranks, from Ace up to King."""

    ACE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7
    NINE = 8
    TEN = 9
    JACK = 10
    QUEEN = 11
    KING = 12

    @classmethod
    def from_index(cls, index: int) -> Rank:
        return _checked_index(cls, index)

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class ConventionalCard:
    """A card of the conventional deck, placed somewhere on the table."""

    suit: Suit = Suit.HEART
    rank: Rank = Rank.ACE
    pos: Vec2 = field(default_factory=Vec2)

    @classmethod
    def all_cards(cls) -> Iterator[ConventionalCard]:
        """Every card of the deck, suit by suit, each suit from Ace to King."""
        for suit in Suit:
            for rank in Rank:
                yield cls(suit, rank)

    @classmethod
    def new_random(cls, rng: Optional[random.Random] = None) -> ConventionalCard:
        """A random card at a random position within 1000 x 1000."""
        rng = rng if rng is not None else random.Random()
        rank = Rank(rng.randrange(len(Rank)))
        suit = Suit(rng.randrange(len(Suit)))
        x = float(rng.randrange(1000))
        y = float(rng.randrange(1000))
        return cls(suit, rank, Vec2(x, y))

    def img_path(self) -> str:
        return f"{MEDIA_ROOT}/img_cards/{int(self.rank) + 1}_{str(self.suit).lower()}.png"


def _saturating_index(value: float) -> int:
    if math.isnan(value) or value <= 0:
        return 0
    if math.isinf(value):
        return 2**64 - 1
    return int(value)


@dataclass
class Stack:
    """A pile of cards, each drawn slightly offset from the one below."""

    cards: list = field(default_factory=list)
    pos: Vec2 = field(default_factory=lambda: Vec2(314.15, 271.828))
    inner_margin: int = 5
    max_cards: int = 5

    def size(self) -> Vec2:
        return Vec2(100.0 + self.max_cards, 144.0 + self.max_cards)

    def card_pos(self, idx: int) -> Vec2:
        x = float(min(idx, self.max_cards))
        return Vec2(x, -x + self.inner_margin)


@dataclass
class HandLayout:
    """A row of cards held in a hand."""

    cards: list = field(default_factory=list)
    pos: Vec2 = field(default_factory=lambda: Vec2(69.0, 420.0))
    inner_margin: int = 5
    max_cards: int = 5

    def size(self) -> Vec2:
        return Vec2(
            (100.0 + self.inner_margin) * self.max_cards - self.inner_margin,
            144.0,
        )

    def selected_index(self, pointer: Optional[Vec2], area: Rect) -> Optional[int]:
        """The card under the pointer, or None when the pointer is outside."""
        if pointer is None or not area.contains(pointer):
            return None
        left, right = area.left(), area.right()
        width = right - left
        offset = pointer.x - left
        if width == 0:
            return 0
        return _saturating_index(len(self.cards) * offset / width)