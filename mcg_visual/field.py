"""Card fields: stacks and horizontal rows of cards with drag and drop state."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from mcg_visual.card import CardConfig, CardEncoding, SimpleCard
from mcg_visual.geometry import Rect, Vec2


class _Kind(Enum):
    PLAYER = "Player"
    STACK = "Stack"
    INDEX = "Index"


@dataclass(frozen=True)
class DNDSelector:
    """Names the place a dragged card came from or was dropped onto."""

    kind: _Kind
    owner: Optional[int] = None
    slot: Optional[int] = None

    @classmethod
    def player(cls, player: int, index: int) -> DNDSelector:
        return cls(_Kind.PLAYER, player, index)

    @classmethod
    def stack(cls) -> DNDSelector:
        return cls(_Kind.STACK)

    @classmethod
    def index(cls, index: int) -> DNDSelector:
        return cls(_Kind.INDEX, None, index)

    @property
    def is_player(self) -> bool:
        return self.kind is _Kind.PLAYER

    @property
    def is_stack(self) -> bool:
        return self.kind is _Kind.STACK

    @property
    def is_index(self) -> bool:
        return self.kind is _Kind.INDEX

    def __repr__(self) -> str:
        if self.kind is _Kind.PLAYER:
            return f"Player({self.owner}, {self.slot})"
        if self.kind is _Kind.INDEX:
            return f"Index({self.slot})"
        return "Stack"


class SimpleFieldKind(Enum):
    STACK = "Stack"
    HORIZONTAL = "Horizontal"


def _saturating_index(value: float) -> int:
    if math.isnan(value) or value <= 0:
        return 0
    if math.isinf(value):
        return 2**64 - 1
    return int(value)


def _check_index(idx: int) -> None:
    if idx < 0:
        raise IndexError(f"card index must not be negative: {idx}")


@dataclass(repr=False)
class SimpleField:
    """A field of cards laid out either as a stack or as a horizontal row."""

    card_config: CardConfig
    cards: list = field(default_factory=list)
    kind: SimpleFieldKind = SimpleFieldKind.HORIZONTAL
    margin: int = 4
    max_cards: int = 5
    selectable: bool = True
    draggable: bool = True
    _max_card_size: Optional[Vec2] = field(default=None, init=False)
    _drag_payload: Optional[int] = field(default=None, init=False)
    _drop_payload: Optional[int] = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.cards = list(self.cards)

    def with_max_card_size(self, max_card_size: Vec2) -> SimpleField:
        """Scale the cards to fit into ``max_card_size``; returns the field."""
        card = self.cards[0] if self.cards else SimpleCard.opened(0)
        image = self.card_config.img(card)
        self._max_card_size = image.calc_size(max_card_size, self.card_config.natural_size)
        return self

    def card_size(self) -> Vec2:
        if self._max_card_size is not None:
            return self._max_card_size
        return self.card_config.natural_size

    def is_stack(self) -> bool:
        return self.kind is SimpleFieldKind.STACK

    def is_horizontal(self) -> bool:
        return self.kind is SimpleFieldKind.HORIZONTAL

    def record_drag(self, idx: int) -> None:
        """Note the card being dragged, unless a drag is already noted."""
        if self._drag_payload is None:
            self._drag_payload = idx

    def record_drop(self, idx: int) -> None:
        """Note where a card got dropped."""
        self._drop_payload = idx

    def take_payload(self) -> tuple[Optional[int], Optional[int]]:
        """Return and clear the dragged index and the drop index."""
        payload = (self._drag_payload, self._drop_payload)
        self._drag_payload = None
        self._drop_payload = None
        return payload

    def push(self, card: CardEncoding) -> None:
        self.cards.append(card)

    def remove(self, idx: int) -> CardEncoding:
        _check_index(idx)
        return self.cards.pop(idx)

    def pop(self) -> Optional[CardEncoding]:
        return self.cards.pop() if self.cards else None

    def insert(self, idx: int, card: CardEncoding) -> None:
        """Insert a card at ``idx``; indices past the end append."""
        _check_index(idx)
        if idx >= len(self.cards):
            self.cards.append(card)
        else:
            self.cards.insert(idx, card)

    def content_size(self) -> Vec2:
        size = self.card_size()
        if self.is_stack():
            return size + Vec2(float(self.max_cards), float(self.max_cards))
        return size + Vec2(
            (self.max_cards - 1.0) * (size.x + self.margin),
            float(self.margin),
        )

    def card_pos(self, idx: int) -> Vec2:
        """Offset of the card at ``idx`` from the field's origin."""
        if self.is_stack():
            x = float(min(idx, self.max_cards))
            return Vec2(x, -x)
        count = len(self.cards)
        step = self.card_size().x + self.margin
        if count <= self.max_cards:
            x = step * idx
        else:
            x = step * idx * (self.max_cards - 1) / (count - 1)
        return Vec2(float(x), 0.0)

    def horizontal_drag_size(self) -> Vec2:
        size = self.card_size()
        return Vec2(self.card_pos(1).x - self.card_pos(0).x, size.y)

    def selection_at(self, pointer: Optional[Vec2], area: Rect) -> Optional[int]:
        """The index of the card under the pointer in a row, or None."""
        if pointer is None or not area.contains(pointer):
            return None
        count = len(self.cards)
        if count > self.max_cards:
            extent = area.right() - area.left()
        else:
            extent = count * (self.card_size().x + self.margin) - self.margin
        numerator = count * (pointer.x - area.left())
        if extent == 0:
            if numerator == 0:
                return 0
            return _saturating_index(math.copysign(math.inf, numerator))
        return _saturating_index(numerator / extent)

    def __repr__(self) -> str:
        return (
            f"SimpleField(kind={self.kind.value}, card_config={self.card_config!r}, "
            f"cards={self.cards!r})"
        )