"""Card encodings and card image configurations."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Optional

from mcg_visual.geometry import Vec2

MEDIA_ROOT = "http://127.0.0.1:8080/media"
_FALLBACK_IMAGE_SIZE = Vec2(24.0, 24.0)


class CardEncoding(ABC):
    """How a single card on the table is described."""

    @abstractmethod
    def t(self) -> Optional[int]:
        """The card type, or None when it is not visible."""

    @abstractmethod
    def is_masked(self) -> bool:
        """Whether the card lies face down."""

    def is_open(self) -> bool:
        return not self.is_masked()

    @abstractmethod
    def mask(self) -> CardEncoding:
        """The same card turned face down."""

    @abstractmethod
    def open(self) -> CardEncoding:
        """The same card turned face up, if its type is known."""


@dataclass(frozen=True)
class SimpleCard(CardEncoding):
    """A card that is either open with a type or masked with an optional type."""

    value: Optional[int]
    concealed: bool = False

    def __post_init__(self) -> None:
        if self.value is not None and self.value < 0:
            raise ValueError(f"card type must not be negative: {self.value}")
        if not self.concealed and self.value is None:
            raise ValueError("an open card needs a type")

    @classmethod
    def opened(cls, t: int) -> SimpleCard:
        return cls(t, concealed=False)

    @classmethod
    def masked(cls, t: Optional[int] = None) -> SimpleCard:
        return cls(t, concealed=True)

    def t(self) -> Optional[int]:
        return None if self.concealed else self.value

    def is_masked(self) -> bool:
        return self.concealed

    def mask(self) -> SimpleCard:
        if self.concealed:
            return self
        return SimpleCard.masked(self.value)

    def open(self) -> SimpleCard:
        if self.concealed and self.value is not None:
            return SimpleCard.opened(self.value)
        return self

    def __repr__(self) -> str:
        if self.concealed:
            return f"Masked({self.value!r})"
        return f"Open({self.value!r})"


def _ratio(available: float, extent: float) -> float:
    if extent == 0:
        if available == 0 or math.isnan(available):
            return math.nan
        return math.copysign(math.inf, available)
    return available / extent


def _scale_to_fit(image_size: Vec2, available: Vec2, maintain_aspect_ratio: bool) -> Vec2:
    if not maintain_aspect_ratio:
        return available
    ratio_x = _ratio(available.x, image_size.x)
    ratio_y = _ratio(available.y, image_size.y)
    ratio = ratio_x if ratio_x < ratio_y else ratio_y
    if not math.isfinite(ratio):
        ratio = 1.0
    return image_size * ratio


@dataclass(frozen=True)
class CardImage:
    """A card picture to be shown, with how it should be scaled."""

    uri: str
    show_loading_spinner: bool = True
    maintain_aspect_ratio: bool = True
    tint: Optional[str] = None

    def calc_size(self, available: Vec2, natural_size: Optional[Vec2] = None) -> Vec2:
        """The size the image takes when it must fit into ``available``."""
        source = natural_size if natural_size is not None else _FALLBACK_IMAGE_SIZE
        return _scale_to_fit(source, available, self.maintain_aspect_ratio)


class CardConfig(ABC):
    """Describes the set of card types and how each one is pictured."""

    @abstractmethod
    def img(self, card: CardEncoding) -> CardImage:
        """The picture for a card."""

    @abstractmethod
    def type_count(self) -> int:
        """How many distinct card types there are."""

    @abstractmethod
    def width_bits(self) -> int:
        """Bits needed to encode a card type."""

    @property
    @abstractmethod
    def natural_size(self) -> Vec2:
        """The size of the card pictures at their native resolution."""


@dataclass(frozen=True, repr=False)
class DirectoryCardType(CardConfig):
    """Card types given by the image files of one media directory.

    The type order follows the lexicographic order of the file names.
    """

    path: str
    img_names: tuple[str, ...] = field(default_factory=tuple)
    size: Vec2 = field(default_factory=Vec2)

    def __post_init__(self) -> None:
        object.__setattr__(self, "img_names", tuple(self.img_names))

    @classmethod
    def from_file_listing(
        cls, files: Iterable[Sequence[str]], natural_size: Vec2
    ) -> DirectoryCardType:
        """Build a card type from ``(name, path, mime type)`` entries.

        The directory is taken from the first entry's path; only entries whose
        mime type is an image become card types.
        """
        path: Optional[str] = None
        names: list[str] = []
        for entry in files:
            if not entry:
                raise ValueError("every file has a name")
            name = entry[0]
            if path is None:
                if len(entry) < 2:
                    raise ValueError(f"file {name!r} has no path")
                suffix = f"/{name}"
                full_path = entry[1]
                if not full_path.endswith(suffix):
                    raise ValueError(f"path {full_path!r} does not end in {suffix!r}")
                path = full_path[: -len(suffix)]
            if len(entry) > 2 and entry[2].startswith("image"):
                names.append(name)
        return cls(path or "", tuple(sorted(names)), natural_size)

    @property
    def natural_size(self) -> Vec2:
        return self.size

    def img(self, card: CardEncoding) -> CardImage:
        t = card.t()
        name = self.img_names[t if t is not None else 0]
        return CardImage(
            f"{MEDIA_ROOT}/{self.path}/{name}",
            show_loading_spinner=True,
            maintain_aspect_ratio=True,
        )

    def type_count(self) -> int:
        return len(self.img_names)

    def width_bits(self) -> int:
        return max(self.type_count() - 1, 0).bit_length()

    def all_images(self) -> Iterator[str]:
        return iter(self.img_names)

    def __repr__(self) -> str:
        return (
            f"DirectoryCardType(path={self.path!r}, T={self.type_count()}, "
            f"natural_size={self.natural_size!r})"
        )