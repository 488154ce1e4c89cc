"""The screens of the game: menus, setup, the game table and drag and drop tests."""

from __future__ import annotations

import logging
import sys
import weakref
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Union

from mcg_visual.card import CardConfig, SimpleCard
from mcg_visual.field import DNDSelector, SimpleField, SimpleFieldKind
from mcg_visual.geometry import Vec2

logger = logging.getLogger(__name__)

END_OF_COLUMN = sys.maxsize
_CARD_BOX = Vec2(100.0, 150.0)


@dataclass
class Navigator:
    """Holds the name of the screen that is to be shown next."""

    current: str = "main"


class ScreenWidget(ABC):
    """A screen that is drawn once per frame and may switch to another screen."""

    @abstractmethod
    def update(self, navigator: Navigator) -> list[str]:
        """Run one frame and return the lines of text the screen shows."""


class MainMenu(ScreenWidget):
    """The entry menu that leads to every other screen."""

    BUTTONS = {
        "Start": "game_setup",
        "Drag & Drop Game": "game_dnd_setup",
        "Settings": "settings",
        "Drag & Drop Test": "dnd_test",
        "Print Screen": None,
    }

    def press(self, button: str, navigator: Navigator) -> None:
        """React to a click on the named button."""
        if button not in self.BUTTONS:
            raise ValueError(f"unknown button: {button!r}")
        target = self.BUTTONS[button]
        if target is None:
            logger.info("%s", navigator.current)
            return
        logger.info("%s opened", target)
        navigator.current = target

    def update(self, navigator: Navigator) -> list[str]:
        return list(self.BUTTONS)


@dataclass
class GameConfig:
    """The players' fields and the shared stack of one game."""

    players: list[tuple[str, SimpleField]]
    stack: SimpleField

    def move_card(self, src: DNDSelector, dst: DNDSelector) -> None:
        """Move a card from ``src`` to ``dst``.

        A card taken from a place that is only an index is not moved; a card
        dropped onto such a place is lost.
        """
        if src == dst:
            return
        if src.is_player:
            card = self.players[src.owner][1].remove(src.slot)
        elif src.is_stack:
            if not self.stack.cards:
                raise IndexError("the stack is empty")
            card = self.stack.cards.pop()
        else:
            return
        if dst.is_player:
            self.players[dst.owner][1].insert(dst.slot, card)
        elif dst.is_stack:
            self.stack.cards.append(card)


class Game(ScreenWidget):
    """The game table: the stack next to one player's field."""

    def __init__(self) -> None:
        self.game_config: Optional[GameConfig] = None
        self.image_idx = 0
        self.player_idx = 0

    def _config(self) -> GameConfig:
        if self.game_config is None:
            raise RuntimeError("no game configured")
        return self.game_config

    def image_names(self) -> list[str]:
        return list(self._config().stack.card_config.img_names)

    def player_names(self) -> list[str]:
        return [name for name, _ in self._config().players]

    def select_image(self, idx: int) -> None:
        if not 0 <= idx < len(self.image_names()):
            raise IndexError(f"no image at index {idx}")
        self.image_idx = idx

    def select_player(self, idx: int) -> None:
        if not 0 <= idx < len(self.player_names()):
            raise IndexError(f"no player at index {idx}")
        self.player_idx = idx

    def exit(self, navigator: Navigator) -> None:
        logger.info("back to main menu")
        navigator.current = "main"

    def update(self, navigator: Navigator) -> list[str]:
        config = self._config()
        images = self.image_names()
        names = self.player_names()
        return [
            f'Image Directory: "{config.stack.card_config.path}"',
            f"Images: {images[self.image_idx]}",
            f"Player: {names[self.player_idx]}",
        ]


@dataclass(frozen=True)
class Location:
    """A row within a column of the drag and drop test."""

    col: int
    row: int


def _default_columns() -> list[list[str]]:
    return [
        ["Item A", "Item B", "Item C", "Item D"],
        ["Item E", "Item F", "Item G"],
        ["Item H", "Item I", "Item J", "Item K"],
    ]


@dataclass
class DNDTest(ScreenWidget):
    """Columns of text items that can be reordered by dragging."""

    columns: list[list[str]] = field(default_factory=_default_columns)

    def move_item(self, source: Location, target: Location) -> None:
        """Move the item at ``source`` so that it lands at ``target``.

        A target row of ``END_OF_COLUMN`` or beyond appends to the column.
        """
        row = target.row
        if source.col == target.col and source.row < row:
            row -= 1
        item = self.columns[source.col].pop(source.row)
        column = self.columns[target.col]
        column.insert(min(row, len(column)), item)

    def exit(self, navigator: Navigator) -> None:
        logger.info("back to main menu")
        navigator.current = "main"

    def update(self, navigator: Navigator) -> list[str]:
        lines = [
            "This is a simple example of drag-and-drop in egui.",
            "Drag items between columns.",
        ]
        lines.extend(" | ".join(column) for column in self.columns)
        return lines


class CardsTestDND(ScreenWidget):
    """Moves cards between the stack and two players by drag and drop."""

    def __init__(self) -> None:
        self.game_config: Optional[GameConfig] = None
        self.drag: Optional[DNDSelector] = None
        self.drop: Optional[DNDSelector] = None

    def collect_payloads(self) -> None:
        """Take the drag and drop notes from the stack and the first two players."""
        cfg = self.game_config
        if cfg is None:
            return
        sources = [(cfg.stack, lambda idx: DNDSelector.stack())]
        for player in (0, 1):
            sources.append(
                (cfg.players[player][1], lambda idx, p=player: DNDSelector.player(p, idx))
            )
        for field_, selector in sources:
            dragged, dropped = field_.take_payload()
            if dropped is not None:
                self.drop = selector(dropped)
            elif dragged is not None and self.drag is None:
                self.drag = selector(dragged)

    def resolve(self) -> bool:
        """Move the card once both ends of a drag are known."""
        logger.debug("Drag: %r\t Drop: %r", self.drag, self.drop)
        if self.game_config is None or self.drag is None or self.drop is None:
            return False
        self.game_config.move_card(self.drag, self.drop)
        self.drag = None
        self.drop = None
        return True

    def exit(self, navigator: Navigator) -> None:
        navigator.current = "main"

    def update(self, navigator: Navigator) -> list[str]:
        cfg = self.game_config
        if cfg is None:
            return []
        self.collect_payloads()
        self.resolve()
        return ["Stack", cfg.players[0][0], cfg.players[1][0]]


GameWidget = Union[Game, CardsTestDND]


class GameSetupScreen(ScreenWidget):
    """Chooses the card directory and the number of players, then starts a game."""

    def __init__(
        self,
        game_widget: GameWidget,
        game_screen: str = "game",
        show_path: bool = False,
    ) -> None:
        self.directory: Optional[CardConfig] = None
        self.players = 2
        self.game_screen = game_screen
        self.show_path = show_path
        self._game_widget = weakref.ref(game_widget)

    def select_directory(self, card_type: CardConfig) -> None:
        self.directory = card_type

    def increment_players(self) -> None:
        self.players += 1

    def decrement_players(self) -> None:
        if self.players > 1:
            self.players -= 1

    def generate_config(self) -> Optional[GameConfig]:
        """Deal every card type onto the stack and, in turn, to the players."""
        directory = self.directory
        if directory is None:
            return None
        if self.players < 1:
            raise ValueError("a game needs at least one player")
        players = [
            (
                str(i),
                SimpleField(directory, max_cards=4, selectable=True).with_max_card_size(
                    _CARD_BOX
                ),
            )
            for i in range(self.players)
        ]
        stack = SimpleField(directory, kind=SimpleFieldKind.STACK).with_max_card_size(
            _CARD_BOX
        )
        for i in range(directory.type_count()):
            stack.push(SimpleCard.opened(i))
            players[i % self.players][1].push(SimpleCard.opened(i))
        return GameConfig(players, stack)

    def start_game(self, navigator: Navigator) -> bool:
        """Hand a new configuration to the game screen and switch to it."""
        game = self._game_widget()
        if game is None:
            return False
        config = self.generate_config()
        if config is None:
            return False
        game.game_config = config
        navigator.current = self.game_screen
        return True

    def back(self, navigator: Navigator) -> None:
        navigator.current = "main"

    def update(self, navigator: Navigator) -> list[str]:
        if self.directory is None:
            label = "None"
        elif self.show_path:
            label = self.directory.path
        else:
            label = repr(self.directory)
        return [f"Selected Directory: {label}", f"# Players {self.players}"]