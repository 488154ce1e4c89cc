"""The application: a set of named screens and the one currently shown."""

from __future__ import annotations

from typing import Optional

from mcg_visual.screen import MainMenu, Navigator, ScreenWidget

MAIN_SCREEN = "main"


class ScreenExistsError(KeyError):
    """Raised when a screen name is registered a second time."""


def log(message: str) -> None:
    """Write a line of diagnostic output."""
    print(message)


class App:
    """Keeps the registered screens and runs whichever one is current.

    A screen switches to another by setting the name held by the shared
    navigator; an unknown name falls back to the main screen.
    """

    def __init__(self, main_screen: Optional[ScreenWidget] = None) -> None:
        self.default_screen: ScreenWidget = (
            main_screen if main_screen is not None else MainMenu()
        )
        self.navigator = Navigator(MAIN_SCREEN)
        self._screens: dict[str, ScreenWidget] = {MAIN_SCREEN: self.default_screen}

    def register_screen(self, name: str, screen: ScreenWidget) -> None:
        """Add a screen under ``name``; a name can be taken only once."""
        if name in self._screens:
            raise ScreenExistsError(name)
        self._screens[name] = screen

    def current_screen(self) -> str:
        """The name of the screen that is to be shown."""
        return self.navigator.current

    def active_screen(self) -> ScreenWidget:
        """The screen that the next frame runs."""
        return self._screens.get(self.navigator.current, self.default_screen)

    def update(self) -> list[str]:
        """Run one frame of the active screen and return what it shows."""
        return self.active_screen().update(self.navigator)