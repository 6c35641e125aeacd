"""Main menu states."""

from __future__ import annotations

from enum import Enum


class MainMenuState(Enum):
    """The top-level state of the application."""

    INIT = "Init"
    SPLASH = "Splash"
    EDITOR = "Editor"
    PLAYER = "Player"

    @classmethod
    def default(cls) -> MainMenuState:
        """The state the application starts in."""
        return cls.INIT

    def is_in_game(self) -> bool:
        """Whether this is a playable state: the editor or the player."""
        return self in (MainMenuState.EDITOR, MainMenuState.PLAYER)