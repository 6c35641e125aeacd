"""Timing of the splash screen animation."""

from __future__ import annotations

from typing import Optional

from awgen.ui.menu import MainMenuState

INIT_TIME = 1.0
"""Seconds before the icon starts to fade in."""

FADE_TIME = 1.0
"""Seconds taken to fade the icon in or out."""

HOLD_TIME = 1.5
"""Seconds the icon stays fully visible."""

END_TIME = 1.0
"""Seconds of black after the fade-out before leaving the splash screen."""

SPLASH_DURATION = INIT_TIME + FADE_TIME + HOLD_TIME + FADE_TIME + END_TIME
"""Seconds from the start of the splash screen until it ends."""


def splash_alpha(seconds: float) -> float:
    """Opacity of the splash icon ``seconds`` after the splash screen appeared."""
    if seconds < INIT_TIME:
        return 0.0
    if seconds < INIT_TIME + FADE_TIME:
        return (seconds - INIT_TIME) / FADE_TIME
    if seconds < INIT_TIME + FADE_TIME + HOLD_TIME:
        return 1.0
    if seconds < INIT_TIME + FADE_TIME + HOLD_TIME + FADE_TIME:
        return 1.0 - (seconds - INIT_TIME - FADE_TIME - HOLD_TIME) / FADE_TIME
    return 0.0


def splash_next_state(seconds: float, dev_mode: bool) -> Optional[MainMenuState]:
    """The state to move to once the splash is over, or None while it runs."""
    if seconds < SPLASH_DURATION:
        return None
    return MainMenuState.EDITOR if dev_mode else MainMenuState.PLAYER