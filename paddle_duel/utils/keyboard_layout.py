"""
Keyboard layout detection and key translation for Paddle Duel
"""

import locale
import os
from collections.abc import Mapping, Sequence

from paddle_duel.core.controls import Key
from paddle_duel.utils.config import KEYBOARD_LAYOUTS, KeyboardLayout, game_config


def detect_system_layout() -> str:
    """
    Detect the most likely keyboard layout based on system locale

    Returns:
        Keyboard layout name (default to 'qwerty' if detection fails)
    """
    system_locale = locale.getlocale()[0] or os.environ.get("LANG", "")
    system_locale = system_locale.lower()

    # Map common locales to keyboard layouts
    if system_locale.startswith("fr"):
        return "azerty"
    elif system_locale.startswith("de"):
        return "qwertz"
    return "qwerty"


def auto_configure_layout() -> str:
    """
    Automatically configure the best keyboard layout

    Returns:
        The selected layout name
    """
    detected = detect_system_layout()
    if detected in KEYBOARD_LAYOUTS:
        game_config.KEYBOARD_LAYOUT = detected
    return game_config.KEYBOARD_LAYOUT


def list_available_layouts() -> dict[str, str]:
    """Get all available keyboard layouts"""
    return {name: layout.name for name, layout in KEYBOARD_LAYOUTS.items()}


def keys_held_from_pressed(
    pressed: Sequence[bool] | Mapping[int, bool], layout: KeyboardLayout | None = None
) -> set[Key]:
    """
    Translate physical key states into the logical keys of the simulation

    Args:
        pressed: Key code -> held flag, e.g. the result of pygame.key.get_pressed()
        layout: Keyboard layout, defaults to the configured one

    Returns:
        Set of logical keys held down
    """
    if layout is None:
        layout = game_config.get_keyboard_layout()

    bindings = {
        Key.UP: layout.arrow_keys["up"],
        Key.DOWN: layout.arrow_keys["down"],
        Key.W: layout.wasd_keys["up"],
        Key.S: layout.wasd_keys["down"],
    }

    if isinstance(pressed, Mapping):
        return {key for key, code in bindings.items() if pressed.get(code, False)}
    return {key for key, code in bindings.items() if pressed[code]}
