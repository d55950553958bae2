"""
Unit tests for keyboard layout handling
"""

import pygame
import pytest

from paddle_duel.core.controls import Key
from paddle_duel.utils.config import (
    KEYBOARD_LAYOUTS,
    KeyboardLayout,
    game_config,
    game_config_tmp,
)
from paddle_duel.utils.keyboard_layout import (
    auto_configure_layout,
    detect_system_layout,
    keys_held_from_pressed,
    list_available_layouts,
)


class TestKeysHeld:
    """Test translation of physical keys to logical keys"""

    def test_qwerty_mapping(self):
        pressed = {pygame.K_w: True, pygame.K_DOWN: True, pygame.K_a: True}
        assert keys_held_from_pressed(pressed, KEYBOARD_LAYOUTS["qwerty"]) == {Key.W, Key.DOWN}

    def test_azerty_uses_z(self):
        """Test Z is the up key of the left player on AZERTY keyboards"""
        layout = KEYBOARD_LAYOUTS["azerty"]
        assert keys_held_from_pressed({pygame.K_z: True}, layout) == {Key.W}
        assert keys_held_from_pressed({pygame.K_w: True}, layout) == set()

    def test_released_keys_ignored(self):
        pressed = {pygame.K_UP: False, pygame.K_s: True}
        assert keys_held_from_pressed(pressed, KEYBOARD_LAYOUTS["qwerty"]) == {Key.S}

    def test_sequence_input(self):
        """Test a key-state sequence indexed by key code is accepted"""
        pressed = [False] * (max(pygame.K_w, pygame.K_s) + 1)
        pressed[pygame.K_s] = True
        layout = KeyboardLayout(
            name="test",
            wasd_keys={"up": pygame.K_w, "down": pygame.K_s},
            arrow_keys={"up": pygame.K_a, "down": pygame.K_d},
            display_names={"up": "W", "down": "S"},
        )
        assert keys_held_from_pressed(pressed, layout) == {Key.S}

    def test_configured_layout_by_default(self):
        with game_config_tmp(KEYBOARD_LAYOUT="azerty"):
            assert keys_held_from_pressed({pygame.K_z: True}) == {Key.W}


class TestLayoutDetection:
    """Test keyboard layout detection"""

    @pytest.mark.parametrize(
        "lang,expected", [("fr_FR", "azerty"), ("de_DE", "qwertz"), ("en_US", "qwerty")]
    )
    def test_detect_from_locale(self, monkeypatch, lang, expected):
        monkeypatch.setattr("locale.getlocale", lambda: (lang, "UTF-8"))
        assert detect_system_layout() == expected

    def test_detect_falls_back_to_lang(self, monkeypatch):
        monkeypatch.setattr("locale.getlocale", lambda: (None, None))
        monkeypatch.setenv("LANG", "de_AT.UTF-8")
        assert detect_system_layout() == "qwertz"

    def test_auto_configure(self, monkeypatch):
        monkeypatch.setattr("locale.getlocale", lambda: ("fr_BE", "UTF-8"))
        with game_config_tmp(KEYBOARD_LAYOUT="qwerty"):
            assert auto_configure_layout() == "azerty"
            assert game_config.KEYBOARD_LAYOUT == "azerty"

    def test_list_available_layouts(self):
        assert list_available_layouts() == {
            "qwerty": "QWERTY",
            "azerty": "AZERTY",
            "qwertz": "QWERTZ",
        }
