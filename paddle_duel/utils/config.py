"""
Paddle Duel game configuration with Pydantic validation
"""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pygame
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationInfo
from pydantic import field_validator
from pydantic import model_validator

logger = logging.getLogger(__name__)


@dataclass
class KeyboardLayout:
    """Physical keys bound to each logical control pair"""

    name: str
    wasd_keys: dict[str, int]
    arrow_keys: dict[str, int]
    display_names: dict[str, str]


_ARROW_KEYS = {"up": pygame.K_UP, "down": pygame.K_DOWN}

KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY",
        wasd_keys={"up": pygame.K_w, "down": pygame.K_s},
        arrow_keys=_ARROW_KEYS,
        display_names={"up": "W", "down": "S"},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        wasd_keys={"up": pygame.K_z, "down": pygame.K_s},  # Z instead of W
        arrow_keys=_ARROW_KEYS,
        display_names={"up": "Z", "down": "S"},
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ",
        wasd_keys={"up": pygame.K_w, "down": pygame.K_s},
        arrow_keys=_ARROW_KEYS,
        display_names={"up": "W", "down": "S"},
    ),
}


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    model_config = {"validate_assignment": True}

    # Field dimensions
    FIELD_WIDTH: int = Field(default=800, gt=0, description="Field width in pixels")
    FIELD_HEIGHT: int = Field(default=600, gt=0, description="Field height in pixels")

    # Player paddles
    PADDLE_WIDTH: float = Field(default=20.0, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: float = Field(default=100.0, gt=0, description="Paddle height in pixels")
    PADDLE_SPEED: float = Field(default=500.0, gt=0, description="Paddle speed (px/s)")

    # Ball physics
    BALL_SIZE: float = Field(default=20.0, gt=0, description="Ball side length in pixels")
    BALL_BASE_SPEED: float = Field(default=100.0, gt=0, description="Speed after each reset")
    BALL_SPEED_INCREASE: float = Field(
        default=25.0, ge=0, description="Speed added at every ramp period"
    )
    BALL_SPEED_INCREASE_INTERVAL: float = Field(
        default=10.0, gt=0, description="Ramp period in seconds"
    )

    # Gameplay
    MAX_SCORE: int = Field(default=11, gt=0, description="Winning score")

    # Controls
    KEYBOARD_LAYOUT: str = Field(default="qwerty", description="Keyboard layout name")

    # Headless runner
    FPS: int = Field(default=60, gt=0, description="Simulated frames per second")

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in KEYBOARD_LAYOUTS:
            raise ValueError(
                f"Unknown keyboard layout '{v}'. Available: {list(KEYBOARD_LAYOUTS.keys())}"
            )
        return v

    @field_validator("BALL_SIZE")
    @classmethod
    def validate_ball_size(cls, v: float, info: ValidationInfo) -> float:
        """The ball must fit between the paddles' vertical extent"""
        paddle_height = info.data.get("PADDLE_HEIGHT", 100.0) if info.data else 100.0
        if v > paddle_height:
            raise ValueError(f"BALL_SIZE ({v}) must not exceed PADDLE_HEIGHT ({paddle_height})")
        return v

    @model_validator(mode="after")
    def validate_field_dimensions(self) -> "GameConfig":
        """Validate field is large enough for game elements"""
        min_width = 2 * self.PADDLE_WIDTH + self.BALL_SIZE
        if self.FIELD_WIDTH < min_width:
            raise ValueError(f"FIELD_WIDTH must be at least {min_width} pixels")

        if self.FIELD_HEIGHT < self.PADDLE_HEIGHT:
            raise ValueError(f"FIELD_HEIGHT must be at least {self.PADDLE_HEIGHT} pixels")

        return self

    def get_keyboard_layout(self) -> KeyboardLayout:
        """Get the current keyboard layout configuration"""
        return KEYBOARD_LAYOUTS.get(self.KEYBOARD_LAYOUT, KEYBOARD_LAYOUTS["qwerty"])

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "paddle_duel_config.json") -> None:
        """Save configuration to a JSON file"""
        with open(Path(filepath), "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "paddle_duel_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        defaults = GameConfig()
        for field_name in type(self).model_fields.keys():
            # Bypass per-assignment validation: intermediate states may be inconsistent
            object.__setattr__(self, field_name, getattr(defaults, field_name))


# Global configuration instance with validation
game_config = GameConfig()


def load_config_from_file(filepath: str = "paddle_duel_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        return False
    except (OSError, ValueError) as e:
        logger.error("Error loading config from %s: %s", filepath, e)
        return False

    for field_name in GameConfig.model_fields.keys():
        object.__setattr__(game_config, field_name, getattr(loaded_config, field_name))
    return True


def _change_values(obj: BaseModel, changed: dict[str, Any], **kwargs: Any) -> None:
    """Helper to change config values temporarily, recording the previous ones in `changed`"""
    for name, new_value in kwargs.items():
        old_value = getattr(obj, name)
        setattr(obj, name, new_value)
        changed[name] = old_value


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        _change_values(game_config, old_values, **kwargs)
        yield
    finally:
        # Undo in reverse order so every intermediate state stays valid
        _change_values(game_config, {}, **dict(reversed(list(old_values.items()))))
