"""
Paddle Duel game entities: arena, ball, paddles
"""

from collections.abc import Iterator
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

import numpy as np
from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator

from paddle_duel.utils.config import GameConfig
from paddle_duel.utils.config import game_config


NANOSECONDS = 1_000_000_000


def to_nanoseconds(seconds: float) -> int:
    """Converts seconds to whole nanoseconds, so repeated frame times add up exactly"""
    return round(seconds * NANOSECONDS)


class InputBinding(Enum):
    """Key pair a paddle listens to"""

    ARROWS = "arrows"
    WASD = "wasd"


@dataclass
class Vector2D:
    """Simple 2D vector for positions and velocities"""

    x: float
    y: float

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __iadd__(self, other: "Vector2D") -> "Vector2D":
        self.x += other.x
        self.y += other.y
        return self

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def magnitude(self) -> float:
        return float(np.linalg.norm([self.x, self.y]))

    def normalize(self) -> "Vector2D":
        mag = self.magnitude()
        if mag == 0:
            return Vector2D(0, 0)
        return Vector2D(self.x / mag, self.y / mag)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def copy(self) -> "Vector2D":
        return Vector2D(self.x, self.y)


class Arena(BaseModel):
    """
    Static playfield geometry.

    The origin is the center of the field, x grows to the right and y grows
    upwards, so the field spans [-half_width, half_width] x [-half_height, half_height].
    """

    model_config = {"frozen": True}

    half_width: float = Field(gt=0, description="Half of the field width")
    half_height: float = Field(gt=0, description="Half of the field height")
    paddle_size: tuple[float, float] = Field(description="Paddle (width, height)")
    ball_size: tuple[float, float] = Field(description="Ball (width, height)")

    @field_validator("paddle_size", "ball_size")
    @classmethod
    def validate_size(cls, v: tuple[float, float]) -> tuple[float, float]:
        """Sizes must be strictly positive"""
        if v[0] <= 0 or v[1] <= 0:
            raise ValueError(f"Sizes must be positive, got {v}")
        return v

    @classmethod
    def from_window(
        cls,
        width: float,
        height: float,
        paddle_size: tuple[float, float] | None = None,
        ball_size: tuple[float, float] | None = None,
    ) -> "Arena":
        """Builds the arena from a window size, sizes default to the global config"""
        if paddle_size is None:
            paddle_size = (game_config.PADDLE_WIDTH, game_config.PADDLE_HEIGHT)
        if ball_size is None:
            ball_size = (game_config.BALL_SIZE, game_config.BALL_SIZE)
        return cls(
            half_width=width / 2,
            half_height=height / 2,
            paddle_size=paddle_size,
            ball_size=ball_size,
        )

    @classmethod
    def from_config(cls, config: GameConfig | None = None) -> "Arena":
        """Builds the arena described by a game configuration"""
        config = config or game_config
        return cls.from_window(
            config.FIELD_WIDTH,
            config.FIELD_HEIGHT,
            paddle_size=(config.PADDLE_WIDTH, config.PADDLE_HEIGHT),
            ball_size=(config.BALL_SIZE, config.BALL_SIZE),
        )

    @property
    def paddle_half_size(self) -> tuple[float, float]:
        return (self.paddle_size[0] / 2, self.paddle_size[1] / 2)

    @property
    def ball_half_size(self) -> tuple[float, float]:
        return (self.ball_size[0] / 2, self.ball_size[1] / 2)

    @property
    def paddle_y_limit(self) -> float:
        """Highest center y a paddle may reach (the lowest is its opposite)"""
        return self.half_height - self.paddle_half_size[1]

    @property
    def ball_y_limit(self) -> float:
        """Center y beyond which the ball pokes out of the top (or bottom) wall"""
        return self.half_height - self.ball_half_size[1]


class Ball:
    """Game ball"""

    def __init__(
        self,
        x: float,
        y: float,
        vx: float,
        vy: float,
        speed: float | None = None,
        size: tuple[float, float] | None = None,
    ):
        self.position = Vector2D(x, y)
        # Direction only, the magnitude is NOT normalized and compounds with speed
        self.velocity = Vector2D(vx, vy)
        self.base_speed = speed if speed is not None else game_config.BALL_BASE_SPEED
        self.speed = self.base_speed
        self.size = size if size is not None else (game_config.BALL_SIZE, game_config.BALL_SIZE)
        # Nanoseconds accumulated toward the next speed ramp period
        self.speed_ramp_elapsed_ns = 0

    @property
    def speed_ramp_elapsed(self) -> float:
        """Seconds accumulated toward the next speed ramp period"""
        return self.speed_ramp_elapsed_ns / NANOSECONDS

    @speed_ramp_elapsed.setter
    def speed_ramp_elapsed(self, seconds: float) -> None:
        self.speed_ramp_elapsed_ns = to_nanoseconds(seconds)

    @property
    def half_size(self) -> tuple[float, float]:
        return (self.size[0] / 2, self.size[1] / 2)

    def effective_speed(self) -> float:
        """Distance covered per second: the speed scaled by the direction magnitude"""
        return self.velocity.magnitude() * self.speed

    def reset_to_center(self) -> None:
        """Puts the ball back at the center at base speed, keeping its direction"""
        self.position = Vector2D(0.0, 0.0)
        self.speed = self.base_speed

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision rectangle (left, bottom, width, height)"""
        half_w, half_h = self.half_size
        return (self.position.x - half_w, self.position.y - half_h, self.size[0], self.size[1])


class Paddle:
    """Player paddle, positioned by its center"""

    def __init__(
        self,
        x: float,
        y: float,
        player_id: int,
        input_binding: InputBinding,
        width: float | None = None,
        height: float | None = None,
    ):
        if player_id not in (1, 2):
            raise ValueError(f"player_id must be 1 or 2, got {player_id}")
        self.position = Vector2D(x, y)
        self.player_id = player_id
        self.input_binding = input_binding
        self.width = width if width is not None else game_config.PADDLE_WIDTH
        self.height = height if height is not None else game_config.PADDLE_HEIGHT
        self.score = 0

    @property
    def half_size(self) -> tuple[float, float]:
        return (self.width / 2, self.height / 2)

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision rectangle (left, bottom, width, height)"""
        return (
            self.position.x - self.width / 2,
            self.position.y - self.height / 2,
            self.width,
            self.height,
        )


class ScoreBoard(Mapping[int, int]):
    """Read-only view of the paddles' scores, keyed by player id"""

    def __init__(self, *paddles: Paddle):
        self._paddles = {paddle.player_id: paddle for paddle in paddles}

    def __getitem__(self, player_id: int) -> int:
        return self._paddles[player_id].score

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._paddles))

    def __len__(self) -> int:
        return len(self._paddles)

    def __repr__(self) -> str:
        return f"ScoreBoard({dict(self)})"
