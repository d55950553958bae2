"""
Physics backend protocol - defines interface for physics engines
"""

from collections.abc import Collection
from typing import Any
from typing import Protocol

from paddle_duel.core.controls import Key
from paddle_duel.core.entities import Arena
from paddle_duel.core.entities import Ball
from paddle_duel.core.entities import Paddle
from paddle_duel.core.entities import ScoreBoard


class PhysicsBackend(Protocol):
    """
    Protocol for physics engine implementations.

    This is everything a host (window, headless runner, tests) needs to drive
    the simulation and draw it.
    """

    # Game objects
    arena: Arena
    ball: Ball
    player1: Paddle
    player2: Paddle
    scoreboard: ScoreBoard
    game_time: float

    def reset_game(self) -> None:
        """
        Reset the game to initial state.

        Resets scores, time, ball and paddle positions.
        """
        ...

    def update(self, dt: float, keys_held: Collection[Key] = ()) -> dict[str, Any]:
        """
        Update physics simulation by one frame.

        Args:
            dt: Delta time in seconds
            keys_held: Keys held down during the frame

        Returns:
            Dictionary with events that occurred:
            {
                "wall_bounces": [...],
                "paddle_hits": [...],
                "goals": [...],
                "speed_increases": [...]
            }
        """
        ...

    def get_game_state(self) -> dict[str, Any]:
        """
        Get complete game state for the host to render.

        Returns:
            Dictionary with positions, velocities, score, etc.
        """
        ...

    def is_game_over(self) -> bool:
        """Check if game has ended (max score reached)"""
        ...

    def get_winner(self) -> int:
        """Get winning player ID (1 or 2), or 0 if no winner"""
        ...
