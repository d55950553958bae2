"""
Paddle Duel main game engine
"""

import logging
import time
from collections.abc import Collection
from typing import Any

from paddle_duel.core.controls import Key
from paddle_duel.core.interfaces.physics import PhysicsBackend
from paddle_duel.core.physics import PhysicsEngine

logger = logging.getLogger(__name__)


class GameEngine:
    """Drives a match: start, pause, frame updates and the win/reset cycle"""

    def __init__(self, physics_engine: PhysicsBackend | None = None):
        self.physics_engine: PhysicsBackend = physics_engine or PhysicsEngine()

        # Game state
        self.running = False
        self.paused = False
        self.last_update_time = 0.0

        # Statistics
        self.total_games = 0
        self.game_stats = {
            "player1_wins": 0,
            "player2_wins": 0,
            "total_frames": 0,
            "average_game_length": 0.0,
        }
        self._frames = 0

    def start_game(self) -> None:
        """Starts a new game"""
        self.running = True
        self.paused = False
        self._frames = 0
        self.physics_engine.reset_game()
        self.last_update_time = time.monotonic()

    def stop_game(self) -> None:
        """Stops the current game"""
        self.running = False

    def pause_game(self) -> None:
        """Pauses / resumes the game"""
        self.paused = not self.paused
        if not self.paused:
            self.last_update_time = time.monotonic()

    def update(self, dt: float | None = None, keys_held: Collection[Key] = ()) -> dict[str, Any]:
        """
        Updates the game by one frame

        Args:
            dt: Delta time in seconds. If None, measured since the previous update
            keys_held: Keys held down during this frame

        Returns:
            Dict containing events and game state
        """
        if not self.running or self.paused:
            return {"events": {}, "game_state": self.physics_engine.get_game_state(), "done": False}

        now = time.monotonic()
        if dt is None:
            dt = now - self.last_update_time
        self.last_update_time = now

        events = self.physics_engine.update(dt, keys_held)
        self._frames += 1

        done = self.physics_engine.is_game_over()
        if done:
            self._handle_game_end()

        return {
            "events": events,
            "game_state": self.physics_engine.get_game_state(),
            "done": done,
        }

    def _handle_game_end(self) -> None:
        """Handles the end of a game"""
        winner = self.physics_engine.get_winner()
        logger.info("Player %d wins %s", winner, self.physics_engine.get_game_state()["score"])

        # Update statistics
        self.total_games += 1
        if winner == 1:
            self.game_stats["player1_wins"] += 1
        elif winner == 2:
            self.game_stats["player2_wins"] += 1

        self.game_stats["total_frames"] += self._frames
        self.game_stats["average_game_length"] = self.game_stats["total_frames"] / self.total_games

        self.running = False

    def get_game_state(self) -> dict[str, Any]:
        """Returns the complete game state"""
        return self.physics_engine.get_game_state()

    def get_stats(self) -> dict[str, Any]:
        """Returns game statistics"""
        return self.game_stats.copy()

    def reset_stats(self) -> None:
        """Resets statistics to zero"""
        self.total_games = 0
        self.game_stats = {
            "player1_wins": 0,
            "player2_wins": 0,
            "total_frames": 0,
            "average_game_length": 0.0,
        }

    def is_running(self) -> bool:
        """Checks if the game is running"""
        return self.running

    def is_paused(self) -> bool:
        """Checks if the game is paused"""
        return self.paused

    def is_game_over(self) -> bool:
        """Checks if the game is over"""
        return self.physics_engine.is_game_over()

    def get_winner(self) -> int:
        """Returns the game winner"""
        return self.physics_engine.get_winner()
