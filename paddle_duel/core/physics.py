"""
Physics system for Paddle Duel
"""

import logging
from collections.abc import Collection
from typing import Any

from paddle_duel.core.collision import CollisionDetector
from paddle_duel.core.controls import Key, intent_for
from paddle_duel.core.entities import Arena, Ball, InputBinding, Paddle, ScoreBoard, to_nanoseconds
from paddle_duel.utils.config import game_config

logger = logging.getLogger(__name__)


def move_paddle(paddle: Paddle, intent: int, dt: float, speed: float | None = None) -> None:
    """Moves the paddle vertically according to the player's intent"""
    if speed is None:
        speed = game_config.PADDLE_SPEED
    paddle.position.y += intent * speed * dt


def clamp_paddle(paddle: Paddle, arena: Arena) -> None:
    """Keeps the paddle inside the arena's vertical extent"""
    limit = arena.paddle_y_limit
    if paddle.position.y > limit:
        paddle.position.y = limit
    if paddle.position.y < -limit:
        paddle.position.y = -limit


def move_ball(ball: Ball, dt: float) -> None:
    """Advances the ball along its (unnormalized) direction at its current speed"""
    ball.position += ball.velocity * (ball.speed * dt)


class SpeedRamp:
    """Repeating timer increasing the ball speed every period"""

    def __init__(self, interval: float | None = None, increase: float | None = None):
        self.interval = interval if interval is not None else game_config.BALL_SPEED_INCREASE_INTERVAL
        self.increase = increase if increase is not None else game_config.BALL_SPEED_INCREASE

    def update(self, ball: Ball, dt: float) -> int:
        """
        Accumulates elapsed time and applies one increase per period crossed.

        A frame longer than the period catches up on every period it spans.

        Returns:
            int: Number of increases applied during this frame
        """
        # Whole nanoseconds, so that ten 0.1 s frames make exactly one second
        period_ns = to_nanoseconds(self.interval)
        ball.speed_ramp_elapsed_ns += to_nanoseconds(dt)
        crossings, ball.speed_ramp_elapsed_ns = divmod(ball.speed_ramp_elapsed_ns, period_ns)
        if crossings:
            ball.speed += crossings * self.increase
            logger.info("Ball speed increased to %s", ball.speed)
        return crossings


class ScoringJudge:
    """Awards a point when the ball leaves the arena horizontally"""

    def __init__(self, arena: Arena):
        self.arena = arena

    def check_goals(self, ball: Ball, player1: Paddle, player2: Paddle) -> list[int]:
        """
        Checks both sides, scores and recenters the ball.

        Returns:
            list[int]: Ids of the players who scored this frame
        """
        scorers = []
        half_w = ball.half_size[0]
        boundary = self.arena.half_width + half_w

        # Ball escaped on the right: the left player scores
        if ball.position.x + half_w > boundary:
            scorers.append(self._score(ball, player1))
        # Ball escaped on the left: the right player scores
        if ball.position.x - half_w < -boundary:
            scorers.append(self._score(ball, player2))

        return scorers

    def _score(self, ball: Ball, scorer: Paddle) -> int:
        scorer.score += 1
        ball.reset_to_center()
        logger.info("Player %d scores (%d)", scorer.player_id, scorer.score)
        return scorer.player_id


class PhysicsEngine:
    """Main physics engine"""

    def __init__(self, arena: Arena | None = None):
        if arena is None:
            arena = Arena.from_config()
        self.arena = arena
        self.field_width = arena.half_width * 2
        self.field_height = arena.half_height * 2

        self.collision_detector = CollisionDetector(arena)
        self.scoring_judge = ScoringJudge(arena)
        self.speed_ramp = SpeedRamp()

        # Game state
        self.reset_paddles()
        self.reset_ball()
        self.scoreboard = ScoreBoard(self.player1, self.player2)
        self.game_time = 0.0

    @property
    def score(self) -> list[int]:
        return [self.player1.score, self.player2.score]

    def reset_paddles(self) -> None:
        """Creates both paddles at their starting positions, scores at zero"""
        paddle_w, paddle_h = self.arena.paddle_size
        x = self.arena.half_width - self.arena.paddle_half_size[0]

        self.player1 = Paddle(-x, 0.0, 1, InputBinding.WASD, paddle_w, paddle_h)
        self.player2 = Paddle(x, 0.0, 2, InputBinding.ARROWS, paddle_w, paddle_h)

    def reset_ball(self) -> None:
        """Creates the ball at the arena center heading up and to the right"""
        self.ball = Ball(0.0, 0.0, 1.0, 1.0, size=self.arena.ball_size)

    def update(self, dt: float, keys_held: Collection[Key] = ()) -> dict[str, Any]:
        """
        Advances the simulation by one frame.

        Stages run in a fixed order: paddles move and are clamped, the ball
        moves, collisions are resolved against the new ball position, goals
        are checked, then the speed ramp ticks.

        Args:
            dt: Seconds elapsed since the previous frame
            keys_held: Keys held down during this frame

        Returns:
            Dictionary with the events of the frame
        """
        if dt < 0:
            raise ValueError(f"dt must be non-negative, got {dt}")
        self.game_time += dt

        for paddle in (self.player1, self.player2):
            move_paddle(paddle, intent_for(keys_held, paddle.input_binding), dt)
            clamp_paddle(paddle, self.arena)

        move_ball(self.ball, dt)

        events: dict[str, list] = self.collision_detector.resolve(
            self.ball, [self.player1, self.player2]
        )

        events["goals"] = [
            {"player": player_id, "score": self.score}
            for player_id in self.scoring_judge.check_goals(self.ball, self.player1, self.player2)
        ]

        crossings = self.speed_ramp.update(self.ball, dt)
        events["speed_increases"] = [self.ball.speed] if crossings else []

        return events

    def get_game_state(self) -> dict[str, Any]:
        """Returns the complete game state"""
        return {
            "ball_position": self.ball.position.to_tuple(),
            "ball_velocity": self.ball.velocity.to_tuple(),
            "ball_speed": self.ball.speed,
            "ball_size": self.ball.size,
            "player1_position": self.player1.position.to_tuple(),
            "player2_position": self.player2.position.to_tuple(),
            "player1_paddle_size": (self.player1.width, self.player1.height),
            "player2_paddle_size": (self.player2.width, self.player2.height),
            "score": self.score,
            "time_elapsed": self.game_time,
            "field_bounds": (
                -self.arena.half_width,
                self.arena.half_width,
                -self.arena.half_height,
                self.arena.half_height,
            ),
        }

    def is_game_over(self) -> bool:
        """Checks if the game is over"""
        return max(self.score) >= game_config.MAX_SCORE

    def get_winner(self) -> int:
        """Returns the winner (1 or 2), or 0 if no winner"""
        if self.player1.score >= game_config.MAX_SCORE:
            return 1
        elif self.player2.score >= game_config.MAX_SCORE:
            return 2
        return 0

    def reset_game(self) -> None:
        """Resets the game to zero"""
        self.game_time = 0.0
        self.reset_paddles()
        self.reset_ball()
        self.scoreboard = ScoreBoard(self.player1, self.player2)
