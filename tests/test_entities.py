"""
Tests for Paddle Duel game entities
"""

import pytest
from pydantic import ValidationError

from paddle_duel.core.entities import Arena, Ball, InputBinding, Paddle, ScoreBoard, Vector2D
from paddle_duel.utils.config import game_config, game_config_tmp


class TestVector2D:
    """Tests for Vector2D class"""

    def test_addition(self) -> None:
        """Test vector addition"""
        result = Vector2D(1.0, 2.0) + Vector2D(3.0, 4.0)
        assert result == Vector2D(4.0, 6.0)

    def test_in_place_addition_keeps_identity(self) -> None:
        """Test in-place addition mutates the vector"""
        v = Vector2D(1.0, 1.0)
        same = v
        v += Vector2D(2.0, -3.0)
        assert same is v
        assert v == Vector2D(3.0, -2.0)

    def test_scalar_multiplication(self) -> None:
        """Test scalar multiplication"""
        result = Vector2D(2.0, 3.0) * 2.5
        assert result.x == 5.0
        assert result.y == 7.5

    def test_magnitude(self) -> None:
        """Test magnitude calculation"""
        assert Vector2D(3.0, 4.0).magnitude() == 5.0
        assert Vector2D(0.0, 0.0).magnitude() == 0.0

    def test_normalize(self) -> None:
        """Test normalization"""
        normalized = Vector2D(3.0, 4.0).normalize()
        assert normalized.x == pytest.approx(0.6)
        assert normalized.y == pytest.approx(0.8)
        assert Vector2D(0.0, 0.0).normalize() == Vector2D(0.0, 0.0)

    def test_copy_is_independent(self) -> None:
        """Test copies do not share state"""
        v = Vector2D(1.5, 2.5)
        c = v.copy()
        c.x = 10.0
        assert v.to_tuple() == (1.5, 2.5)


class TestArena:
    """Tests for Arena geometry"""

    def test_from_window_halves_dimensions(self) -> None:
        """Test the arena is built from a window size"""
        arena = Arena.from_window(800, 600, paddle_size=(20.0, 100.0), ball_size=(20.0, 20.0))
        assert arena.half_width == 400
        assert arena.half_height == 300
        assert arena.paddle_half_size == (10.0, 50.0)
        assert arena.ball_half_size == (10.0, 10.0)

    def test_limits(self) -> None:
        """Test the vertical limits of paddle and ball centers"""
        arena = Arena.from_window(800, 600, paddle_size=(20.0, 100.0), ball_size=(20.0, 20.0))
        assert arena.paddle_y_limit == 250
        assert arena.ball_y_limit == 290

    def test_from_config(self) -> None:
        """Test the arena follows the configuration"""
        with game_config_tmp(FIELD_WIDTH=1000, PADDLE_WIDTH=30.0):
            arena = Arena.from_config()
        assert arena.half_width == 500
        assert arena.paddle_size == (30.0, game_config.PADDLE_HEIGHT)

    @pytest.mark.parametrize("width,height", [(0, 600), (800, 0), (-800, 600)])
    def test_missing_geometry_rejected(self, width: float, height: float) -> None:
        """Test a non-positive window size is refused at startup"""
        with pytest.raises(ValidationError):
            Arena.from_window(width, height)

    def test_non_positive_sizes_rejected(self) -> None:
        """Test sizes must be positive"""
        with pytest.raises(ValidationError):
            Arena(half_width=400, half_height=300, paddle_size=(0.0, 100.0), ball_size=(20, 20))

    def test_arena_is_immutable(self) -> None:
        """Test the arena cannot be changed once built"""
        arena = Arena.from_window(800, 600)
        with pytest.raises(ValidationError):
            arena.half_width = 10  # type: ignore[misc]


class TestBall:
    """Tests for Ball class"""

    def test_creation_defaults(self) -> None:
        """Test ball creation uses the configured speed and size"""
        ball = Ball(0.0, 0.0, 1.0, 1.0)
        assert ball.speed == game_config.BALL_BASE_SPEED
        assert ball.size == (game_config.BALL_SIZE, game_config.BALL_SIZE)
        assert ball.speed_ramp_elapsed == 0.0

    def test_reset_to_center_keeps_direction(self) -> None:
        """Test a reset recenters the ball at base speed without touching its direction"""
        ball = Ball(120.0, -40.0, -1.0, 1.0, speed=100.0)
        ball.speed = 175.0
        ball.speed_ramp_elapsed = 4.0

        ball.reset_to_center()

        assert ball.position == Vector2D(0.0, 0.0)
        assert ball.speed == 100.0
        assert ball.velocity == Vector2D(-1.0, 1.0)
        assert ball.speed_ramp_elapsed == 4.0

    def test_speed_ramp_elapsed_kept_in_nanoseconds(self) -> None:
        """Test the ramp accumulator reads in seconds but is stored as whole nanoseconds"""
        ball = Ball(0.0, 0.0, 1.0, 1.0)
        ball.speed_ramp_elapsed = 0.1

        assert ball.speed_ramp_elapsed_ns == 100_000_000
        assert ball.speed_ramp_elapsed == 0.1

    def test_effective_speed_compounds_direction_magnitude(self) -> None:
        """Test a diagonal direction travels faster than the scalar speed"""
        ball = Ball(0.0, 0.0, 1.0, 1.0, speed=100.0)
        assert ball.effective_speed() == pytest.approx(100.0 * 2**0.5)

    def test_get_rect(self) -> None:
        """Test the rectangle is centered on the position"""
        ball = Ball(10.0, 20.0, 1.0, 1.0, size=(20.0, 10.0))
        assert ball.get_rect() == (0.0, 15.0, 20.0, 10.0)


class TestPaddle:
    """Tests for Paddle class"""

    def test_creation(self) -> None:
        """Test creating a paddle"""
        paddle = Paddle(-390.0, 0.0, 1, InputBinding.WASD)
        assert paddle.position == Vector2D(-390.0, 0.0)
        assert paddle.player_id == 1
        assert paddle.input_binding is InputBinding.WASD
        assert paddle.score == 0
        assert paddle.width == game_config.PADDLE_WIDTH

    def test_invalid_player_id(self) -> None:
        """Test only players 1 and 2 exist"""
        with pytest.raises(ValueError):
            Paddle(0.0, 0.0, 3, InputBinding.ARROWS)

    def test_get_rect(self) -> None:
        """Test getting collision rectangle"""
        paddle = Paddle(100.0, 200.0, 2, InputBinding.ARROWS, width=20.0, height=100.0)
        assert paddle.get_rect() == (90.0, 150.0, 20.0, 100.0)


class TestScoreBoard:
    """Tests for the score view"""

    def test_reflects_paddle_scores(self) -> None:
        """Test the board reads scores live from the paddles"""
        p1 = Paddle(-390.0, 0.0, 1, InputBinding.WASD)
        p2 = Paddle(390.0, 0.0, 2, InputBinding.ARROWS)
        board = ScoreBoard(p1, p2)

        assert dict(board) == {1: 0, 2: 0}
        p2.score = 3
        assert board[2] == 3
        assert list(board) == [1, 2]
        assert len(board) == 2
