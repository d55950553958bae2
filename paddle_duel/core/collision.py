"""
Collision detection system for Paddle Duel
"""

import logging

from paddle_duel.core.entities import Arena, Ball, Paddle

logger = logging.getLogger(__name__)


def rect_overlap(
    rect_a: tuple[float, float, float, float], rect_b: tuple[float, float, float, float]
) -> bool:
    """Strict overlap test between two (left, bottom, width, height) rectangles"""
    ax, ay, aw, ah = rect_a
    bx, by, bw, bh = rect_b
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


class CollisionDetector:
    """
    Reflects the ball off walls and paddles.

    Only the velocity is changed: the ball is never pushed back out of a wall
    or a paddle, so a ball that stays out of bounds (or inside a paddle) flips
    again on the next frame.
    """

    def __init__(self, arena: Arena):
        self.arena = arena

    def check_ball_walls(self, ball: Ball) -> list[str]:
        """Flips the vertical velocity when the ball pokes out of the top or bottom wall"""
        hits = []
        limit = self.arena.ball_y_limit

        if ball.position.y > limit:
            ball.velocity.y = -ball.velocity.y
            hits.append("top")
        if ball.position.y < -limit:
            ball.velocity.y = -ball.velocity.y
            hits.append("bottom")

        return hits

    def check_ball_paddle(self, ball: Ball, paddle: Paddle) -> bool:
        """Flips the horizontal velocity when the ball overlaps the paddle"""
        if not rect_overlap(ball.get_rect(), paddle.get_rect()):
            return False

        ball.velocity.x = -ball.velocity.x
        return True

    def resolve(self, ball: Ball, paddles: list[Paddle]) -> dict[str, list]:
        """
        Runs the wall check, then every paddle check independently.

        A ball overlapping both paddles in the same frame is reflected twice,
        which leaves its horizontal direction unchanged.
        """
        events: dict[str, list] = {"wall_bounces": [], "paddle_hits": []}

        for wall in self.check_ball_walls(ball):
            logger.debug("Ball bounced off the %s wall at %s", wall, ball.position.to_tuple())
            events["wall_bounces"].append(wall)

        for paddle in paddles:
            if self.check_ball_paddle(ball, paddle):
                logger.debug("Ball hit paddle %d", paddle.player_id)
                events["paddle_hits"].append({"player": paddle.player_id})

        return events
