"""
Core module of Paddle Duel game
"""

from paddle_duel.core.controls import Key
from paddle_duel.core.entities import Arena
from paddle_duel.core.entities import Ball
from paddle_duel.core.entities import InputBinding
from paddle_duel.core.entities import Paddle
from paddle_duel.core.entities import ScoreBoard
from paddle_duel.core.entities import Vector2D
from paddle_duel.core.game_engine import GameEngine
from paddle_duel.core.physics import PhysicsEngine

__all__ = [
    "Arena",
    "Ball",
    "Paddle",
    "ScoreBoard",
    "InputBinding",
    "Key",
    "Vector2D",
    "PhysicsEngine",
    "GameEngine",
]
