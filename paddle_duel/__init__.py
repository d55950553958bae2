"""
Paddle Duel: a two-player paddle-and-ball simulation
"""

__version__ = "0.1.0"
