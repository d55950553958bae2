"""
Interfaces between the simulation core and its hosts
"""

from paddle_duel.core.interfaces.physics import PhysicsBackend

__all__ = ["PhysicsBackend"]
