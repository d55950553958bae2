"""
Maps held keys to paddle intents
"""

from collections.abc import Collection
from enum import Enum

from paddle_duel.core.entities import InputBinding


class Key(Enum):
    """Logical keys the simulation listens to"""

    UP = "up"
    DOWN = "down"
    W = "w"
    S = "s"


# (key moving the paddle up, key moving it down)
BINDING_KEYS: dict[InputBinding, tuple[Key, Key]] = {
    InputBinding.ARROWS: (Key.UP, Key.DOWN),
    InputBinding.WASD: (Key.W, Key.S),
}


def intent_for(keys_held: Collection[Key], binding: InputBinding) -> int:
    """
    Returns the vertical intent of a paddle for this frame.

    Both keys contribute and are summed, so holding both cancels out exactly
    like holding none.

    Args:
        keys_held: Keys currently held down
        binding: Key pair listened to by the paddle

    Returns:
        int: +1 (up), -1 (down) or 0
    """
    try:
        up_key, down_key = BINDING_KEYS[binding]
    except KeyError:
        raise ValueError(f"Unknown input binding: {binding}") from None

    intent = 0
    if up_key in keys_held:
        intent += 1
    if down_key in keys_held:
        intent -= 1
    return intent
