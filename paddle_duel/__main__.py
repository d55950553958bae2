"""
Headless runner: plays a scripted match at a fixed frame rate and prints the result
"""

import argparse
import logging

from paddle_duel.core.controls import Key
from paddle_duel.core.game_engine import GameEngine
from paddle_duel.utils.config import game_config, load_config_from_file

# Held keys for each scripted command, per player
PLAYER_KEYS = {
    1: {"up": {Key.W}, "down": {Key.S}, "both": {Key.W, Key.S}, "none": set()},
    2: {"up": {Key.UP}, "down": {Key.DOWN}, "both": {Key.UP, Key.DOWN}, "none": set()},
}


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(description="Run a headless Paddle Duel match")
    parser.add_argument("--seconds", type=float, default=60.0, help="Simulated duration")
    parser.add_argument(
        "--fps", type=int, default=None, help="Simulated frame rate (default: config FPS)"
    )
    parser.add_argument(
        "--p1", choices=["up", "down", "both", "none"], default="none", help="Keys held by player 1"
    )
    parser.add_argument(
        "--p2", choices=["up", "down", "both", "none"], default="none", help="Keys held by player 2"
    )
    parser.add_argument("--config", type=str, default=None, help="JSON configuration file")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> dict:
    """Runs the scripted match and returns the final game state"""
    if args.config is not None and not load_config_from_file(args.config):
        print(f"Could not load {args.config}, using default configuration")

    fps = args.fps or game_config.FPS
    dt = 1.0 / fps
    keys_held = PLAYER_KEYS[1][args.p1] | PLAYER_KEYS[2][args.p2]

    engine = GameEngine()
    engine.start_game()

    for _ in range(int(args.seconds * fps)):
        engine.update(dt, keys_held)
        if not engine.is_running():
            break

    return engine.get_game_state()


def main(argv: list[str] | None = None) -> None:
    args = parse_arguments(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    print("=== PADDLE DUEL (headless) ===")
    state = run(args)

    print()
    print(f"Time simulated: {state['time_elapsed']:.2f}s")
    print(f"Score: {state['score'][0]} - {state['score'][1]}")
    print(f"Ball position: ({state['ball_position'][0]:.1f}, {state['ball_position'][1]:.1f})")
    print(f"Ball speed: {state['ball_speed']}")


if __name__ == "__main__":
    main()
