"""Main entry point for Filipino Dama."""

import argparse
import random
from pathlib import Path
from typing import Optional

from .ai.search import choose_move
from .config import Config, get_config
from .engine import apply_move
from .game_state import GameState
from .rules import RulesConfig
from .types import Color
from .utils import setup_logger


def print_initial_state(rules: RulesConfig) -> None:
    """Print the initial board state and legal moves."""
    state = GameState.initial(rules)

    print("=" * 40)
    print("Filipino Dama - Initial State")
    print("=" * 40)
    print()
    print(state)
    print()

    moves = state.legal_moves(rules)
    print(f"Legal moves for {state.turn.value}: {len(moves)}")
    print()
    for i, move in enumerate(moves, 1):
        print(f"  {i}. {move}")
    print()


def play_game(rules: RulesConfig, difficulties: dict, seed: Optional[int],
              max_turns: int, logger) -> GameState:
    """Play a computer-vs-computer game and return the final state."""
    rng = random.Random(seed)
    state = GameState.initial(rules)

    for turn in range(1, max_turns + 1):
        if state.is_finished:
            break
        move = choose_move(state, state.turn, difficulties[state.turn], rules, rng)
        if move is None:
            break
        logger.info("%3d. %s", turn, move)
        state = apply_move(state, move, rules)

    if not state.is_finished:
        logger.info("Stopped after %d turns", max_turns)

    return state


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(prog="dama", description="Filipino Dama rules engine")
    parser.add_argument("--config", type=Path, default=None,
                        help="settings.yaml to use instead of the user config")
    parser.add_argument("--selfplay", action="store_true",
                        help="play a game between two computer opponents")
    parser.add_argument("--black", choices=["easy", "medium", "hard"], default=None)
    parser.add_argument("--red", choices=["easy", "medium", "hard"], default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--max-turns", type=int, default=200)
    args = parser.parse_args(argv)

    config = Config.load(args.config) if args.config else get_config()
    logger = setup_logger("dama", config.log.log_file, config.log.level)
    rules = config.rules.to_rules_config()

    if not args.selfplay:
        print_initial_state(rules)
        return

    difficulties = {
        Color.BLACK: args.black or config.ai.black_difficulty,
        Color.RED: args.red or config.ai.red_difficulty,
    }
    seed = args.seed if args.seed is not None else config.ai.seed

    final = play_game(rules, difficulties, seed, args.max_turns, logger)
    print()
    print(final)


if __name__ == "__main__":
    main()
