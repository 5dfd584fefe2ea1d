"""Move selection for the computer opponent, one strategy per difficulty."""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from ..engine import advance
from ..game_state import GameState
from ..movegen import legal_moves
from ..rules import DEFAULT_RULES, RulesConfig
from ..types import Color, Move
from .eval import WIN_SCORE, evaluate_material, score_immediate, terminal_score

logger = logging.getLogger(__name__)

# Plies searched by the hard tier
HARD_DEPTH = 3

# Moves scoring within this margin of the best are treated as equal
TIE_EPSILON = 1e-6


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass
class SearchResult:
    """Result of a search."""
    move: Optional[Move]
    score: float
    depth: int
    nodes: int


class MinimaxSearch:
    """
    Fixed-depth minimax with alpha-beta pruning.

    Scores are always from the searching side's point of view. A node
    maximizes when that side is to move there and minimizes otherwise, so the
    alternation follows the side to move rather than the depth.
    """

    def __init__(self, depth: int = HARD_DEPTH, config: RulesConfig = DEFAULT_RULES, rng=None):
        self.depth = depth
        self.config = config
        self.rng = rng
        self.nodes_searched = 0

    def search(self, state: GameState, color: Color) -> SearchResult:
        """Find the best move for ``color`` in a position where it is to move."""
        self.nodes_searched = 0

        moves = legal_moves(state.board, color, self.config)
        if not moves:
            return SearchResult(None, -WIN_SCORE, 0, 0)

        best_move: Optional[Move] = None
        best_score = float('-inf')
        alpha = float('-inf')
        beta = float('inf')

        for move in self._order_moves(moves):
            score = self._minimax(advance(state, move, self.config), color,
                                  self.depth - 1, alpha, beta)
            if score > best_score:
                best_score = score
                best_move = move
            alpha = max(alpha, best_score)

        return SearchResult(best_move or moves[0], best_score, self.depth, self.nodes_searched)

    def _minimax(self, state: GameState, color: Color, depth: int, alpha: float, beta: float) -> float:
        self.nodes_searched += 1

        terminal = terminal_score(state, color)
        if terminal is not None:
            return terminal
        if depth <= 0:
            return evaluate_material(state, color, self.config)

        moves = legal_moves(state.board, state.turn, self.config)
        if not moves:
            return -WIN_SCORE if state.turn is color else WIN_SCORE

        if state.turn is color:
            best = float('-inf')
            for move in moves:
                best = max(best, self._minimax(advance(state, move, self.config), color,
                                               depth - 1, alpha, beta))
                alpha = max(alpha, best)
                if beta <= alpha:
                    break  # Beta cutoff
            return best

        best = float('inf')
        for move in moves:
            best = min(best, self._minimax(advance(state, move, self.config), color,
                                           depth - 1, alpha, beta))
            beta = min(beta, best)
            if beta <= alpha:
                break  # Alpha cutoff
        return best

    def _order_moves(self, moves: List[Move]) -> List[Move]:
        """Captures and promotions first, for better pruning."""
        return sorted(moves, key=lambda m: score_immediate(m, self.rng), reverse=True)


def _pick_random(moves: List[Move], rng) -> Move:
    return moves[rng.randrange(len(moves))]


def _pick_tactical(moves: List[Move], rng) -> Move:
    """Pick among the moves with the best immediate score."""
    scored = [(score_immediate(move, rng), move) for move in moves]
    best_score = max(score for score, _ in scored)
    top = [move for score, move in scored if score >= best_score - TIE_EPSILON]
    return _pick_random(top, rng)


def choose_move(
    state: GameState,
    color: Color,
    difficulty: Union[Difficulty, str] = Difficulty.MEDIUM,
    config: RulesConfig = DEFAULT_RULES,
    rng=None,
) -> Optional[Move]:
    """
    Choose a move for ``color``.

    Args:
        state: Current game state (never modified).
        color: Side the computer plays.
        difficulty: 'easy' (random), 'medium' (best immediate tactics) or
            'hard' (3-ply alpha-beta search).
        config: Ruleset in force.
        rng: Random source with ``random()`` and ``randrange()``, such as
            ``random.Random(seed)``. A fresh ``random.Random()`` if omitted.

    Returns:
        A legal move, or None if the game is over, it is not ``color``'s turn
        or ``color`` has no legal move.
    """
    if state.result.is_finished or state.turn is not color:
        return None

    moves = legal_moves(state.board, color, config)
    if not moves:
        return None

    difficulty = Difficulty(difficulty)
    if rng is None:
        rng = random.Random()

    if difficulty is Difficulty.EASY:
        return _pick_random(moves, rng)

    if difficulty is Difficulty.MEDIUM:
        return _pick_tactical(moves, rng)

    search = MinimaxSearch(depth=HARD_DEPTH, config=config, rng=rng)
    result = search.search(state, color)
    logger.debug("Minimax depth %d for %s: %r scored %.2f over %d nodes",
                 result.depth, color.value, result.move, result.score, result.nodes)
    return result.move
