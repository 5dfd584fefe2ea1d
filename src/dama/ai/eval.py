"""Position evaluation for the computer opponent."""

from typing import Dict, Optional

from ..game_state import GameState
from ..movegen import legal_moves
from ..rules import DEFAULT_RULES, RulesConfig
from ..types import Color, Move

# Score of a won (or, negated, lost) position. Dominates any material score.
WIN_SCORE = 10_000

MAN_VALUE = 3
KING_VALUE = 5
FLYING_KING_VALUE = 7  # flying kings are worth more for their reach

MOBILITY_WEIGHT = 0.1

# Immediate-tactics weights used by the medium tier and for move ordering
CAPTURE_WEIGHT = 10
PROMOTION_BONUS = 4
JITTER = 0.01


def piece_values(config: RulesConfig = DEFAULT_RULES) -> Dict[str, int]:
    """Material value of a man and a king under a ruleset."""
    return {
        'man': MAN_VALUE,
        'king': FLYING_KING_VALUE if config.flying_kings else KING_VALUE,
    }


def evaluate_material(state: GameState, color: Color, config: RulesConfig = DEFAULT_RULES) -> float:
    """
    Evaluate a position from the perspective of ``color``.

    Material balance plus a small mobility term, regardless of whose turn it is.
    Positive is good for ``color``.
    """
    values = piece_values(config)

    score = 0.0
    for _, piece in state.board.get_pieces():
        value = values['king'] if piece.is_king else values['man']
        score += value if piece.color is color else -value

    own_moves = len(legal_moves(state.board, color, config))
    opponent_moves = len(legal_moves(state.board, color.opponent(), config))

    return score + MOBILITY_WEIGHT * (own_moves - opponent_moves)


def score_immediate(move: Move, rng=None) -> float:
    """
    Tactical score of a single move without looking ahead.

    Captures count most, promotion next. With ``rng`` a tiny random jitter is
    added so that equal moves do not always come out in the same order.
    """
    score = move.num_captures * CAPTURE_WEIGHT + (PROMOTION_BONUS if move.promotes else 0)
    if rng is not None:
        score += rng.random() * JITTER
    return score


def material_counts(state: GameState) -> Dict[str, int]:
    """Count pieces and kings for each color."""
    counts = {}
    for color in Color:
        men, kings = state.board.count_pieces(color)
        counts[color.value] = men + kings
        counts[f"{color.value}_kings"] = kings
    return counts


def terminal_score(state: GameState, color: Color) -> Optional[float]:
    """WIN_SCORE / -WIN_SCORE for a finished game, None while it is running."""
    if not state.result.is_finished:
        return None
    return WIN_SCORE if state.result.winner is color else -WIN_SCORE
