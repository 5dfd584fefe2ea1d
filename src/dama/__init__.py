"""Filipino Dama
Rules engine, state transitions and computer opponent for Filipino checkers.
"""

from .board import Board
from .engine import (
    apply_move,
    compute_result,
    count_pieces,
    find_move,
    initial_state,
    is_promotion_square,
    move_key,
    other_player,
)
from .game_state import GameState
from .movegen import has_legal_moves, legal_moves
from .rules import DEFAULT_RULES, CapturePriority, RulesConfig
from .types import (
    Color,
    GameResult,
    GameStatus,
    Move,
    Piece,
    PieceKind,
    Position,
    ResultReason,
)

__version__ = "1.0.0"

__all__ = [
    'Board',
    'GameState',
    'Move',
    'Piece',
    'PieceKind',
    'Color',
    'Position',
    'GameResult',
    'GameStatus',
    'ResultReason',
    'RulesConfig',
    'CapturePriority',
    'DEFAULT_RULES',
    'legal_moves',
    'has_legal_moves',
    'apply_move',
    'compute_result',
    'count_pieces',
    'find_move',
    'initial_state',
    'is_promotion_square',
    'move_key',
    'other_player',
]
