"""State transitions: validating and applying moves, detecting the end of the game."""

import logging
from dataclasses import replace
from typing import Dict, Iterable, List, Optional

from .board import Board
from .game_state import GameState
from .movegen import has_legal_moves, legal_moves
from .rules import DEFAULT_RULES, RulesConfig, promotion_row
from .types import Color, GameResult, Move, Position, ResultReason

logger = logging.getLogger(__name__)


def other_player(color: Color) -> Color:
    return color.opponent()


def initial_state(config: RulesConfig = DEFAULT_RULES) -> GameState:
    """Create the starting state for a new game."""
    return GameState.initial(config)


def count_pieces(board: Board) -> Dict[Color, int]:
    """Tally the pieces of each color."""
    counts = {color: 0 for color in Color}
    for _, piece in board.get_pieces():
        counts[piece.color] += 1
    return counts


def is_promotion_square(color: Color, pos: Position, config: RulesConfig = DEFAULT_RULES) -> bool:
    return pos[0] == promotion_row(color, config)


def move_key(move: Move) -> str:
    """
    Canonical signature of a move: player, path, captures and promotion flag.

    Two capture chains may start and end on the same squares, so the whole
    path takes part in the signature.
    """
    path = "->".join(f"{r},{c}" for r, c in move.path)
    caps = "|".join(f"{r},{c}" for r, c in move.captures)
    return f"{move.player.value}:{path}:{caps}:{'P' if move.promotes else '-'}"


def compute_result(state: GameState, config: RulesConfig = DEFAULT_RULES) -> GameResult:
    """
    Result of a position from the point of view of the side to move.

    The side to move loses if it has no pieces left or no legal move.
    """
    to_move = state.turn
    if count_pieces(state.board)[to_move] == 0:
        return GameResult.finished(to_move.opponent(), ResultReason.NO_PIECES)

    if not has_legal_moves(state.board, to_move, config):
        return GameResult.finished(to_move.opponent(), ResultReason.NO_MOVES)

    return GameResult.active()


def advance(state: GameState, move: Move, config: RulesConfig = DEFAULT_RULES) -> GameState:
    """
    Play a move already known to be legal and return the next state.

    Search code calls this directly with moves taken from legal_moves();
    everyone else should go through apply_move().
    """
    board = state.board.clone()
    piece = board.remove_piece(move.start)

    for capture_pos in move.captures:
        board.remove_piece(capture_pos)

    if move.promotes and not piece.is_king:
        piece = piece.promote()
    board.set_piece(move.end, piece)

    next_state = GameState(board=board, turn=state.turn.opponent())
    return replace(next_state, result=compute_result(next_state, config))


def apply_move(state: GameState, move: Move, config: RulesConfig = DEFAULT_RULES) -> GameState:
    """
    Apply a move and return the new game state.

    A move that is not currently legal (finished game, wrong side, stale or
    forged move) leaves the game where it is: the input state is returned
    unchanged. The input state is never modified.
    """
    if state.result.is_finished:
        logger.debug("Rejected %r: game is finished", move)
        return state
    if move.player is not state.turn:
        logger.debug("Rejected %r: %s to move", move, state.turn.value)
        return state

    key = move_key(move)
    legal = next((m for m in legal_moves(state.board, state.turn, config) if move_key(m) == key), None)
    if legal is None:
        logger.debug("Rejected %r: not a legal move", move)
        return state

    return advance(state, legal, config)


def find_move(
    board: Board,
    player: Color,
    start: Position,
    end: Position,
    captures: Optional[Iterable[Position]] = None,
    config: RulesConfig = DEFAULT_RULES,
) -> Optional[Move]:
    """
    Rebuild a full legal move from a recorded (start, end, captures) triple.

    Used to replay move history, where only the endpoints and captured squares
    were stored. Captures are matched in order first, then as a set. Without
    captures the first legal move between the two squares is returned.

    Returns:
        The matching Move, or None if no legal move fits.
    """
    candidates: List[Move] = [
        m for m in legal_moves(board, player, config)
        if m.start == tuple(start) and m.end == tuple(end)
    ]
    if captures is None:
        return candidates[0] if candidates else None

    wanted = tuple(tuple(c) for c in captures)
    for move in candidates:
        if move.captures == wanted:
            return move
    for move in candidates:
        if set(move.captures) == set(wanted):
            return move
    return None
