"""Move generation for Filipino Dama."""

from typing import Iterator, List, Tuple

from .board import Board
from .rules import (
    ALL_DIRECTIONS,
    DEFAULT_RULES,
    CapturePriority,
    RulesConfig,
    forward_directions,
    would_promote,
)
from .types import Color, Move, Piece, Position


def get_capture_directions(piece: Piece, config: RulesConfig = DEFAULT_RULES) -> List[Tuple[int, int]]:
    """Get all valid capture directions for a piece (considering backward capture rule)."""
    if piece.is_king or config.men_capture_backward:
        return ALL_DIRECTIONS
    return forward_directions(piece.color)


def generate_simple_moves(board: Board, pos: Position, piece: Piece,
                          config: RulesConfig = DEFAULT_RULES) -> List[Move]:
    """Generate non-capture moves for a piece at a position."""
    moves = []
    row, col = pos

    if not piece.is_king:
        for dr, dc in forward_directions(piece.color):
            new_pos = (row + dr, col + dc)
            if board.is_empty(new_pos):
                moves.append(Move(
                    player=piece.color,
                    path=(pos, new_pos),
                    promotes=would_promote(piece, new_pos, config),
                ))
        return moves

    for dr, dc in ALL_DIRECTIONS:
        distance = 1
        while True:
            new_pos = (row + distance * dr, col + distance * dc)
            # is_empty is False off the board as well
            if not board.is_empty(new_pos):
                break

            moves.append(Move(player=piece.color, path=(pos, new_pos)))

            if not config.flying_kings:
                break
            distance += 1

    return moves


def _single_captures(board: Board, pos: Position, piece: Piece,
                     config: RulesConfig) -> Iterator[Tuple[Position, Position]]:
    """
    Yield every (captured, landing) pair available to a piece in one jump.

    A man jumps an adjacent enemy onto the square right behind it. A king
    scans each diagonal up to the first occupied square; if that is an enemy,
    every empty square beyond it (until blocked) is a landing. This holds for
    step kings too, flying_kings only changes how kings make quiet moves.
    """
    row, col = pos
    long_range = piece.is_king

    for dr, dc in get_capture_directions(piece, config):
        distance = 1
        if long_range:
            while board.is_empty((row + distance * dr, col + distance * dc)):
                distance += 1

        victim_pos = (row + distance * dr, col + distance * dc)
        victim = board.get_piece(victim_pos)
        if victim is None or victim.color is piece.color:
            continue

        land_distance = distance + 1
        while True:
            land_pos = (row + land_distance * dr, col + land_distance * dc)
            if not board.is_empty(land_pos):
                break

            yield victim_pos, land_pos

            if not long_range:
                break
            land_distance += 1


def _generate_capture_chains(
    board: Board,
    pos: Position,
    piece: Piece,
    path: List[Position],
    captured: List[Position],
    crowned: bool,
    config: RulesConfig,
) -> List[Move]:
    """
    Recursively generate all maximal capture sequences from a position.

    Args:
        board: Board for this branch, with earlier victims already removed.
        pos: Current position of the capturing piece.
        piece: The capturing piece as it stands now (a king once crowned mid-chain).
        path: Path taken so far, origin first.
        captured: Positions captured so far, in order.
        crowned: Whether the piece was crowned earlier in this chain.

    Returns:
        One Move per branch that cannot be extended any further.
    """
    captures_found = []

    for victim_pos, land_pos in _single_captures(board, pos, piece, config):
        next_piece = piece
        next_crowned = crowned
        if config.promote_mid_turn and would_promote(piece, land_pos, config):
            next_piece = piece.promote()
            next_crowned = True

        temp_board = board.clone()
        temp_board.remove_piece(pos)
        temp_board.remove_piece(victim_pos)
        temp_board.set_piece(land_pos, next_piece)

        captures_found.extend(_generate_capture_chains(
            temp_board,
            land_pos,
            next_piece,
            path + [land_pos],
            captured + [victim_pos],
            next_crowned,
            config,
        ))

    if not captures_found and captured:
        # Dead end: the sequence so far is a complete move
        end = path[-1]
        captures_found.append(Move(
            player=piece.color,
            path=tuple(path),
            captures=tuple(captured),
            promotes=crowned or would_promote(piece, end, config),
        ))

    return captures_found


def generate_captures(board: Board, pos: Position, piece: Piece,
                      config: RulesConfig = DEFAULT_RULES) -> List[Move]:
    """Generate all capture moves for a piece at a position."""
    return _generate_capture_chains(board.clone(), pos, piece, [pos], [], False, config)


def legal_moves(board: Board, player: Color, config: RulesConfig = DEFAULT_RULES) -> List[Move]:
    """
    Generate all legal moves for a player.

    Captures come first in board scan order. With capture_priority MAX only the
    longest capture sequences are kept. If any capture exists and captures are
    mandatory, only capture moves are returned.

    Returns:
        List of legal Move objects (empty if the player cannot move).
    """
    capture_moves: List[Move] = []
    pieces = list(board.get_pieces(player))

    for pos, piece in pieces:
        capture_moves.extend(generate_captures(board, pos, piece, config))

    if capture_moves and config.capture_priority is CapturePriority.MAX:
        most = max(move.num_captures for move in capture_moves)
        capture_moves = [move for move in capture_moves if move.num_captures == most]

    if capture_moves and config.mandatory_capture:
        return capture_moves

    simple_moves: List[Move] = []
    for pos, piece in pieces:
        simple_moves.extend(generate_simple_moves(board, pos, piece, config))

    return capture_moves + simple_moves


def has_legal_moves(board: Board, player: Color, config: RulesConfig = DEFAULT_RULES) -> bool:
    """Check if a player has any legal moves."""
    for pos, piece in board.get_pieces(player):
        if generate_simple_moves(board, pos, piece, config):
            return True
        if next(_single_captures(board, pos, piece, config), None) is not None:
            return True

    return False
