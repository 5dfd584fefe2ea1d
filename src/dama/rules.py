"""Game rules for Filipino Dama: directions, promotion rows and the ruleset."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Tuple

from .types import Color, Piece, Position

# Board dimensions
BOARD_SIZE = 8

# Number of rows each side fills at the start
STARTING_ROWS = 3

# Diagonal directions (row_delta, col_delta), in search order
ALL_DIRECTIONS: List[Tuple[int, int]] = [(-1, -1), (-1, 1), (1, -1), (1, 1)]

# Black moves downward (increasing row), red moves upward (decreasing row)
FORWARD_DIRECTIONS_BLACK = [(1, -1), (1, 1)]
FORWARD_DIRECTIONS_RED = [(-1, -1), (-1, 1)]


class CapturePriority(Enum):
    """Which capture moves are legal when several exist."""
    ANY = "any"  # any capture sequence
    MAX = "max"  # only sequences capturing the most pieces


@dataclass(frozen=True)
class RulesConfig:
    """
    Ruleset variant.

    Attributes:
        board_size: Squares per side.
        mandatory_capture: A capture must be taken when one is available.
        flying_kings: Kings move and capture any distance along a diagonal,
            instead of one step at a time.
        men_capture_backward: Men may capture backward (they still only step forward).
        capture_priority: ANY capture, or only MAX-count capture sequences.
        promote_mid_turn: A man reaching the back rank during a capture chain
            becomes a king immediately and continues as one. Otherwise promotion
            only happens when the whole move ends there.
    """
    board_size: int = BOARD_SIZE
    mandatory_capture: bool = True
    flying_kings: bool = True
    men_capture_backward: bool = True
    capture_priority: CapturePriority = CapturePriority.ANY
    promote_mid_turn: bool = False

    def with_changes(self, **changes) -> "RulesConfig":
        """Return a copy of this ruleset with the given fields replaced."""
        return replace(self, **changes)


DEFAULT_RULES = RulesConfig()


def forward_directions(color: Color) -> List[Tuple[int, int]]:
    """Get the forward diagonal directions for a color."""
    return FORWARD_DIRECTIONS_BLACK if color is Color.BLACK else FORWARD_DIRECTIONS_RED


def promotion_row(color: Color, config: RulesConfig = DEFAULT_RULES) -> int:
    """Get the row on which a man of this color is crowned."""
    return config.board_size - 1 if color is Color.BLACK else 0


def would_promote(piece: Piece, landing: Position, config: RulesConfig = DEFAULT_RULES) -> bool:
    """Check whether a man landing on this square reaches its promotion row."""
    if piece.is_king:
        return False
    return landing[0] == promotion_row(piece.color, config)
