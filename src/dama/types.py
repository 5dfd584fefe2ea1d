"""Type definitions for Filipino Dama."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Color(Enum):
    """Player colors."""
    BLACK = "black"  # Starts on rows 0-2, moves downward (increasing row)
    RED = "red"      # Starts on the bottom three rows, moves upward

    def opponent(self) -> "Color":
        """Return the opposing color."""
        return Color.RED if self is Color.BLACK else Color.BLACK


class PieceKind(Enum):
    """Rank of a piece."""
    MAN = "man"
    KING = "king"


@dataclass(frozen=True)
class Piece:
    """A game piece on the board."""
    color: Color
    kind: PieceKind = PieceKind.MAN

    @property
    def is_king(self) -> bool:
        """Check if this piece is a king."""
        return self.kind is PieceKind.KING

    def promote(self) -> "Piece":
        """Return a promoted (king) version of this piece."""
        return Piece(self.color, PieceKind.KING)


# Type alias for board positions: (row, col)
Position = Tuple[int, int]

# A square is either empty or holds exactly one piece
Square = Optional[Piece]


@dataclass(frozen=True)
class Move:
    """
    A complete turn for a single piece.

    Attributes:
        player: Color of the moving piece.
        path: Origin followed by every landing square, in order. A quiet move
              has len(path) == 2; a capture chain has one entry per jump.
        captures: Positions of the captured pieces, in capture order.
        promotes: True if the moving piece becomes a king as a result of this move.
    """
    player: Color
    path: Tuple[Position, ...]
    captures: Tuple[Position, ...] = ()
    promotes: bool = False

    @property
    def start(self) -> Position:
        """Starting position of the move."""
        return self.path[0]

    @property
    def end(self) -> Position:
        """Final landing position of the move."""
        return self.path[-1]

    @property
    def is_capture(self) -> bool:
        return len(self.captures) > 0

    @property
    def num_captures(self) -> int:
        return len(self.captures)

    def to_dict(self) -> dict:
        """Convert move to a JSON-serializable dict."""
        return {
            "player": self.player.value,
            "path": [list(p) for p in self.path],
            "captures": [list(c) for c in self.captures],
            "promotes": self.promotes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Move":
        """Create a Move from a dict representation."""
        return cls(
            player=Color(data["player"]),
            path=tuple(tuple(p) for p in data["path"]),
            captures=tuple(tuple(c) for c in data.get("captures", [])),
            promotes=data.get("promotes", False),
        )

    def __repr__(self) -> str:
        path_str = "->".join(f"({r},{c})" for r, c in self.path)
        if self.captures:
            return (f"Move({self.player.value} {path_str}, "
                    f"captures={len(self.captures)}, promo={self.promotes})")
        return f"Move({self.player.value} {path_str})"


class GameStatus(Enum):
    WAITING = "waiting"
    ACTIVE = "active"
    FINISHED = "finished"


class ResultReason(Enum):
    """Why a finished game ended."""
    NO_PIECES = "no_pieces"
    NO_MOVES = "no_moves"


@dataclass(frozen=True)
class GameResult:
    """
    Outcome flag of a game.

    ``winner`` and ``reason`` are only set when ``status`` is FINISHED.
    """
    status: GameStatus = GameStatus.ACTIVE
    winner: Optional[Color] = None
    reason: Optional[ResultReason] = None

    @classmethod
    def active(cls) -> "GameResult":
        return cls(GameStatus.ACTIVE)

    @classmethod
    def finished(cls, winner: Color, reason: ResultReason) -> "GameResult":
        return cls(GameStatus.FINISHED, winner, reason)

    @property
    def is_finished(self) -> bool:
        return self.status is GameStatus.FINISHED

    def to_dict(self) -> dict:
        data = {"status": self.status.value}
        if self.is_finished:
            data["winner"] = self.winner.value
            data["reason"] = self.reason.value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "GameResult":
        status = GameStatus(data["status"])
        if status is GameStatus.FINISHED:
            return cls.finished(Color(data["winner"]), ResultReason(data["reason"]))
        return cls(status)
