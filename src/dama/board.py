"""Board state representation for Filipino Dama."""

from typing import Dict, Iterator, List, Optional, Tuple

from .rules import BOARD_SIZE, STARTING_ROWS
from .types import Color, Piece, PieceKind, Position, Square


class Board:
    """
    Square grid of ``size`` x ``size`` squares, stored row-major.

    Only dark squares are used: those where (row + col) % 2 == 1.
    Row 0 is the top; black starts on the top three rows, red on the bottom three.
    """

    def __init__(self, size: int = BOARD_SIZE):
        """Create an empty board."""
        self.size = size
        self._squares: List[List[Square]] = [[None] * size for _ in range(size)]

    def clone(self) -> "Board":
        """Create an independent copy of this board."""
        new_board = Board.__new__(Board)
        new_board.size = self.size
        new_board._squares = [row[:] for row in self._squares]
        return new_board

    @classmethod
    def initial(cls, size: int = BOARD_SIZE) -> "Board":
        """Create a board with the standard initial setup."""
        board = cls(size)

        for row in range(size):
            if row < STARTING_ROWS:
                color = Color.BLACK
            elif row >= size - STARTING_ROWS:
                color = Color.RED
            else:
                continue
            for col in range(size):
                if cls.is_playable(row, col):
                    board.set_piece((row, col), Piece(color, PieceKind.MAN))

        return board

    @staticmethod
    def is_playable(row: int, col: int) -> bool:
        """Check if a square is a playable (dark) square."""
        return (row + col) % 2 == 1

    def in_bounds(self, pos: Position) -> bool:
        """Check if a position is within the board."""
        row, col = pos
        return 0 <= row < self.size and 0 <= col < self.size

    def get_piece(self, pos: Position) -> Square:
        """Get the piece at a position, or None if empty or off the board."""
        if not self.in_bounds(pos):
            return None
        return self._squares[pos[0]][pos[1]]

    def set_piece(self, pos: Position, piece: Square) -> None:
        """Set or remove a piece at a position."""
        self._squares[pos[0]][pos[1]] = piece

    def remove_piece(self, pos: Position) -> Square:
        """Remove and return the piece at a position."""
        piece = self._squares[pos[0]][pos[1]]
        self._squares[pos[0]][pos[1]] = None
        return piece

    def is_empty(self, pos: Position) -> bool:
        """Check if an on-board position is empty."""
        return self.in_bounds(pos) and self._squares[pos[0]][pos[1]] is None

    def get_pieces(self, color: Optional[Color] = None) -> Iterator[Tuple[Position, Piece]]:
        """Iterate over pieces in row-major order, optionally filtered by color."""
        for row, squares in enumerate(self._squares):
            for col, piece in enumerate(squares):
                if piece is not None and (color is None or piece.color is color):
                    yield (row, col), piece

    def rows(self) -> List[List[Square]]:
        """Return a copy of the grid as a list of rows."""
        return [row[:] for row in self._squares]

    def count_pieces(self, color: Color) -> Tuple[int, int]:
        """Count (men, kings) for a color."""
        men = 0
        kings = 0
        for _, piece in self.get_pieces(color):
            if piece.is_king:
                kings += 1
            else:
                men += 1
        return men, kings

    def has_pieces(self, color: Color) -> bool:
        """Check if a color has any pieces on the board."""
        return any(True for _ in self.get_pieces(color))

    def to_compact(self) -> dict:
        """Convert board to compact JSON-serializable format."""
        data: Dict[str, object] = {"size": self.size}
        for color in Color:
            data[f"{color.value}_men"] = []
            data[f"{color.value}_kings"] = []

        for pos, piece in self.get_pieces():
            key = f"{piece.color.value}_{'kings' if piece.is_king else 'men'}"
            data[key].append([pos[0], pos[1]])

        return data

    @classmethod
    def from_compact(cls, data: dict) -> "Board":
        """Create a board from compact format."""
        board = cls(data.get("size", BOARD_SIZE))

        for color in Color:
            for pos in data.get(f"{color.value}_men", []):
                board.set_piece(tuple(pos), Piece(color, PieceKind.MAN))
            for pos in data.get(f"{color.value}_kings", []):
                board.set_piece(tuple(pos), Piece(color, PieceKind.KING))

        return board

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self._squares == other._squares

    # Mutable, so not usable as a dict key or set member
    __hash__ = None

    def __str__(self) -> str:
        """String representation of the board."""
        lines = ["  " + " ".join(str(col % 10) for col in range(self.size))]
        for row in range(self.size):
            row_str = f"{row % 10} "
            for col in range(self.size):
                piece = self._squares[row][col]
                if piece is None:
                    row_str += ". " if self.is_playable(row, col) else "  "
                elif piece.color is Color.BLACK:
                    row_str += "B " if piece.is_king else "b "
                else:
                    row_str += "R " if piece.is_king else "r "
            lines.append(row_str.rstrip())
        return "\n".join(lines)

    def __repr__(self) -> str:
        count = sum(1 for _ in self.get_pieces())
        return f"Board({self.size}x{self.size}, {count} pieces)"
