"""
Pytest configuration and fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def initial_game_state():
    """Create an initial game state."""
    from dama.game_state import GameState
    return GameState.initial()


@pytest.fixture
def sample_board():
    """Create an initial board."""
    from dama.board import Board
    return Board.initial()


@pytest.fixture
def make_board():
    """
    Build a board from a {position: code} mapping.

    Codes: 'b' black man, 'B' black king, 'r' red man, 'R' red king.
    """
    from dama.board import Board
    from dama.types import Color, Piece, PieceKind

    codes = {
        'b': Piece(Color.BLACK, PieceKind.MAN),
        'B': Piece(Color.BLACK, PieceKind.KING),
        'r': Piece(Color.RED, PieceKind.MAN),
        'R': Piece(Color.RED, PieceKind.KING),
    }

    def build(pieces, size=8):
        board = Board(size)
        for pos, code in pieces.items():
            board.set_piece(pos, codes[code])
        return board

    return build
