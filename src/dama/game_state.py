"""Game state for Filipino Dama."""

from dataclasses import dataclass, field
from typing import List, Optional

from .board import Board
from .movegen import legal_moves
from .rules import DEFAULT_RULES, RulesConfig
from .types import Color, GameResult, Move


@dataclass(frozen=True)
class GameState:
    """
    Complete game state: board, side to move and result flag.

    Treated as immutable - the engine returns a new state for every transition
    and never modifies the board of an existing one.
    States compare by value but are not hashable, since the board is mutable.
    """
    board: Board
    turn: Color = Color.BLACK
    result: GameResult = field(default_factory=GameResult.active)

    @classmethod
    def initial(cls, config: RulesConfig = DEFAULT_RULES) -> "GameState":
        """Create the initial game state. Black moves first."""
        return cls(board=Board.initial(config.board_size), turn=Color.BLACK)

    def legal_moves(self, config: RulesConfig = DEFAULT_RULES) -> List[Move]:
        """Get all legal moves for the side to move."""
        if self.result.is_finished:
            return []
        return legal_moves(self.board, self.turn, config)

    @property
    def is_finished(self) -> bool:
        return self.result.is_finished

    @property
    def winner(self) -> Optional[Color]:
        """The winning color, or None while the game is running."""
        return self.result.winner

    def to_compact(self) -> dict:
        """Convert game state to compact JSON-serializable format."""
        data = self.board.to_compact()
        data["turn"] = self.turn.value
        data["result"] = self.result.to_dict()
        return data

    @classmethod
    def from_compact(cls, data: dict) -> "GameState":
        """Create a game state from compact format."""
        board = Board.from_compact(data)
        turn = Color(data["turn"])
        result = GameResult.from_dict(data.get("result", {"status": "active"}))
        return cls(board, turn, result)

    def __str__(self) -> str:
        lines = [
            f"Turn: {self.turn.value} | Status: {self.result.status.value}",
            str(self.board),
        ]
        if self.result.is_finished:
            lines.append(f"Game Over! Winner: {self.result.winner.value} "
                         f"({self.result.reason.value})")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"GameState(turn={self.turn.value}, status={self.result.status.value})"
