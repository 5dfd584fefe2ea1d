"""
Tests for state transitions.

This module tests:
- Move validation and rejection of stale or forged moves
- Captures and promotion when a move is applied
- Game end detection
- Move signatures and replay reconstruction
"""

from dataclasses import replace

import pytest

from dama.engine import (
    apply_move,
    compute_result,
    count_pieces,
    find_move,
    initial_state,
    is_promotion_square,
    move_key,
    other_player,
)
from dama.game_state import GameState
from dama.rules import RulesConfig
from dama.types import Color, GameResult, GameStatus, Move, PieceKind, ResultReason


class TestApplyMove:
    """Tests for apply_move."""

    def test_applies_legal_move(self, initial_game_state):
        move = initial_game_state.legal_moves()[0]
        before = initial_game_state.board.clone()

        new_state = apply_move(initial_game_state, move)

        assert new_state.turn is Color.RED
        assert new_state.result.status is GameStatus.ACTIVE
        assert new_state.board.get_piece(move.start) is None
        assert new_state.board.get_piece(move.end).color is Color.BLACK
        assert initial_game_state.board == before

    def test_is_deterministic(self, initial_game_state):
        move = initial_game_state.legal_moves()[3]

        first = apply_move(initial_game_state, move)
        second = apply_move(initial_game_state, move)

        assert first == second
        assert first.board is not second.board

    def test_rejects_illegal_move(self, initial_game_state):
        move = Move(Color.BLACK, ((2, 1), (4, 3)))

        assert apply_move(initial_game_state, move) is initial_game_state

    def test_rejects_wrong_player(self, initial_game_state):
        move = Move(Color.RED, ((5, 0), (4, 1)))

        assert apply_move(initial_game_state, move) is initial_game_state

    def test_rejects_forged_promotion(self, initial_game_state):
        legal = initial_game_state.legal_moves()[0]
        forged = replace(legal, promotes=True)

        assert apply_move(initial_game_state, forged) is initial_game_state

    def test_rejects_moves_after_game_end(self, make_board):
        state = GameState(
            board=make_board({(3, 2): 'b', (4, 3): 'r'}),
            turn=Color.BLACK,
            result=GameResult.finished(Color.RED, ResultReason.NO_MOVES),
        )
        move = Move(Color.BLACK, ((3, 2), (5, 4)), ((4, 3),))

        assert apply_move(state, move) is state

    def test_capture_removes_pieces(self, make_board):
        state = GameState(make_board({(1, 0): 'b', (2, 1): 'r', (4, 3): 'r', (7, 6): 'r'}))
        move = state.legal_moves()[0]

        new_state = apply_move(state, move)

        assert new_state.board.get_piece((2, 1)) is None
        assert new_state.board.get_piece((4, 3)) is None
        assert new_state.board.get_piece((5, 4)).color is Color.BLACK
        assert count_pieces(new_state.board) == {Color.BLACK: 1, Color.RED: 1}

    def test_quiet_promotion(self, make_board):
        state = GameState(make_board({(6, 1): 'b', (0, 7): 'r'}))
        move = next(m for m in state.legal_moves() if m.end == (7, 0))

        new_state = apply_move(state, move)

        assert new_state.board.get_piece((7, 0)).kind is PieceKind.KING

    def test_mid_turn_promotion(self, make_board):
        rules = RulesConfig(promote_mid_turn=True)
        state = GameState(make_board({(5, 0): 'b', (6, 1): 'r', (5, 4): 'r', (0, 1): 'r'}))
        move = next(m for m in state.legal_moves(rules) if m.end == (3, 6))

        new_state = apply_move(state, move, rules)

        assert new_state.board.get_piece((3, 6)).is_king
        assert count_pieces(new_state.board)[Color.RED] == 1


class TestGameEnd:
    """Tests for result computation."""

    def test_no_pieces(self, make_board):
        state = GameState(make_board({(3, 2): 'b', (4, 3): 'r'}))
        move = state.legal_moves()[0]

        new_state = apply_move(state, move)

        assert new_state.result == GameResult.finished(Color.BLACK, ResultReason.NO_PIECES)
        assert new_state.winner is Color.BLACK
        assert apply_move(new_state, move) is new_state

    def test_no_moves(self, make_board):
        state = GameState(make_board({(7, 0): 'r', (6, 1): 'b', (4, 3): 'b'}))
        move = next(m for m in state.legal_moves() if m.start == (4, 3) and m.end == (5, 2))

        new_state = apply_move(state, move)

        assert count_pieces(new_state.board)[Color.RED] == 1
        assert new_state.result.status is GameStatus.FINISHED
        assert new_state.result.reason is ResultReason.NO_MOVES
        assert new_state.result.winner is Color.BLACK

    def test_compute_result_active(self, initial_game_state):
        assert compute_result(initial_game_state) == GameResult.active()

    def test_compute_result_without_pieces(self, make_board):
        state = GameState(make_board({(3, 2): 'b'}), turn=Color.RED)

        assert compute_result(state) == GameResult.finished(Color.BLACK, ResultReason.NO_PIECES)


class TestHelpers:
    """Tests for the small engine helpers."""

    def test_count_pieces_initial(self, sample_board):
        assert count_pieces(sample_board) == {Color.BLACK: 12, Color.RED: 12}

    def test_other_player(self):
        assert other_player(Color.BLACK) is Color.RED

    def test_initial_state(self):
        state = initial_state()

        assert state.turn is Color.BLACK
        assert state.result == GameResult.active()

    def test_promotion_squares(self):
        assert is_promotion_square(Color.BLACK, (7, 2))
        assert is_promotion_square(Color.RED, (0, 3))
        assert not is_promotion_square(Color.RED, (7, 2))
        assert is_promotion_square(Color.BLACK, (9, 0), RulesConfig(board_size=10))


class TestMoveKey:
    """Tests for move signatures."""

    def test_format(self):
        move = Move(Color.BLACK, ((1, 0), (3, 2), (5, 4)), ((2, 1), (4, 3)), promotes=False)

        assert move_key(move) == "black:1,0->3,2->5,4:2,1|4,3:-"

    def test_distinguishes_paths_with_same_endpoints(self):
        a = Move(Color.RED, ((4, 3), (2, 5), (0, 3)), ((3, 4), (1, 4)))
        b = Move(Color.RED, ((4, 3), (2, 1), (0, 3)), ((3, 2), (1, 2)))

        assert (a.start, a.end) == (b.start, b.end)
        assert move_key(a) != move_key(b)

    def test_equal_moves_share_key(self):
        a = Move(Color.RED, ((5, 0), (4, 1)))
        b = Move.from_dict(a.to_dict())

        assert move_key(a) == move_key(b)


class TestFindMove:
    """Tests for rebuilding recorded moves."""

    def test_rebuilds_capture_chain(self, make_board):
        board = make_board({(1, 0): 'b', (2, 1): 'r', (4, 3): 'r'})

        move = find_move(board, Color.BLACK, (1, 0), (5, 4), [(2, 1), (4, 3)])

        assert move.path == ((1, 0), (3, 2), (5, 4))

    def test_captures_match_in_any_order(self, make_board):
        board = make_board({(1, 0): 'b', (2, 1): 'r', (4, 3): 'r'})

        move = find_move(board, Color.BLACK, [1, 0], [5, 4], [[4, 3], [2, 1]])

        assert move is not None
        assert move.captures == ((2, 1), (4, 3))

    def test_rebuilds_promotion_flag(self, make_board):
        board = make_board({(5, 0): 'b', (6, 1): 'r', (5, 4): 'r'})
        rules = RulesConfig(promote_mid_turn=True)

        move = find_move(board, Color.BLACK, (5, 0), (2, 7), [(6, 1), (5, 4)], rules)

        assert move.promotes
        assert move.path == ((5, 0), (7, 2), (2, 7))

    def test_without_captures(self, sample_board):
        move = find_move(sample_board, Color.BLACK, (2, 1), (3, 0))

        assert move == Move(Color.BLACK, ((2, 1), (3, 0)))

    @pytest.mark.parametrize("start,end,captures", [
        ((2, 1), (4, 3), None),
        ((2, 1), (3, 0), [(3, 0)]),
        ((5, 0), (4, 1), None),
    ])
    def test_no_match(self, sample_board, start, end, captures):
        assert find_move(sample_board, Color.BLACK, start, end, captures) is None

    def test_replays_game_record(self, initial_game_state):
        state = initial_game_state
        record = [((2, 1), (3, 2), []), ((5, 4), (4, 3), []), ((3, 2), (5, 4), [(4, 3)])]

        for start, end, captures in record:
            move = find_move(state.board, state.turn, start, end, captures)
            next_state = apply_move(state, move)
            assert next_state is not state
            state = next_state

        assert count_pieces(state.board) == {Color.BLACK: 12, Color.RED: 11}
