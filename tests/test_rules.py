"""Tests for game rules."""

import pytest
from checkers_engine.core import (
    EMPTY,
    RED,
    RED_KING,
    WHITE,
    WHITE_KING,
    GameState,
    IllegalMoveError,
    Move,
    apply_move,
    create_starting_state,
    find_possible_moves,
    generate_legal_moves,
    get_game_result,
    is_terminal,
)


def make_state(pieces, player=RED, moves_until_draw=50, last_move=None):
    """Build a state from a {cell: occupant} mapping."""
    board = [EMPTY] * 32
    for cell, occupant in pieces.items():
        board[cell - 1] = occupant
    return GameState(
        board=tuple(board),
        next_player=player,
        moves_until_draw=moves_until_draw,
        last_move=last_move if last_move is not None else Move.begin_of_game(),
    )


def test_opening_moves():
    """Test legal move generation from the opening position."""
    state = create_starting_state()

    moves = generate_legal_moves(state)
    assert moves == [
        Move.normal(9, 13),
        Move.normal(9, 14),
        Move.normal(10, 14),
        Move.normal(10, 15),
        Move.normal(11, 15),
        Move.normal(11, 16),
        Move.normal(12, 16),
    ]

    successors = find_possible_moves(state)
    assert len(successors) == 7
    assert all(s.last_move.is_normal for s in successors)
    assert all(s.next_player == WHITE for s in successors)
    assert all(s.moves_until_draw == 49 for s in successors)


def test_simple_move():
    """Test applying a simple move."""
    state = create_starting_state()

    next_state = apply_move(state, Move.normal(9, 13))

    assert next_state.get(9) == EMPTY
    assert next_state.get(13) == RED
    assert next_state.next_player == WHITE
    assert next_state.moves_until_draw == 49
    assert next_state.last_move == Move.normal(9, 13)

    # Parent untouched
    assert state.get(9) == RED
    assert state.get(13) == EMPTY


def test_white_moves_up():
    """Test white men move towards row 0."""
    state = make_state({22: WHITE, 1: RED}, player=WHITE)

    assert generate_legal_moves(state) == [Move.normal(22, 17), Move.normal(22, 18)]


def test_mandatory_capture():
    """Test that a capture suppresses every simple move."""
    # Red man on 14 could step to 17, but can also jump white on 18
    state = make_state({14: RED, 18: WHITE, 1: RED})

    moves = generate_legal_moves(state)

    assert moves == [Move.jump([14, 23])]
    assert not any(move.is_normal for move in moves)


def test_capture_applies():
    """Test capture removes the jumped piece and resets the draw counter."""
    state = make_state({14: RED, 18: WHITE, 1: RED}, moves_until_draw=3)

    (next_state,) = find_possible_moves(state)

    assert next_state.get(14) == EMPTY
    assert next_state.get(18) == EMPTY
    assert next_state.get(23) == RED
    assert next_state.moves_until_draw == 50
    assert next_state.next_player == WHITE
    assert next_state.count_pieces(WHITE) == 0


def test_multi_jump_is_maximal():
    """Test that a double capture is only offered as the full chain."""
    state = make_state({5: RED, 9: WHITE, 18: WHITE})

    moves = generate_legal_moves(state)

    assert moves == [Move.jump([5, 14, 23])]

    (next_state,) = find_possible_moves(state)
    assert next_state.get(23) == RED
    for cell in (5, 9, 14, 18):
        assert next_state.get(cell) == EMPTY
    assert next_state.moves_until_draw == 50


def test_branching_chains():
    """Test that every maximal chain from a piece is enumerated."""
    state = make_state({5: RED, 9: WHITE, 17: WHITE, 18: WHITE})

    moves = generate_legal_moves(state)

    assert moves == [Move.jump([5, 14, 21]), Move.jump([5, 14, 23])]


def test_generation_leaves_state_untouched():
    """Test the capture search restores everything it lifts."""
    state = make_state({5: RED, 9: WHITE, 17: WHITE, 18: WHITE})
    board_before = state.board

    generate_legal_moves(state)
    find_possible_moves(state)

    assert state.board == board_before
    assert state.get(9) == WHITE
    assert state.get(5) == RED


def test_promotion_on_simple_move():
    """Test reaching the far row crowns the piece."""
    state = make_state({27: RED, 13: WHITE})

    assert generate_legal_moves(state) == [Move.normal(27, 31), Move.normal(27, 32)]

    next_state = apply_move(state, Move.normal(27, 31))
    assert next_state.get(31) == RED_KING

    white_state = make_state({6: WHITE, 20: RED}, player=WHITE)
    next_state = apply_move(white_state, Move.normal(6, 1))
    assert next_state.get(1) == WHITE_KING


def test_king_moves_all_directions():
    """Test kings move backwards as well as forwards."""
    king = make_state({18: RED_KING, 1: WHITE})
    man = make_state({18: RED, 1: WHITE})

    assert generate_legal_moves(king) == [
        Move.normal(18, 22),
        Move.normal(18, 23),
        Move.normal(18, 14),
        Move.normal(18, 15),
    ]
    assert generate_legal_moves(man) == [Move.normal(18, 22), Move.normal(18, 23)]


def test_king_captures_backwards():
    """Test only a king can capture towards its own side."""
    king = make_state({22: RED_KING, 17: WHITE})
    man = make_state({22: RED, 17: WHITE})

    assert generate_legal_moves(king) == [Move.jump([22, 13])]
    assert generate_legal_moves(man) == [Move.normal(22, 25), Move.normal(22, 26)]


def test_promotion_mid_chain():
    """Test a man crowned during a chain keeps capturing as a king."""
    state = make_state({22: RED, 26: WHITE, 27: WHITE})

    moves = generate_legal_moves(state)

    assert moves == [Move.jump([22, 31, 24])]

    (next_state,) = find_possible_moves(state)
    assert next_state.get(24) == RED_KING
    assert next_state.get(26) == EMPTY
    assert next_state.get(27) == EMPTY


def test_draw_counter_reaches_zero():
    """Test 50 plies without a capture end in a draw."""
    state = make_state({1: RED_KING, 32: WHITE_KING})
    red_moves = [Move.normal(1, 6), Move.normal(6, 1)]
    white_moves = [Move.normal(32, 28), Move.normal(28, 32)]

    for ply in range(50):
        moves = red_moves if ply % 2 == 0 else white_moves
        state = apply_move(state, moves[(ply // 2) % 2])

    assert state.moves_until_draw == 0

    successors = find_possible_moves(state)
    assert len(successors) == 1
    assert successors[0].is_draw
    assert successors[0].board == state.board


def test_draw_is_unconditional():
    """Test a zero draw counter wins over a pending capture."""
    state = make_state({14: RED, 18: WHITE}, moves_until_draw=0)

    assert generate_legal_moves(state) == [Move.draw()]


def test_stalemate_loses():
    """Test a side with pieces but no moves loses."""
    # Red man on 28 is blocked by white on 32 and cannot jump off the board
    red_stuck = make_state({28: RED, 32: WHITE})
    (successor,) = find_possible_moves(red_stuck)
    assert successor.is_white_win
    assert successor.board == red_stuck.board

    # White man on 5 is blocked by red on 1
    white_stuck = make_state({5: WHITE, 1: RED}, player=WHITE)
    (successor,) = find_possible_moves(white_stuck)
    assert successor.is_red_win


def test_no_pieces_loses():
    """Test a side with no pieces left loses."""
    state = make_state({18: WHITE})

    assert generate_legal_moves(state) == [Move.white_wins()]


def test_terminal_state():
    """Test nothing follows a finished game."""
    state = make_state({18: WHITE}, last_move=Move.white_wins())

    assert is_terminal(state) is True
    assert generate_legal_moves(state) == []
    assert find_possible_moves(state) == []
    assert get_game_result(state) == "White wins"


def test_non_terminal_state():
    """Test non-terminal state."""
    state = create_starting_state()

    assert is_terminal(state) is False
    assert get_game_result(state) is None


def test_sentinel_toggles_player():
    """Test sentinels change no cells but still pass the turn."""
    state = make_state({14: RED, 18: WHITE}, moves_until_draw=0)

    next_state = apply_move(state, Move.draw())

    assert next_state.board == state.board
    assert next_state.next_player == WHITE
    assert next_state.moves_until_draw == 0
    assert get_game_result(next_state) == "Draw"


def test_illegal_move_rejected():
    """Test moves generation would not produce are refused."""
    state = create_starting_state()

    with pytest.raises(IllegalMoveError):
        apply_move(state, Move.normal(13, 17))

    # Simple move while a capture is available
    capture = make_state({14: RED, 18: WHITE})
    with pytest.raises(IllegalMoveError):
        apply_move(capture, Move.normal(14, 17))

    # Chain stopped short (IllegalMoveError is also a ValueError)
    chain = make_state({5: RED, 9: WHITE, 18: WHITE})
    with pytest.raises(ValueError):
        apply_move(chain, Move.jump([5, 14]))
