"""Tests for perft counts and breadth-first exploration."""

from checkers_engine.analysis import explore, perft, perft_divide
from checkers_engine.core import EMPTY, RED, WHITE, GameState, Move, create_starting_state


def test_perft_opening():
    """Test leaf counts from the opening position."""
    state = create_starting_state()

    assert perft(state, 0) == 1
    assert perft(state, 1) == 7
    # No contact is possible on the first white reply
    assert perft(state, 2) == 49


def test_perft_divide():
    """Test per-move breakdown."""
    divide = perft_divide(create_starting_state(), 2)

    assert set(divide) == {"9-13", "9-14", "10-14", "10-15", "11-15", "11-16", "12-16"}
    assert all(count == 7 for count in divide.values())
    assert sum(divide.values()) == perft(create_starting_state(), 2)


def test_perft_finished_game():
    """Test a finished game counts as a single leaf."""
    board = [EMPTY] * 32
    board[17] = WHITE
    state = GameState(board=tuple(board), next_player=RED, moves_until_draw=50,
                      last_move=Move.white_wins())

    assert perft(state, 3) == 1


def test_explore_opening():
    """Test unique position counts by depth."""
    counts = explore(create_starting_state(), 2, show_progress=False)

    assert counts == [1, 7, 49]


def test_explore_stops_when_exhausted():
    """Test exploration ends early once the game is over everywhere."""
    board = [EMPTY] * 32
    board[17] = WHITE
    state = GameState(board=tuple(board), next_player=RED, moves_until_draw=50,
                      last_move=Move.begin_of_game())

    counts = explore(state, 5, show_progress=False)

    # Red has no pieces: one losing sentinel, then nothing
    assert counts == [1, 1, 0]
