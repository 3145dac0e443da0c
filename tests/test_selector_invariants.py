import pytest

from tictactoe_ai.game_basics import EMPTY, O, X, deserialize_board, empty_cells
from tictactoe_ai.selector import SearchStats, minimax, placed, score_moves, search


def test_search_leaves_board_unchanged():
    b = deserialize_board("X...O..X.")
    before = list(b)
    search(b, O, X)
    score_moves(b, O, X)
    assert b == before


def test_placed_restores_cell_on_error():
    b = [EMPTY] * 9
    with pytest.raises(RuntimeError):
        with placed(b, 4, X):
            assert b[4] == X
            raise RuntimeError("boom")
    assert b[4] == EMPTY


def test_placed_rejects_occupied_cell():
    b = deserialize_board("X........")
    with pytest.raises(ValueError):
        with placed(b, 0, O):
            pass
    assert b[0] == X


def test_minimax_terminal_scores_depend_on_depth():
    loss = deserialize_board("XXXOO....")
    win = deserialize_board("OOOXX....")
    draw = deserialize_board("XOXXOOOXX")
    assert minimax(loss, 0, O, O, X) == -10
    assert minimax(loss, 3, O, O, X) == -7
    assert minimax(win, 0, X, O, X) == 10
    assert minimax(win, 4, X, O, X) == 6
    assert minimax(draw, 5, O, O, X) == 0


def test_minimax_checks_minimizer_win_first():
    # malformed board with both lines complete scores as a loss
    both = deserialize_board("XXXOOO...")
    assert minimax(both, 2, O, O, X) == -8


def test_stats_count_every_node():
    b = deserialize_board("XOXXOO.X.")
    stats = SearchStats()
    minimax(b, 0, O, O, X, stats)
    # root, two children, one full-board grandchild under each
    assert stats.nodes == 5
    assert search(b, O, X).nodes > 0


def test_selected_move_is_empty_and_scores_are_bounded():
    b = deserialize_board("X...O....")
    res = search(b, X, O)
    assert res.move in empty_cells(b)
    scores = score_moves(b, X, O)
    assert set(scores) == set(empty_cells(b))
    assert all(-10 <= s <= 10 for s in scores.values())
    assert res.score == max(scores.values())


def test_minimax_takes_max_or_min_by_side_to_move():
    b = deserialize_board("XOXXOO.X.")
    # O to move: (2,0) draws, (2,2) lets X win two plies later
    assert minimax(b, 0, O, O, X) == 0
    # X to move: (2,0) wins at once
    assert minimax(b, 0, X, O, X) == -9
