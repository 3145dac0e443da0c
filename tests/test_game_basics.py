import pytest

from tictactoe_ai.game_basics import (
    EMPTY,
    O,
    X,
    current_player,
    deserialize_board,
    empty_cells,
    get_winner,
    has_won,
    is_draw,
    is_full,
    is_valid_state,
    opponent,
    render_board,
    serialize_board,
    to_index,
    to_move,
)


def test_terminal_positions():
    assert get_winner([1, 1, 1, 0, 0, 0, 0, 0, 0]) == X
    assert get_winner([2, 0, 0, 0, 2, 0, 0, 0, 2]) == O
    draw = [1, 1, 2, 2, 2, 1, 1, 2, 1]
    assert is_full(draw) and is_draw(draw)
    assert get_winner([0] * 9) == EMPTY


def test_has_won_checks_each_line():
    for line in ([0, 1, 2], [3, 4, 5], [6, 7, 8], [0, 3, 6], [1, 4, 7], [2, 5, 8], [0, 4, 8], [2, 4, 6]):
        b = [0] * 9
        for i in line:
            b[i] = O
        assert has_won(b, O)
        assert not has_won(b, X)


@pytest.mark.parametrize("text", ["100020000", "X...O....", "x___o____", "X---O----"])
def test_deserialize_accepts_both_alphabets(text: str):
    assert deserialize_board(text) == [1, 0, 0, 0, 2, 0, 0, 0, 0]


@pytest.mark.parametrize("bad", ["abc", "0123456789", "12345678x", "10002000"])
def test_deserialize_rejects_bad_strings(bad: str):
    with pytest.raises(ValueError):
        deserialize_board(bad)


def test_serialize_and_render():
    b = deserialize_board("XO..X...O")
    assert serialize_board(b) == "120010002"
    assert render_board(b) == "X O .\n. X .\n. . O"


def test_coordinates():
    assert to_index((0, 0)) == 0
    assert to_index((2, 1)) == 7
    assert to_move(5) == (1, 2)
    with pytest.raises(ValueError):
        to_index((3, 0))
    with pytest.raises(ValueError):
        to_move(9)


def test_empty_cells_are_row_major():
    b = deserialize_board("X.O.X...O")
    assert empty_cells(b) == [(0, 1), (1, 0), (1, 2), (2, 0), (2, 1)]
    assert empty_cells(deserialize_board("XOXXOOOXX")) == []


def test_turns_and_validity():
    assert current_player([0] * 9) == X
    assert current_player(deserialize_board("X........")) == O
    assert opponent(X) == O and opponent(O) == X
    assert is_valid_state(deserialize_board("X...O...."))
    # O cannot be ahead
    assert not is_valid_state(deserialize_board("OO......."))
    # both sides winning is unreachable
    assert not is_valid_state(deserialize_board("XXXOOO..."))
    # X won but O moved afterwards
    assert not is_valid_state(deserialize_board("XXXOO.O.."))
