"""
Game basics: board representation, serialization, rules, winner/draw checks, validity.

Notes:
- State is a flat row-major list of 9 cells: 0=empty, 1=X, 2=O. X always starts.
- A move is a (row, col) pair; cell index is 3*row + col.
- A "ply" is a half-move (one player's turn).
"""
from typing import List, Sequence, Tuple

EMPTY = 0
X = 1
O = 2

Move = Tuple[int, int]

WIN_PATTERNS = [
    [0, 1, 2], [3, 4, 5], [6, 7, 8],
    [0, 3, 6], [1, 4, 7], [2, 5, 8],
    [0, 4, 8], [2, 4, 6]
]

SYMBOLS = {EMPTY: '.', X: 'X', O: 'O'}

_CELL_CODES = {
    '0': EMPTY, '.': EMPTY, '_': EMPTY, '-': EMPTY,
    '1': X, 'X': X,
    '2': O, 'O': O,
}


def empty_board() -> List[int]:
    return [EMPTY] * 9


def opponent(player: int) -> int:
    return O if player == X else X


def to_index(move: Move) -> int:
    row, col = move
    if not (0 <= row <= 2 and 0 <= col <= 2):
        raise ValueError(f"Invalid position ({row}, {col}). Must be 0-2.")
    return 3 * row + col


def to_move(index: int) -> Move:
    if not 0 <= index <= 8:
        raise ValueError(f"Invalid cell index {index}. Must be 0-8.")
    return divmod(index, 3)


def serialize_board(board: Sequence[int]) -> str:
    return ''.join(str(cell) for cell in board)


def deserialize_board(board_str: str) -> List[int]:
    """Parse a 9-character board string.

    Accepts digits (0/1/2) as well as ./X/O, with '_' and '-' also meaning empty.
    """
    raw = board_str.strip().upper()
    if len(raw) != 9:
        raise ValueError(f"Board string must have 9 cells, got {len(raw)}: {board_str!r}")
    try:
        return [_CELL_CODES[c] for c in raw]
    except KeyError as e:
        raise ValueError(f"Invalid cell {e.args[0]!r} in board {board_str!r}") from None


def render_board(board: Sequence[int]) -> str:
    rows = []
    for r in range(3):
        rows.append(' '.join(SYMBOLS[board[3 * r + c]] for c in range(3)))
    return '\n'.join(rows)


def has_won(board: Sequence[int], player: int) -> bool:
    for a, b, c in WIN_PATTERNS:
        if board[a] == player and board[b] == player and board[c] == player:
            return True
    return False


def get_winner(board: Sequence[int]) -> int:
    for pattern in WIN_PATTERNS:
        a, b, c = pattern
        v = board[a]
        if v != EMPTY and v == board[b] and v == board[c]:
            return v
    return EMPTY


def is_full(board: Sequence[int]) -> bool:
    return EMPTY not in board


def is_draw(board: Sequence[int]) -> bool:
    return is_full(board) and get_winner(board) == EMPTY


def empty_cells(board: Sequence[int]) -> List[Move]:
    """Empty cells in row-major order: rows 0->2, then columns 0->2."""
    return [divmod(i, 3) for i, v in enumerate(board) if v == EMPTY]


def get_piece_counts(board: Sequence[int]) -> Tuple[int, int]:
    return board.count(X), board.count(O)


def is_valid_state(board: Sequence[int]) -> bool:
    x_count, o_count = get_piece_counts(board)
    if not (x_count == o_count or x_count == o_count + 1):
        return False
    x_won = has_won(board, X)
    o_won = has_won(board, O)
    # no double winners
    if x_won and o_won:
        return False
    if x_won and x_count != o_count + 1:
        return False
    if o_won and x_count != o_count:
        return False
    return True


def current_player(board: Sequence[int]) -> int:
    x, o = get_piece_counts(board)
    return X if x == o else O
