"""
Tactics and simple motifs: immediate wins, blocks, forks.
"""
from typing import List, Sequence

from .game_basics import EMPTY, Move, has_won, opponent


def immediate_winning_moves(board: Sequence[int], player: int) -> List[Move]:
    wins: List[Move] = []
    for i, v in enumerate(board):
        if v != EMPTY:
            continue
        b = list(board)
        b[i] = player
        if has_won(b, player):
            wins.append(divmod(i, 3))
    return wins


def blocking_moves(board: Sequence[int], player: int) -> List[Move]:
    """Cells `player` must take to stop the opponent winning next turn."""
    return immediate_winning_moves(board, opponent(player))


def fork_moves(board: Sequence[int], player: int) -> List[Move]:
    forks: List[Move] = []
    for i, v in enumerate(board):
        if v != EMPTY:
            continue
        b = list(board)
        b[i] = player
        if len(immediate_winning_moves(b, player)) >= 2:
            forks.append(divmod(i, 3))
    return forks
