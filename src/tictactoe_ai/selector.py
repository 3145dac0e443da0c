"""
Perfect-play move selection: exhaustive minimax, no pruning, no memoization.

Scoring, from the maximizing side's perspective:
- Maximizer has three in a row: 10 - depth (sooner wins score higher).
- Minimizer has three in a row: depth - 10 (later losses score higher).
- Full board, no line: 0.

Depth counts the plies played after the candidate move, so a move that
wins on the spot scores exactly 10.

The board is searched in place. Every speculative placement is undone
before the search returns, so callers get their board back unchanged.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict, Iterator, List, MutableSequence, Optional, Tuple

from .game_basics import EMPTY, Move, empty_cells, has_won, is_full, to_index

WIN_SCORE = 10


@dataclass
class SearchStats:
    nodes: int = 0


@dataclass(frozen=True)
class SearchResult:
    move: Optional[Move]
    score: Optional[int]
    nodes: int


@contextmanager
def placed(board: MutableSequence[int], index: int, player: int) -> Iterator[None]:
    """Temporarily put `player` on `index`; the cell is emptied again on exit."""
    if board[index] != EMPTY:
        raise ValueError(f"Cell {index} is already occupied")
    board[index] = player
    try:
        yield
    finally:
        board[index] = EMPTY


def minimax(
    board: MutableSequence[int],
    depth: int,
    to_move: int,
    maximizing: int,
    minimizing: int,
    stats: Optional[SearchStats] = None,
) -> int:
    if stats is not None:
        stats.nodes += 1
    # fixed order: loss, win, draw
    if has_won(board, minimizing):
        return depth - WIN_SCORE
    if has_won(board, maximizing):
        return WIN_SCORE - depth
    if is_full(board):
        return 0

    maximizer_to_move = to_move == maximizing
    next_to_move = minimizing if maximizer_to_move else maximizing
    scores: List[int] = []
    for move in empty_cells(board):
        with placed(board, to_index(move), to_move):
            scores.append(minimax(board, depth + 1, next_to_move, maximizing, minimizing, stats))
    return max(scores) if maximizer_to_move else min(scores)


def _root_scores(
    board: MutableSequence[int],
    maximizing: int,
    minimizing: int,
    stats: SearchStats,
) -> List[Tuple[Move, int]]:
    scored = []
    for move in empty_cells(board):
        with placed(board, to_index(move), maximizing):
            score = minimax(board, 0, minimizing, maximizing, minimizing, stats)
        scored.append((move, score))
    return scored


def search(board: MutableSequence[int], maximizing: int, minimizing: int) -> SearchResult:
    """Full-depth search for the maximizing side.

    Among equally scored moves the first in row-major order wins. A board
    with no empty cells yields a result with no move and no score.
    """
    stats = SearchStats()
    best_move: Optional[Move] = None
    best_score: Optional[int] = None
    for move, score in _root_scores(board, maximizing, minimizing, stats):
        if best_score is None or score > best_score:
            best_score = score
            best_move = move
    logging.debug(
        "searched %d positions for player %d: best=%s score=%s",
        stats.nodes, maximizing, best_move, best_score,
    )
    return SearchResult(move=best_move, score=best_score, nodes=stats.nodes)


def select_best_move(board: MutableSequence[int], maximizing: int, minimizing: int) -> Optional[Move]:
    return search(board, maximizing, minimizing).move


def score_moves(board: MutableSequence[int], maximizing: int, minimizing: int) -> Dict[Move, int]:
    """Score of every legal move for the maximizing side, in row-major order."""
    return dict(_root_scores(board, maximizing, minimizing, SearchStats()))
