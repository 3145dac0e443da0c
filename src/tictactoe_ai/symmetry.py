"""
Symmetry and canonicalization for Tic-Tac-Toe.

- There are 8 symmetries (the dihedral group of the square).
- A board is canonicalized by taking the lexicographically smallest image.
- Moves transform with the board; index maps are precomputed.
"""
from functools import lru_cache
from typing import Dict, List, Sequence

import numpy as np

from .game_basics import Move, serialize_board, to_index, to_move

ALL_SYMS = ['id', 'rot90', 'rot180', 'rot270', 'hflip', 'vflip', 'd1', 'd2']

INVERSE_SYMS = {
    'id': 'id',
    'rot90': 'rot270',
    'rot180': 'rot180',
    'rot270': 'rot90',
    'hflip': 'hflip',
    'vflip': 'vflip',
    'd1': 'd1',
    'd2': 'd2',
}


def _transform_grid(grid: np.ndarray, kind: str) -> np.ndarray:
    if kind == 'id':
        return grid
    elif kind == 'rot90':
        # clockwise
        return np.rot90(grid, k=-1)
    elif kind == 'rot180':
        return np.rot90(grid, k=2)
    elif kind == 'rot270':
        return np.rot90(grid, k=1)
    elif kind == 'hflip':
        return np.fliplr(grid)
    elif kind == 'vflip':
        return np.flipud(grid)
    elif kind == 'd1':
        return grid.T
    elif kind == 'd2':
        return np.rot90(grid, k=2).T
    else:
        raise ValueError(f"Unknown transformation: {kind}")


def transform_board(board: Sequence[int], kind: str) -> List[int]:
    grid = np.asarray(board, dtype=np.int8).reshape(3, 3)
    return [int(v) for v in _transform_grid(grid, kind).reshape(-1)]


def sym_index_map(kind: str) -> List[int]:
    # image of each cell index under the transform
    cells = transform_board(list(range(9)), kind)
    mapping = [0] * 9
    for new_idx, old_idx in enumerate(cells):
        mapping[old_idx] = new_idx
    return mapping


SYMM_INDEX_MAPS = {k: sym_index_map(k) for k in ALL_SYMS}


def apply_action_transform(action: int, kind: str) -> int:
    return SYMM_INDEX_MAPS[kind][action]


def transform_move(move: Move, kind: str) -> Move:
    return to_move(apply_action_transform(to_index(move), kind))


@lru_cache(maxsize=None)
def _symmetry_info_tuple(board_t: tuple) -> Dict:
    board = list(board_t)
    images = []
    for k in ALL_SYMS:
        images.append((serialize_board(transform_board(board, k)), k))
    canonical_str, canonical_op = min(images, key=lambda x: x[0])
    return {
        'canonical_form': canonical_str,
        'canonical_op': canonical_op,
        'orbit_size': len({s for s, _ in images}),
    }


def symmetry_info(board: Sequence[int]) -> Dict:
    # copy so callers cannot mutate the cached entry
    return dict(_symmetry_info_tuple(tuple(board)))
