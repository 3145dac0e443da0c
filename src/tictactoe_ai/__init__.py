"""tictactoe_ai package.

Perfect-play move selection for tic-tac-toe, board rules, symmetry helpers,
a console game session, and a simple CLI.

Convenience imports are exposed for common workflows.
"""

from .game_basics import EMPTY, O, X
from .selector import score_moves, search, select_best_move
from .session import GameSession, Outcome

__all__ = [
    "EMPTY",
    "X",
    "O",
    "select_best_move",
    "search",
    "score_moves",
    "GameSession",
    "Outcome",
]
