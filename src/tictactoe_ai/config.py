"""Game configuration.

Environment-first, with defaults matching the classic setup: the human
plays X and moves first, the computer plays O.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .game_basics import O, X, opponent

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def parse_symbol(value: str) -> int:
    v = value.strip().upper()
    if v in ("X", "1"):
        return X
    if v in ("O", "2"):
        return O
    raise ValueError(f"Invalid symbol {value!r}; expected X or O")


def parse_bool(value: str) -> bool:
    v = value.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ValueError(f"Invalid boolean {value!r}")


@dataclass(frozen=True)
class GameConfig:
    human_player: int = X
    ai_player: int = O
    human_starts: bool = True

    def __post_init__(self) -> None:
        if self.human_player not in (X, O) or self.ai_player not in (X, O):
            raise ValueError(
                f"Players must be X or O, got human={self.human_player} ai={self.ai_player}"
            )
        if self.human_player == self.ai_player:
            raise ValueError("Human and computer must play different symbols")

    @classmethod
    def from_env(
        cls,
        ai_player: Optional[int] = None,
        human_starts: Optional[bool] = None,
    ) -> GameConfig:
        """Read TTT_AI_SYMBOL and TTT_HUMAN_STARTS; unset means default.

        Explicit arguments win, and the matching variable is not read at all.
        """
        if ai_player is None:
            ai = os.getenv("TTT_AI_SYMBOL")
            ai_player = parse_symbol(ai) if ai else O
        if human_starts is None:
            starts = os.getenv("TTT_HUMAN_STARTS")
            human_starts = parse_bool(starts) if starts else True
        return cls(
            human_player=opponent(ai_player),
            ai_player=ai_player,
            human_starts=human_starts,
        )
