"""
Human vs computer game session and a console front end for it.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, List, Optional

from .config import GameConfig
from .game_basics import EMPTY, Move, SYMBOLS, empty_board, has_won, is_full, render_board, to_index
from .selector import select_best_move


class Outcome(Enum):
    IN_PROGRESS = "in_progress"
    HUMAN_WIN = "human_win"
    AI_WIN = "ai_win"
    DRAW = "draw"


class GameSession:
    """Owns the board and whose turn it is; the computer plays perfectly."""

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()
        self.board: List[int] = empty_board()
        self.to_move = self.config.human_player
        self.reset()

    @property
    def human(self) -> int:
        return self.config.human_player

    @property
    def ai(self) -> int:
        return self.config.ai_player

    def reset(self) -> None:
        self.board = empty_board()
        if self.config.human_starts:
            self.to_move = self.human
        else:
            self.to_move = self.ai
            self.ai_move()

    def outcome(self) -> Outcome:
        if has_won(self.board, self.human):
            return Outcome.HUMAN_WIN
        if has_won(self.board, self.ai):
            return Outcome.AI_WIN
        if is_full(self.board):
            return Outcome.DRAW
        return Outcome.IN_PROGRESS

    def is_over(self) -> bool:
        return self.outcome() is not Outcome.IN_PROGRESS

    def human_move(self, row: int, col: int) -> None:
        if self.is_over():
            raise ValueError("Game is already over!")
        if self.to_move != self.human:
            raise ValueError("It's not your turn!")
        idx = to_index((row, col))
        if self.board[idx] != EMPTY:
            raise ValueError(f"Cell ({row}, {col}) is already occupied!")
        self.board[idx] = self.human
        self.to_move = self.ai

    def ai_move(self) -> Optional[Move]:
        if self.is_over() or self.to_move != self.ai:
            return None
        move = select_best_move(self.board, self.ai, self.human)
        if move is None:
            return None
        self.board[to_index(move)] = self.ai
        self.to_move = self.human
        logging.debug("computer played %s", move)
        return move


def outcome_message(session: GameSession) -> str:
    outcome = session.outcome()
    if outcome is Outcome.HUMAN_WIN:
        return f"You Win! ({SYMBOLS[session.human]})"
    if outcome is Outcome.AI_WIN:
        return f"Computer Wins! ({SYMBOLS[session.ai]})"
    if outcome is Outcome.DRAW:
        return "Draw!"
    return f"Your turn ({SYMBOLS[session.human]})"


def _parse_move(text: str) -> Move:
    parts = text.replace(',', ' ').split()
    if len(parts) != 2:
        raise ValueError("Enter a move as: row col (each 0-2)")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError("Enter a move as: row col (each 0-2)") from None


def run_console(
    session: GameSession,
    read: Optional[Callable[[str], str]] = None,
    write: Optional[Callable[[str], None]] = None,
) -> Outcome:
    """Play games on the console until the user quits.

    `read` and `write` default to input() and print(). Returns the outcome of
    the last game played (IN_PROGRESS if the user quit in the middle of one).
    """
    read = read or input
    write = write or print
    while True:
        write(render_board(session.board))
        if session.is_over():
            write(outcome_message(session))
            try:
                again = read("Play again? [y/N] ")
            except EOFError:
                return session.outcome()
            if again.strip().lower() not in ("y", "yes"):
                return session.outcome()
            session.reset()
            continue

        try:
            text = read(f"{outcome_message(session)} row col (q to quit): ")
        except EOFError:
            return session.outcome()
        if text.strip().lower() in ("q", "quit"):
            return session.outcome()
        try:
            row, col = _parse_move(text)
            session.human_move(row, col)
        except ValueError as e:
            write(str(e))
            continue

        move = session.ai_move()
        if move is not None:
            write(f"Computer moved: {move[0]} {move[1]}")
