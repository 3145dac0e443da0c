from __future__ import annotations

import argparse
import csv
import logging
import sys
from typing import List, Optional

from .config import GameConfig, parse_symbol
from .game_basics import current_player, deserialize_board, is_valid_state, opponent, render_board
from .selector import score_moves, search
from .session import GameSession, run_console
from .symmetry import symmetry_info
from .tactics import blocking_moves, fork_moves, immediate_winning_moves


def _add_board_args(p: argparse.ArgumentParser, stdin: bool = False) -> None:
    help_board = "Board string, 9 cells row-major, 0/1/2 or ./X/O, e.g. 100020000"
    if stdin:
        p.add_argument("--board", help=help_board + " (omit with --stdin)")
        p.add_argument(
            "--stdin", action="store_true", help="Read many boards from stdin and stream CSV output"
        )
    else:
        p.add_argument("--board", required=True, help=help_board)
    p.add_argument(
        "--allow-unreachable",
        action="store_true",
        help="Accept boards that cannot arise from X-first alternating play",
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt-ai", description="Perfect-play tic-tac-toe")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print environment and dependency info and exit",
    )

    p_best = sub.add_parser("best-move", help="Pick the perfect-play move for a board")
    _add_board_args(p_best, stdin=True)
    p_best.add_argument(
        "--player", choices=["1", "2", "X", "O", "x", "o"], help="Side to move (default: from piece counts)"
    )

    p_scores = sub.add_parser("scores", help="Score every legal move for a board")
    _add_board_args(p_scores)
    p_scores.add_argument(
        "--player", choices=["1", "2", "X", "O", "x", "o"], help="Side to move (default: from piece counts)"
    )

    p_sym = sub.add_parser("symmetry", help="Show symmetry info for a board")
    _add_board_args(p_sym)

    p_tac = sub.add_parser("tactics", help="List immediate wins, blocks and forks for side-to-move")
    _add_board_args(p_tac)

    p_play = sub.add_parser("play", help="Play against the computer on the console")
    p_play.add_argument("--ai-symbol", choices=["X", "O", "x", "o"], help="Computer's symbol (default: TTT_AI_SYMBOL or O)")
    p_play.add_argument("--computer-first", action="store_true", help="Let the computer open")

    return p


def _print_info() -> None:
    import importlib.util
    import platform

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    for pkg in ["numpy"]:
        spec = importlib.util.find_spec(pkg)
        if spec is None:
            print(f"{pkg}=<not installed>")
        else:
            mod = __import__(pkg)
            ver = getattr(mod, "__version__", "?")
            print(f"{pkg}={ver}")


def _parse_board(raw: str, allow_unreachable: bool) -> List[int]:
    b = deserialize_board(raw)
    if not allow_unreachable and not is_valid_state(b):
        raise ValueError("Board is not a valid reachable state.")
    return b


def _player_for(board: List[int], player: Optional[str]) -> int:
    return parse_symbol(player) if player else current_player(board)


def _best_move_stdin(allow_unreachable: bool, player: Optional[str]) -> int:
    w = csv.writer(sys.stdout)
    w.writerow(["board", "player", "move", "score"])
    for line in sys.stdin:
        raw = line.strip()
        if not raw:
            continue
        try:
            b = _parse_board(raw, allow_unreachable)
        except ValueError:
            continue
        p = _player_for(b, player)
        res = search(b, p, opponent(p))
        move = "" if res.move is None else f"{res.move[0]} {res.move[1]}"
        w.writerow([raw, p, move, "" if res.score is None else res.score])
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    # Early exits
    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("tictactoe-ai"))
        except Exception:
            print("unknown")
        return 0
    if getattr(ns, "info", False):
        _print_info()
        return 0

    if ns.cmd == "best-move" and ns.stdin:
        return _best_move_stdin(ns.allow_unreachable, ns.player)

    if ns.cmd == "play":
        try:
            cfg = GameConfig.from_env(
                ai_player=parse_symbol(ns.ai_symbol) if ns.ai_symbol else None,
                human_starts=False if ns.computer_first else None,
            )
        except ValueError as e:
            logging.error("%s", e)
            return 2
        outcome = run_console(GameSession(cfg))
        logging.info("outcome=%s", outcome.value)
        return 0

    if ns.cmd in ("best-move", "scores", "symmetry", "tactics"):
        try:
            b = _parse_board(ns.board or "", ns.allow_unreachable)
        except ValueError as e:
            logging.error("Invalid board: %s", e)
            return 2
        logging.debug("board:\n%s", render_board(b))

        if ns.cmd == "best-move":
            p = _player_for(b, ns.player)
            res = search(b, p, opponent(p))
            logging.info("player=%d move=%s score=%s nodes=%d", p, res.move, res.score, res.nodes)
            return 0

        if ns.cmd == "scores":
            p = _player_for(b, ns.player)
            scores = score_moves(b, p, opponent(p))
            logging.info(
                "player=%d scores=%s",
                p,
                " ".join(f"{r},{c}:{s}" for (r, c), s in scores.items()),
            )
            return 0

        if ns.cmd == "symmetry":
            info = symmetry_info(b)
            logging.info(
                "canonical_form=%s orbit_size=%d op=%s",
                info['canonical_form'],
                info['orbit_size'],
                info['canonical_op'],
            )
            return 0

        if ns.cmd == "tactics":
            p = current_player(b)
            logging.info(
                "to_move=%d wins=%s blocks=%s forks=%s",
                p,
                immediate_winning_moves(b, p),
                blocking_moves(b, p),
                fork_moves(b, p),
            )
            return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
