from __future__ import annotations

import argparse
import shlex
import sys
from pathlib import Path
from typing import Iterable, List, Sequence

from src.application.services.scoreboard_factory import create
from src.application.services.scoreboard_service import Scoreboard
from src.application.services.summary_ordering import ORDERINGS, get_ordering
from src.domain.entities import Match
from src.domain.exceptions import ScoreboardError
from src.logging_config import get_logger

DEMO_MATCHES = [
    ("Mexico", "Canada", 0, 5),
    ("Spain", "Brazil", 10, 2),
    ("Germany", "France", 2, 2),
    ("Uruguay", "Italy", 6, 6),
    ("Argentina", "Australia", 3, 1),
]

_ARITY = {"start": 2, "update": 4, "finish": 2, "summary": 0}


class CommandError(ValueError):
    """Raised for a malformed line in a replay file."""


def _format_summary(matches: Sequence[Match]) -> str:
    if not matches:
        return "No matches in progress."
    out_lines: List[str] = []
    for i, m in enumerate(matches, start=1):
        out_lines.append(
            "%d. %s %d - %d %s"
            % (i, m.home_team.name, m.home_score, m.away_score, m.away_team.name)
        )
    return "\n".join(out_lines)


def run_demo(board: Scoreboard) -> None:
    print("Starting matches...")
    for home, away, _, _ in DEMO_MATCHES:
        board.start_match(home, away)

    print("Updating scores...")
    for home, away, home_score, away_score in DEMO_MATCHES:
        board.update_score(home, away, home_score, away_score)

    print("\nSummary of matches:")
    print(_format_summary(board.get_summary()))

    print("\nFinishing the Mexico vs Canada match...")
    board.finish_match("Mexico", "Canada")

    print("\nUpdated summary after finishing a match:")
    print(_format_summary(board.get_summary()))


def _parse_line(line: str) -> tuple[str, list[str]]:
    try:
        tokens = shlex.split(line, comments=True)
    except ValueError as exc:
        raise CommandError(str(exc)) from exc
    if not tokens:
        return "", []
    cmd, args = tokens[0].lower(), tokens[1:]
    if cmd not in _ARITY:
        raise CommandError(f"unknown command '{tokens[0]}'")
    if len(args) != _ARITY[cmd]:
        raise CommandError(f"'{cmd}' expects {_ARITY[cmd]} argument(s), got {len(args)}")
    return cmd, args


def _to_int(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise CommandError(f"score must be an integer, got '{value}'") from None


def run_replay(board: Scoreboard, lines: Iterable[str]) -> int:
    """Execute scoreboard commands line by line; stop at the first failure."""
    for lineno, line in enumerate(lines, start=1):
        try:
            cmd, args = _parse_line(line)
            if cmd == "start":
                m = board.start_match(args[0], args[1])
                print(f"Started: {m}")
            elif cmd == "update":
                m = board.update_score(args[0], args[1], _to_int(args[2]), _to_int(args[3]))
                print(f"Updated: {m}")
            elif cmd == "finish":
                board.finish_match(args[0], args[1])
                print(f"Finished: {args[0]} vs {args[1]}")
            elif cmd == "summary":
                print(_format_summary(board.get_summary()))
        except CommandError as exc:
            print(f"line {lineno}: {exc}", file=sys.stderr)
            return 2
        except ScoreboardError as exc:
            print(f"line {lineno}: {exc}", file=sys.stderr)
            return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Live football scoreboard")
    p.add_argument(
        "--ordering",
        choices=sorted(ORDERINGS),
        help="Summary ordering (default: SCOREBOARD_ORDERING or total score, then most recent)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("demo", help="Run the five-match example and print the summaries")

    pr = sub.add_parser("replay", help="Execute commands from a file")
    pr.add_argument("file", type=Path, help="Command file (start/update/finish/summary)")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    from src.config.settings import settings

    get_logger(settings.log_file, settings.log_level)
    board = create(get_ordering(args.ordering or settings.ordering))

    if args.cmd == "demo":
        run_demo(board)
        return 0

    try:
        text = args.file.read_text(encoding="utf-8")
    except OSError as exc:
        print(f"Cannot read {args.file}: {exc}", file=sys.stderr)
        return 2
    return run_replay(board, text.splitlines())


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
