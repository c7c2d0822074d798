"""Command line entry point for the tube-sort solver."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from contracts.errors import TubesortError
from ports import solve_log
from ports.solver_port import replay_payload, solve_payload
from tools.reports import solve_report


def _read_json(path: str) -> Any:
    return json.loads(Path(path).read_text("utf-8"))


def _build_cli_env(args: argparse.Namespace) -> Dict[str, str]:
    env: Dict[str, str] = {}
    if args.max_iterations is not None:
        env["CLI_TUBESORT_MAX_ITERATIONS"] = str(args.max_iterations)
    if args.unbounded:
        env["CLI_TUBESORT_FRONTIER_CEILING"] = "0"
    elif args.frontier_ceiling is not None:
        env["CLI_TUBESORT_FRONTIER_CEILING"] = str(args.frontier_ceiling)
    if args.frontier_keep is not None:
        env["CLI_TUBESORT_FRONTIER_KEEP"] = str(args.frontier_keep)
    return env


def cmd_solve(args: argparse.Namespace) -> int:
    if args.log_dir:
        solve_log.configure(args.log_dir)
    result = solve_payload(
        _read_json(args.file),
        profile=args.profile,
        env=_build_cli_env(args),
        log_events=bool(args.log_dir) or args.journal,
    )
    print(json.dumps(result, indent=2, sort_keys=True))
    return 0 if result["solved"] else 1


def cmd_replay(args: argparse.Namespace) -> int:
    moves = _read_json(args.moves)
    if isinstance(moves, dict):
        moves = moves.get("moves", [])
    outcome = replay_payload(_read_json(args.file), moves)
    print(json.dumps(outcome, indent=2, sort_keys=True))
    return 0 if outcome["sorted"] else 1


def cmd_report(args: argparse.Namespace) -> int:
    base_dir = Path(args.path)
    if not base_dir.is_dir():
        raise SystemExit(f"No solve journal found under {base_dir}")
    summary = solve_report.aggregate(base_dir, top=args.top)
    print(json.dumps(summary, indent=2, sort_keys=True))
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Liquid-sort puzzle solver")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for solver diagnostics",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    solve = sub.add_parser("solve", help="Search for a move sequence that sorts the tubes")
    solve.add_argument("file", help="JSON file with a {\"tubes\": [...]} payload")
    solve.add_argument("--profile", default="dev")
    solve.add_argument("--max-iterations", type=int, default=None)
    solve.add_argument("--frontier-ceiling", type=int, default=None)
    solve.add_argument("--frontier-keep", type=int, default=None)
    solve.add_argument(
        "--unbounded",
        action="store_true",
        help="Disable frontier trimming (complete search, unbounded memory)",
    )
    solve.add_argument("--log-dir", default=None, help="Directory for the JSONL solve journal")
    solve.add_argument(
        "--journal",
        action="store_true",
        help="Append the outcome to the configured solve journal",
    )
    solve.set_defaults(func=cmd_solve)

    replay = sub.add_parser("replay", help="Apply a move list and print the resulting tubes")
    replay.add_argument("file", help="JSON file with a {\"tubes\": [...]} payload")
    replay.add_argument("moves", help="JSON file with [[source, target], ...] or a solve result")
    replay.set_defaults(func=cmd_replay)

    report = sub.add_parser("report", help="Aggregate solve journal statistics")
    report.add_argument("path", help="Directory containing JSONL journals")
    report.add_argument("--top", type=int, default=5)
    report.set_defaults(func=cmd_report)

    return parser


def main(argv: List[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), stream=sys.stderr)
    try:
        return args.func(args)
    except TubesortError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
