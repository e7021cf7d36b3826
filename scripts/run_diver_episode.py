#!/usr/bin/env python3
"""run_diver_episode.py: play seek-and-scram episodes on generated mazes and report the results.

Usage:
    python scripts/run_diver_episode.py [--policy URI] [--seeds N] [--rows R --cols C] [--format {table,csv,json}]

Examples:
    python scripts/run_diver_episode.py --seeds 10
    python scripts/run_diver_episode.py --policy "sewer://policy/diver?trace=1&trace_level=2" --seeds 1
"""

from __future__ import annotations

import argparse
import csv
import io
import json
import sys

from pydantic import ValidationError

from sewer_agents.game.config import EpisodeConfig, MazeConfig, ScramConfig
from sewer_agents.game.episode import EpisodeReport, run_episode
from sewer_agents.game.errors import SewerGameError
from sewer_agents.policy.scripted_agent.diver.types import ExitUnreachableError, RingNotFoundError
from sewer_agents.policy.scripted_registry import load_scripted_agent, resolve_scripted_agent_uri

# Columns to display: (header, report key)
COLUMNS = [
    ("seed", "seed"),
    ("nodes", "nodes"),
    ("seek.moves", "seek_moves"),
    ("seek.steps", "seek_steps"),
    ("budget", "scram_budget"),
    ("left", "scram_steps_left"),
    ("coins", "coins_collected"),
    ("available", "coins_available"),
    ("exit", "reached_exit"),
    ("score", "score"),
]


def format_val(v: object) -> str:
    if v is None:
        return "-"
    if isinstance(v, bool):
        return "yes" if v else "no"
    if isinstance(v, float):
        return f"{v:.2f}"
    return str(v)


def print_table(rows: list[dict[str, object]]) -> None:
    """Print a human-readable results table."""
    if not rows:
        print("No episodes played.")
        return

    widths = [max(len(header), max(len(format_val(r.get(key))) for r in rows)) for header, key in COLUMNS]
    header = "  ".join(h.rjust(widths[i]) for i, (h, _) in enumerate(COLUMNS))
    sep = "-" * len(header)

    print(sep)
    print(header)
    print(sep)
    for r in rows:
        print("  ".join(format_val(r.get(key)).rjust(widths[i]) for i, (_, key) in enumerate(COLUMNS)))
    print(sep)

    total = sum(int(r["score"]) for r in rows)  # type: ignore[arg-type]
    escaped = sum(1 for r in rows if r["reached_exit"])
    print(f"episodes={len(rows)} escaped={escaped} total_score={total}")


def print_csv(rows: list[dict[str, object]]) -> None:
    """Print CSV output."""
    buf = io.StringIO()
    writer = csv.writer(buf)
    writer.writerow([h for h, _ in COLUMNS])
    for r in rows:
        writer.writerow([format_val(r.get(key)) for _, key in COLUMNS])
    print(buf.getvalue(), end="")


def print_json_output(rows: list[dict[str, object]]) -> None:
    """Print JSON output."""
    print(json.dumps(rows, indent=2, default=str))


def play(policy_uri: str, config: EpisodeConfig) -> EpisodeReport:
    diver = load_scripted_agent(policy_uri)
    return run_episode(diver, config)  # type: ignore[arg-type]


def main() -> None:
    parser = argparse.ArgumentParser(description="Run diver episodes on generated sewer mazes.")
    parser.add_argument("--policy", default=resolve_scripted_agent_uri("diver"), help="Policy URI or short name")
    parser.add_argument("--seeds", type=int, default=5, help="Number of seeds to play (default: 5)")
    parser.add_argument("--first-seed", type=int, default=0, help="First seed (default: 0)")
    parser.add_argument("--rows", type=int, default=8)
    parser.add_argument("--cols", type=int, default=8)
    parser.add_argument("--loop-fraction", type=float, default=0.15)
    parser.add_argument("--budget-factor", type=float, default=3.0)
    parser.add_argument(
        "--format",
        choices=["table", "csv", "json"],
        default="table",
        help="Output format (default: table)",
    )
    args = parser.parse_args()

    rows: list[dict[str, object]] = []
    for seed in range(args.first_seed, args.first_seed + args.seeds):
        try:
            config = EpisodeConfig(
                maze=MazeConfig(rows=args.rows, cols=args.cols, seed=seed, loop_fraction=args.loop_fraction),
                scram=ScramConfig(budget_factor=args.budget_factor),
            )
        except ValidationError as exc:
            print(f"Error: invalid episode configuration: {exc}", file=sys.stderr)
            sys.exit(2)
        try:
            report = play(args.policy, config)
        except (SewerGameError, RingNotFoundError, ExitUnreachableError) as exc:
            print(f"Warning: seed {seed} failed: {exc}", file=sys.stderr)
            continue
        rows.append(report.as_dict())

    if args.format == "table":
        print_table(rows)
    elif args.format == "csv":
        print_csv(rows)
    elif args.format == "json":
        print_json_output(rows)


if __name__ == "__main__":
    main()
