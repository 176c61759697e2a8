# solve.py
"""
Command-line solver: read a digit grid from a file and print the least
entry cost from the top-left to the bottom-right of the text.

With no run limits given, both classic variants are solved and timed:
the standard crucible (1..3) and the ultra crucible (4..10).
"""

import argparse
import sys
import time
from typing import List, Optional, Tuple

from pathcost.commands.generator import CommandGenerator
from pathcost.entities.grid import CostGrid
from pathcost.pathfinding.path_coster import PathCoster
from pathcost.utils.consts import (
    CRUCIBLE_MAX_RUN,
    CRUCIBLE_MIN_RUN,
    ULTRA_MAX_RUN,
    ULTRA_MIN_RUN,
)
from pathcost.utils.errors import ConfigError


def parse_point(text: str) -> Tuple[int, int]:
    try:
        x, y = text.split(",")
        return int(x), int(y)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected x,y but got {text!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Least-cost crucible route across a digit grid."
    )
    parser.add_argument("input", help="Path to the grid text file.")
    parser.add_argument("--min-run", type=int, help="Cells to go straight before a turn or stop.")
    parser.add_argument("--max-run", type=int, help="Most cells allowed in a straight line.")
    parser.add_argument("--start", type=parse_point, default=(0, 0), help="Start cell as x,y.")
    parser.add_argument("--goal", type=parse_point, help="Goal cell as x,y (default bottom-right).")
    parser.add_argument("--max-expansions", type=int, help="Give up after this many settled states.")
    parser.add_argument("--show-path", action="store_true", help="Also print the movement commands.")
    return parser


def solve_one(coster: PathCoster, start, goal, show_path: bool, label: str) -> Optional[int]:
    t0 = time.perf_counter()
    result = coster.search(start, goal)
    elapsed = time.perf_counter() - t0
    print(f"Solved {label} in {elapsed:.4f} seconds")

    if result.status == "budget_exceeded":
        print(f"⏱️ Gave up after {result.expanded} states")
        return None
    if result.status == "no_path":
        print("💀 No path satisfies the run limits")
        return None

    print(result.cost)
    if show_path:
        print(" ".join(CommandGenerator().generate_commands(result.path)))
    return result.cost


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if (args.min_run is None) != (args.max_run is None):
        print("❌ --min-run and --max-run must be given together", file=sys.stderr)
        return 2

    if args.min_run is None:
        variants = [
            ("part one", CRUCIBLE_MIN_RUN, CRUCIBLE_MAX_RUN),
            ("part two", ULTRA_MIN_RUN, ULTRA_MAX_RUN),
        ]
    else:
        variants = [(f"runs {args.min_run}..{args.max_run}", args.min_run, args.max_run)]

    try:
        with open(args.input) as f:
            grid = CostGrid.from_lines(f)
        results = []
        for label, min_run, max_run in variants:
            coster = PathCoster(grid, min_run, max_run, max_expansions=args.max_expansions)
            results.append(solve_one(coster, args.start, args.goal, args.show_path, label))
    except ConfigError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"❌ Cannot read {args.input}: {e}", file=sys.stderr)
        return 2

    return 0 if all(r is not None for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
