#!/usr/bin/env python3
"""Replay claim attempts from a scenario file and print the outcome.

Usage (from the repository root):
    python scripts/replay_claims.py scenario.json              # JSON summary
    python scripts/replay_claims.py scenario.json --verbose    # plus engine logs
    python scripts/replay_claims.py scenario.json --summary    # one line per claim

See ``territory/replay.py`` for the scenario format.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add the repository root to the path so we can import territory
SCRIPT_DIR = Path(__file__).resolve().parent
ROOT_DIR = SCRIPT_DIR.parent
sys.path.insert(0, str(ROOT_DIR))

from territory.replay import print_summary, replay_json  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("scenario", type=Path, help="scenario JSON file")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="log engine activity"
    )
    parser.add_argument(
        "--summary", action="store_true", help="human-readable summary"
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    with open(args.scenario) as f:
        scenario = json.load(f)
    result = replay_json(scenario)

    if args.summary:
        print_summary(result)
    else:
        json.dump(result, sys.stdout, indent=2)
        print()


if __name__ == "__main__":
    main()
