#!/usr/bin/env python3
"""Generate holding pattern entry practice scenarios."""

import argparse
import json
import random
import sys
from pathlib import Path

from hold_entry.config.loader import ConfigLoader
from hold_entry.errors import ConfigurationError
from hold_entry.logging.config import configure_logging
from hold_entry.scenario import (
    ASSUMPTION_TEXT,
    format_holding_instructions,
    format_solution,
    generate_scenario,
    scenario_to_dict,
)


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("-n", "--count", type=int, default=1,
                        help="number of scenarios to generate (default: 1)")
    parser.add_argument("--seed", type=int, default=None,
                        help="random seed for a reproducible set")
    parser.add_argument("--config-dir", type=Path, default=None,
                        help="directory containing trainer.yaml")
    parser.add_argument("--json", action="store_true",
                        help="print one JSON object per scenario")
    parser.add_argument("--log-level", default=None,
                        help="override the configured log level")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main generation function."""
    args = parse_args(argv)

    # Route config loading logs to stderr before the configured level is known
    configure_logging()

    loader = ConfigLoader.create(args.config_dir)
    logging_overrides = {"logging": {"level": args.log_level}} if args.log_level else None

    try:
        logging_params = loader.logging_params(logging_overrides)
        scenario_params = loader.scenario_params()
    except ConfigurationError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    configure_logging(level=logging_params.level, format_json=logging_params.format_json)

    rng = random.Random(args.seed)

    for number in range(1, args.count + 1):
        scenario = generate_scenario(rng, scenario_params)

        if args.json:
            print(json.dumps(scenario_to_dict(scenario)))
            continue

        print(f"\n✈️  Scenario {number}")
        print(f"  {ASSUMPTION_TEXT}")
        print(f"  Course to fix: {scenario.course_to_fix}")
        print(f"  ATC: {format_holding_instructions(scenario.hold)}")
        print(f"  Correct entry: {', '.join(format_solution(scenario.solution))}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
