#!/usr/bin/env python3
"""
CLI script to simulate a learner against the adaptive selector.

A simulated learner answers every pick; "weak" items are answered wrong
with a higher error rate. The script prints how often each item was
picked and its final weight, which is a quick way to eyeball a parameter
change before shipping it.

Usage:
    python -m scripts.simulate_learner --items a,i,u,e,o --weak a [options]

Examples:
    # 2000 picks, one weak item, fixed seed
    python -m scripts.simulate_learner --items a,i,u,e,o --weak a --rounds 2000 --seed 7

    # Try a wider recency window
    python -m scripts.simulate_learner --items a,i,u --params '{"recency_window": 2}'
"""

import argparse
import json
import logging
import sys
from collections import Counter
from pathlib import Path

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from kanadojo.core.app_exceptions import AppError
from kanadojo.core.logging import setup_logging
from kanadojo.learning_engine.adaptive_selection import AdaptiveSelector, create_seeded_rng
from kanadojo.learning_engine.params import build_selection_params

logger = logging.getLogger(__name__)


def simulate(
    selector: AdaptiveSelector,
    items: list[str],
    weak: set[str],
    rounds: int,
    weak_error_rate: float,
    error_rate: float,
    seed: int | None,
) -> Counter:
    """
    Run the select / mark seen / update protocol for a number of rounds.

    Returns:
        Counter of picks per item
    """
    learner_rng = create_seeded_rng(None if seed is None else seed + 1)
    picks: Counter = Counter()

    for _ in range(rounds):
        item = selector.select_weighted_character(items)
        selector.mark_character_seen(item)
        picks[item] += 1

        p_wrong = weak_error_rate if item in weak else error_rate
        selector.update_character_weight(item, learner_rng.random() >= p_wrong)

    return picks


def main() -> int:
    parser = argparse.ArgumentParser(description="Simulate a learner against the adaptive selector")
    parser.add_argument("--items", required=True, help="Comma-separated candidate pool")
    parser.add_argument("--weak", default="", help="Comma-separated items the learner struggles with")
    parser.add_argument("--rounds", type=int, default=1000, help="Number of picks (default: 1000)")
    parser.add_argument("--weak-error-rate", type=float, default=0.6, help="Error rate on weak items")
    parser.add_argument("--error-rate", type=float, default=0.1, help="Error rate on other items")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible runs")
    parser.add_argument("--params", default=None, help="JSON object of parameter overrides")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    args = parser.parse_args()

    setup_logging(level=args.log_level, json_output=False)

    items = [item.strip() for item in args.items.split(",") if item.strip()]
    weak = {item.strip() for item in args.weak.split(",") if item.strip()}

    try:
        overrides = json.loads(args.params) if args.params else None
        params = build_selection_params(overrides)
    except json.JSONDecodeError as e:
        logger.error(f"--params is not valid JSON: {e}")
        return 1
    except AppError as e:
        logger.error(f"{e.message}: {e.details}")
        return 1

    selector = AdaptiveSelector(params=params, rng=create_seeded_rng(args.seed))

    try:
        picks = simulate(
            selector,
            items,
            weak,
            args.rounds,
            args.weak_error_rate,
            args.error_rate,
            args.seed,
        )
    except AppError as e:
        logger.error(f"Simulation failed: {e.message}")
        return 1

    total = sum(picks.values())
    print(f"{'item':<8} {'picks':>7} {'share':>7} {'weight':>8} {'correct':>8} {'wrong':>6}")
    for item in sorted(set(items), key=lambda i: -picks[i]):
        stat = selector.get_stat(item)
        share = picks[item] / total if total else 0.0
        weight = stat.weight if stat else params.neutral_weight
        correct = stat.correct_count if stat else 0
        wrong = stat.wrong_count if stat else 0
        marker = "*" if item in weak else ""
        print(f"{item + marker:<8} {picks[item]:>7} {share:>7.1%} {weight:>8.3f} {correct:>8} {wrong:>6}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
