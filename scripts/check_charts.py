#!/usr/bin/env python3
"""Report how much of the 169-hand grid each RFI chart covers.

Usage:
    python scripts/check_charts.py [--charts PATH] [--profile NAME] [--verbose]
"""

from __future__ import annotations

import argparse
from collections import Counter

from pokertrainer.data.chart_loader import DEFAULT_TABLE_PROFILE, load_chart_set
from pokertrainer.dynamic.hand_ranges import all_hand_codes, resolve_chart_entry
from pokertrainer.dynamic.seating import POSITIONS_6_MAX


def main() -> None:
    parser = argparse.ArgumentParser(description="Summarise RFI chart coverage per position.")
    parser.add_argument("--charts", default=None, help="Chart JSON file (defaults to the bundled charts)")
    parser.add_argument("--profile", default=DEFAULT_TABLE_PROFILE, help="Table profile to inspect")
    parser.add_argument("--verbose", action="store_true", help="List hands resolved through generic rows")
    args = parser.parse_args()

    charts = load_chart_set(args.charts)
    hands = all_hand_codes()
    for position in POSITIONS_6_MAX:
        chart = charts.position_chart(args.profile, position)
        if chart is None:
            print(f"{position}: no chart")
            continue
        actions: Counter[str] = Counter()
        generic: list[str] = []
        for hand in hands:
            resolved = resolve_chart_entry(chart, hand)
            if resolved is None:
                actions["fold (default)"] += 1
                continue
            key, entry = resolved
            actions[entry.action] += 1
            if key != hand:
                generic.append(f"{hand}<-{key}")
        summary = ", ".join(f"{action} {count}" for action, count in sorted(actions.items()))
        print(f"{position}: {summary}")
        if args.verbose and generic:
            print(f"  generic: {' '.join(generic)}")


if __name__ == "__main__":
    main()
