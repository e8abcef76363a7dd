"""Pot and stack bookkeeping for scenario snapshots.

Every helper returns fresh values and leaves its inputs untouched, so a street
builder can derive the next snapshot's pot and stacks without disturbing the
snapshot it started from.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .scenario import ActionEvent

__all__ = [
    "DEFAULT_STACK_SIZE",
    "apply_contribution",
    "apply_history",
    "committed_by",
    "committed_total",
    "fresh_stacks",
]

logger = logging.getLogger(__name__)

DEFAULT_STACK_SIZE = 100.0


def fresh_stacks(positions: Iterable[str], depth: float = DEFAULT_STACK_SIZE) -> dict[str, float]:
    return {position: float(depth) for position in positions}


def committed_total(history: Iterable[ActionEvent]) -> float:
    """Sum of every amount put into the pot, blinds included."""

    return sum(float(event.amount) for event in history if event.amount is not None)


def committed_by(history: Iterable[ActionEvent], position: str) -> float:
    return sum(float(event.amount) for event in history if event.player == position and event.amount is not None)


def apply_contribution(stacks: Mapping[str, float], position: str, amount: float) -> dict[str, float]:
    """Return a copy of ``stacks`` with ``amount`` deducted from ``position``.

    Contributions are capped by the remaining stack.
    """

    updated = dict(stacks)
    if amount <= 0:
        return updated
    if position not in updated:
        raise KeyError(f"No stack tracked for position '{position}'")
    stack = float(updated[position])
    applied = min(float(amount), stack)
    if applied < amount:
        logger.debug("Contribution for %s truncated from %.2f to %.2f due to stack limit", position, amount, applied)
    updated[position] = stack - applied
    return updated


def apply_history(stacks: Mapping[str, float], history: Iterable[ActionEvent]) -> dict[str, float]:
    updated = dict(stacks)
    for event in history:
        if event.amount is not None:
            updated = apply_contribution(updated, event.player, event.amount)
    return updated
