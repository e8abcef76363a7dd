"""Starting-hand codes and the generic chart ranges used as lookup fallbacks.

Hand codes follow the usual chart notation: higher rank first, then the lower
rank, then ``s`` (suited), ``o`` (offsuit) or nothing for a pocket pair, e.g.
``AKs``, ``72o``, ``TT``.

Charts may list generic rows such as ``Axs`` or ``Q9s+`` instead of every
individual hand. ``GENERIC_RANGES`` declares those rows in the order they are
tried, each as a rank-ordinal membership test.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TypeVar

from ..core.errors import UnparseableHandError
from .cards import RANKS, SUIT_ALIASES

__all__ = [
    "GENERIC_RANGES",
    "GenericRange",
    "HandCode",
    "all_hand_codes",
    "normalize_hand",
    "parse_hand_code",
    "resolve_chart_entry",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class HandCode:
    high: str
    low: str
    suffix: str  # "", "s" or "o"

    @property
    def is_pair(self) -> bool:
        return self.high == self.low

    @property
    def suited(self) -> bool:
        return self.suffix == "s"

    def __str__(self) -> str:
        return f"{self.high}{self.low}{self.suffix}"


def normalize_hand(hole_cards: Sequence[str]) -> str:
    """Return the chart code for two hole-card strings.

    Raises ``UnparseableHandError`` when the input is not two cards with ranks
    from the 13-rank domain. Card order does not matter.
    """

    if hole_cards is None or isinstance(hole_cards, str) or len(hole_cards) != 2:
        raise UnparseableHandError(f"Expected two hole cards, got {hole_cards!r}")
    parsed: list[tuple[str, str]] = []
    for card in hole_cards:
        text = str(card).strip()
        rank, suit = text[:-1], text[-1:]
        if len(rank) != 1 or rank not in RANKS:
            raise UnparseableHandError(
                f"Invalid card rank found in normalization: '{rank}' from hand [{', '.join(map(str, hole_cards))}]"
            )
        parsed.append((rank, SUIT_ALIASES.get(suit, suit.lower())))
    (r1, s1), (r2, s2) = parsed
    if RANKS.index(r2) > RANKS.index(r1):
        r1, r2 = r2, r1
    if r1 == r2:
        suffix = ""
    elif s1 == s2:
        suffix = "s"
    else:
        suffix = "o"
    return str(HandCode(r1, r2, suffix))


def parse_hand_code(code: str) -> HandCode | None:
    if not isinstance(code, str) or len(code) not in (2, 3):
        return None
    high, low, suffix = code[0], code[1], code[2:]
    if high not in RANKS or low not in RANKS or RANKS.index(low) > RANKS.index(high):
        return None
    if high == low:
        return HandCode(high, low, "") if not suffix else None
    if suffix not in ("s", "o"):
        return None
    return HandCode(high, low, suffix)


@dataclass(frozen=True)
class GenericRange:
    """A chart row covering ``high`` paired with kickers ``low_min``..``low_max``."""

    key: str
    high: str
    low_min: str
    low_max: str
    suited: bool = True

    def contains(self, code: str | HandCode) -> bool:
        hand = code if isinstance(code, HandCode) else parse_hand_code(code)
        if hand is None or hand.is_pair or hand.suited != self.suited:
            return False
        if hand.high != self.high:
            return False
        low = RANKS.index(hand.low)
        return RANKS.index(self.low_min) <= low <= RANKS.index(self.low_max)


GENERIC_RANGES: tuple[GenericRange, ...] = (
    GenericRange("Axs", high="A", low_min="2", low_max="K"),
    GenericRange("Kxs", high="K", low_min="2", low_max="Q"),
    GenericRange("Q9s+", high="Q", low_min="9", low_max="J"),
    GenericRange("J9s+", high="J", low_min="9", low_max="T"),
    GenericRange("T8s+", high="T", low_min="8", low_max="9"),
)


def resolve_chart_entry(
    table: Mapping[str, T],
    hand: str,
    ranges: Sequence[GenericRange] = GENERIC_RANGES,
) -> tuple[str, T] | None:
    """Find the chart row for ``hand``: a direct hit, else the first generic row.

    Returns ``(chart_key, entry)`` or ``None`` when nothing matches.
    """

    if hand in table:
        return hand, table[hand]
    for generic in ranges:
        if generic.key in table and generic.contains(hand):
            logger.debug("Hand %s resolved through generic chart row %s", hand, generic.key)
            return generic.key, table[generic.key]
    return None


def all_hand_codes() -> list[str]:
    """All 169 distinct starting hands, strongest ranks first."""

    codes: list[str] = []
    ordered = RANKS[::-1]
    for i, high in enumerate(ordered):
        codes.append(high + high)
        for low in ordered[i + 1 :]:
            codes.append(f"{high}{low}s")
            codes.append(f"{high}{low}o")
    return codes
