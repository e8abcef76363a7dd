from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Optional

__all__ = [
    "CHART_ACTIONS",
    "DEFAULT_CHART_PATH",
    "DEFAULT_TABLE_PROFILE",
    "ChartEntry",
    "ChartSet",
    "get_chart_set",
    "load_chart_set",
]

logger = logging.getLogger(__name__)

DEFAULT_CHART_PATH = Path(__file__).with_name("charts") / "rfi_charts.json"
DEFAULT_TABLE_PROFILE = "RFI_100BB_6MAX"
CHART_ACTIONS: frozenset[str] = frozenset({"raise", "fold", "call"})


@dataclass(frozen=True, slots=True)
class ChartEntry:
    """One chart row: the primary action plus an optional mixed alternative."""

    action: str
    frequency: float
    alternative: str | None = None
    alt_frequency: float | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> ChartEntry:
        action = payload.get("action")
        if action not in CHART_ACTIONS:
            raise ValueError(f"unknown chart action {action!r}")
        frequency = _frequency(payload.get("frequency", 1.0))
        alternative = payload.get("alternative")
        alt_frequency = None
        if alternative is not None:
            if alternative not in CHART_ACTIONS:
                raise ValueError(f"unknown alternative action {alternative!r}")
            alt_frequency = _frequency(payload.get("alt_frequency", round(max(0.0, 1.0 - frequency), 6)))
        return cls(action=action, frequency=frequency, alternative=alternative, alt_frequency=alt_frequency)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"action": self.action, "frequency": self.frequency}
        if self.alternative is not None:
            data["alternative"] = self.alternative
            data["alt_frequency"] = self.alt_frequency
        return data


def _frequency(raw: object) -> float:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ValueError(f"frequency must be a number, got {raw!r}")
    value = float(raw)
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise ValueError(f"frequency {value} outside 0..1")
    return value


class ChartSet:
    """Read-only preflop charts keyed table profile → position → hand code."""

    def __init__(self, tables: Mapping[str, Mapping[str, Mapping[str, ChartEntry]]] | None = None) -> None:
        frozen = {
            profile: MappingProxyType(
                {position: MappingProxyType(dict(hands)) for position, hands in positions.items()}
            )
            for profile, positions in (tables or {}).items()
        }
        self._tables: Mapping[str, Mapping[str, Mapping[str, ChartEntry]]] = MappingProxyType(frozen)

    @classmethod
    def empty(cls) -> ChartSet:
        return cls()

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> ChartSet:
        tables: dict[str, dict[str, dict[str, ChartEntry]]] = {}
        for profile, positions in payload.items():
            if not isinstance(positions, Mapping):
                logger.warning("Skipping chart profile %s: expected an object", profile)
                continue
            profile_table = tables.setdefault(str(profile), {})
            for position, hands in positions.items():
                if not isinstance(hands, Mapping):
                    logger.warning("Skipping chart %s/%s: expected an object", profile, position)
                    continue
                position_table = profile_table.setdefault(str(position), {})
                for hand, raw_entry in hands.items():
                    try:
                        if not isinstance(raw_entry, Mapping):
                            raise ValueError("entry must be an object")
                        position_table[str(hand)] = ChartEntry.from_payload(raw_entry)
                    except ValueError as exc:
                        logger.warning("Dropping chart entry %s/%s/%s: %s", profile, position, hand, exc)
        return cls(tables)

    def profiles(self) -> tuple[str, ...]:
        return tuple(self._tables)

    def table(self, profile: str) -> Mapping[str, Mapping[str, ChartEntry]]:
        return self._tables.get(profile, MappingProxyType({}))

    def position_chart(self, profile: str, position: str) -> Mapping[str, ChartEntry] | None:
        return self.table(profile).get(position)

    def __bool__(self) -> bool:
        return bool(self._tables)


def load_chart_set(path: Path | str | None = None) -> ChartSet:
    """Load a chart file; any failure degrades to an empty chart set."""

    resource = Path(path) if path is not None else DEFAULT_CHART_PATH
    try:
        with resource.open("r", encoding="utf-8") as fh:
            payload = json.load(fh)
    except (OSError, ValueError) as exc:
        logger.warning("Error loading preflop charts from %s: %s", resource, exc)
        return ChartSet.empty()
    if not isinstance(payload, dict):
        logger.warning("Invalid chart payload in %s: expected an object", resource)
        return ChartSet.empty()
    return ChartSet.from_payload(payload)


_CHART_SET: Optional[ChartSet] = None
_CHART_STAMP: Optional[float] = None


def get_chart_set() -> ChartSet:
    """Return the bundled chart set, reloading when the file changes on disk."""

    global _CHART_SET, _CHART_STAMP
    try:
        stamp = DEFAULT_CHART_PATH.stat().st_mtime
    except OSError:
        stamp = None
    if _CHART_SET is None or _CHART_STAMP != stamp:
        _CHART_SET = load_chart_set(DEFAULT_CHART_PATH)
        _CHART_STAMP = stamp
    return _CHART_SET
