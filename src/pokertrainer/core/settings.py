"""Environment-driven runtime configuration.

Settings are read once at process start and passed explicitly to the
components that need them:

    from pokertrainer.core.settings import load_settings

    settings = load_settings()
    charts = load_chart_set(settings.charts_path)

``BIND`` and ``PORT`` control the web server. Every other variable carries the
``POKERTRAINER_`` prefix.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from ..data.chart_loader import DEFAULT_CHART_PATH, DEFAULT_TABLE_PROFILE

__all__ = ["TrainerSettings", "load_settings"]

_PREFIX: Final = "POKERTRAINER_"


@dataclass(frozen=True)
class TrainerSettings:
    charts_path: Path = DEFAULT_CHART_PATH
    table_profile: str = DEFAULT_TABLE_PROFILE
    log_level: str = "INFO"
    seed: int | None = None
    host: str = "0.0.0.0"
    port: int = 8000

    @property
    def log_level_value(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO


def _int_or_none(env: Mapping[str, str], name: str) -> int | None:
    raw = env.get(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def load_settings(environ: Mapping[str, str] | None = None) -> TrainerSettings:
    env = os.environ if environ is None else environ
    defaults = TrainerSettings()
    charts = env.get(f"{_PREFIX}CHARTS", "").strip()
    profile = env.get(f"{_PREFIX}TABLE_PROFILE", "").strip()
    log_level = env.get(f"{_PREFIX}LOG_LEVEL", "").strip()
    port = _int_or_none(env, "PORT")
    return TrainerSettings(
        charts_path=Path(charts) if charts else defaults.charts_path,
        table_profile=profile or defaults.table_profile,
        log_level=(log_level or defaults.log_level).upper(),
        seed=_int_or_none(env, f"{_PREFIX}SEED"),
        host=env.get("BIND", "").strip() or defaults.host,
        port=port if port is not None else defaults.port,
    )
