from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class AdviceResult:
    """Advisor output: either advice text or an error, plus strategy details."""

    advice: str | None = None
    error: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if (self.advice is None) == (self.error is None):
            raise ValueError("AdviceResult needs exactly one of advice or error")

    @classmethod
    def ok(cls, advice: str, **details: Any) -> AdviceResult:
        return cls(advice=advice, details=dict(details))

    @classmethod
    def failure(cls, error: str, **details: Any) -> AdviceResult:
        return cls(error=error, details=dict(details))

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"details": dict(self.details)}
        if self.error is not None:
            data["error"] = self.error
        else:
            data["advice"] = self.advice
        return data
