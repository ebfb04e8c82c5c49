from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


def _count(raw: Any) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return 0
    return max(value, 0)


@dataclass(frozen=True)
class TokenUsage:
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0

    @classmethod
    def zero(cls) -> "TokenUsage":
        return cls()

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any] | None) -> "TokenUsage":
        if not payload:
            return cls()
        return cls(
            prompt_tokens=_count(payload.get("prompt_tokens")),
            completion_tokens=_count(payload.get("completion_tokens")),
            total_tokens=_count(payload.get("total_tokens")),
        )


@dataclass(frozen=True)
class SummaryResult:
    summary: str
    usage: TokenUsage = field(default_factory=TokenUsage)
    source: str = "local"


@dataclass(frozen=True)
class Attempt:
    """Outcome of a remote call: exactly one of ``result`` and ``error`` is set."""

    result: SummaryResult | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.result is not None
