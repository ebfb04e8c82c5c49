from __future__ import annotations

from abc import ABC, abstractmethod

from summarizer.types import SummaryResult


class Summarizer(ABC):
    @abstractmethod
    def summarize(self, text: str) -> SummaryResult:
        raise NotImplementedError
