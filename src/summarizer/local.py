from __future__ import annotations

import re
from dataclasses import dataclass

from summarizer.base import Summarizer
from summarizer.types import SummaryResult, TokenUsage

_SENTENCE_RE = re.compile(r"[^.!?]+[.!?]*\s*")


def split_sentences(text: str) -> list[str]:
    fragments = _SENTENCE_RE.findall(text)
    return fragments or [text]


@dataclass
class LocalSummarizer(Summarizer):
    max_sentences: int = 3

    def summarize(self, text: str) -> SummaryResult:
        # Extractive: the first few sentence-like fragments, in order.
        # Each fragment keeps its own trailing whitespace, so the original spacing survives.
        selection = "".join(split_sentences(text)[: self.max_sentences]).strip()
        return SummaryResult(summary=selection or text.strip(), usage=TokenUsage.zero(), source="local")
