from __future__ import annotations

import logging
from dataclasses import dataclass

from summarizer.base import Summarizer
from summarizer.local import LocalSummarizer
from summarizer.remote import RemoteSummarizer
from summarizer.types import SummaryResult

logger = logging.getLogger(__name__)


@dataclass
class FallbackSummarizer(Summarizer):
    """Try the remote model once, use the local heuristic if it fails."""

    remote: RemoteSummarizer
    local: LocalSummarizer

    def summarize(self, text: str) -> SummaryResult:
        outcome = self.remote.attempt(text)
        if outcome.ok:
            return outcome.result
        logger.warning("remote summarization failed, using local fallback: %s", outcome.error)
        return self.local.summarize(text)
