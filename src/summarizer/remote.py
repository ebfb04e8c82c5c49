from __future__ import annotations

import logging
from dataclasses import dataclass

from adapters.openai_chat import ChatRequest, OpenAIChatClient
from summarizer.base import Summarizer
from summarizer.types import Attempt, SummaryResult, TokenUsage

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a helpful assistant that creates concise summaries. "
    "Generate exactly {n} sentences that capture the key points of the text."
)
USER_PROMPT = "Please summarize the following text in exactly {n} sentences:\n\n{text}"


@dataclass
class RemoteSummarizer(Summarizer):
    client: OpenAIChatClient
    sentences: int = 3
    temperature: float = 0.7
    max_tokens: int = 300

    def build_request(self, text: str) -> ChatRequest:
        return ChatRequest(
            system=SYSTEM_PROMPT.format(n=self.sentences),
            user=USER_PROMPT.format(n=self.sentences, text=text),
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )

    def summarize(self, text: str) -> SummaryResult:
        resp = self.client.complete(self.build_request(text))
        usage = TokenUsage.from_payload(resp.usage)
        logger.debug("remote summary received, total_tokens=%s", usage.total_tokens)
        return SummaryResult(summary=resp.text, usage=usage, source="remote")

    def attempt(self, text: str) -> Attempt:
        try:
            return Attempt(result=self.summarize(text))
        except Exception as exc:
            return Attempt(error=exc)
