from __future__ import annotations

import logging

from adapters.openai_chat import OpenAIChatClient
from config.settings import Settings
from summarizer.base import Summarizer
from summarizer.fallback import FallbackSummarizer
from summarizer.local import LocalSummarizer
from summarizer.remote import RemoteSummarizer

logger = logging.getLogger(__name__)


def build_summarizer(settings: Settings, force_local: bool = False) -> Summarizer:
    local = LocalSummarizer(max_sentences=settings.summary_sentences)
    if force_local or not settings.remote_enabled:
        logger.debug("using local summarizer only")
        return local

    client = OpenAIChatClient(
        api_base=settings.openai_api_base,
        api_key=settings.openai_api_key,
        model=settings.openai_model,
        timeout=settings.openai_timeout_sec,
    )
    remote = RemoteSummarizer(
        client=client,
        sentences=settings.summary_sentences,
        temperature=settings.summary_temperature,
        max_tokens=settings.summary_max_tokens,
    )
    logger.debug("using remote summarizer (%s) with local fallback", settings.openai_model)
    return FallbackSummarizer(remote=remote, local=local)
