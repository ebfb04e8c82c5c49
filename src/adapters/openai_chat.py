from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import requests

logger = logging.getLogger(__name__)


class ChatCompletionError(RuntimeError):
    """Raised when the service answers with a payload we cannot use."""


@dataclass
class ChatRequest:
    system: str
    user: str
    temperature: float = 0.7
    max_tokens: int = 300


@dataclass
class ChatResponse:
    text: str
    usage: dict[str, Any] = field(default_factory=dict)


@dataclass
class OpenAIChatClient:
    api_base: str
    api_key: str
    model: str = "gpt-3.5-turbo"
    timeout: float | None = None

    @property
    def endpoint(self) -> str:
        return f"{self.api_base.rstrip('/')}/chat/completions"

    def complete(self, req: ChatRequest) -> ChatResponse:
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": req.system},
                {"role": "user", "content": req.user},
            ],
            "temperature": req.temperature,
            "max_tokens": req.max_tokens,
        }
        headers = {"authorization": f"Bearer {self.api_key}"}
        logger.debug("POST %s model=%s", self.endpoint, self.model)
        resp = requests.post(self.endpoint, json=payload, headers=headers, timeout=self.timeout)
        resp.raise_for_status()
        return _parse_completion(resp.json())


def _parse_completion(data: Any) -> ChatResponse:
    if not isinstance(data, dict):
        raise ChatCompletionError("Unexpected response payload from chat completion endpoint.")
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        raise ChatCompletionError("Chat completion response has no choices.")
    message = choices[0].get("message") if isinstance(choices[0], dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    if not isinstance(content, str) or not content.strip():
        raise ChatCompletionError("Chat completion response has no message content.")
    usage = data.get("usage")
    return ChatResponse(text=content, usage=usage if isinstance(usage, dict) else {})
