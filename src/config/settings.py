from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values


def _env_get(env: dict[str, str | None], key: str, default: str | None = None) -> str | None:
    value = env.get(key)
    if value is None or value == "":
        return default
    return value


def _env_float(env: dict[str, str | None], key: str) -> float | None:
    raw = _env_get(env, key)
    if raw is None:
        return None
    return float(raw)


def _env_positive_int(env: dict[str, str | None], key: str, default: int) -> int:
    value = int(_env_get(env, key, str(default)) or str(default))
    if value < 1:
        raise ValueError(f"{key} must be a positive integer, got {value}")
    return value


@dataclass(frozen=True)
class Settings:
    openai_api_key: str | None = None
    openai_api_base: str = "https://api.openai.com/v1"
    openai_model: str = "gpt-3.5-turbo"
    openai_timeout_sec: float | None = None

    summary_sentences: int = 3
    summary_temperature: float = 0.7
    summary_max_tokens: int = 300

    log_level: str = "ERROR"

    @property
    def remote_enabled(self) -> bool:
        return bool(self.openai_api_key)

    @classmethod
    def load(cls, env_file: Path | None = None) -> "Settings":
        path = env_file if env_file is not None else Path.cwd() / ".env"
        env: dict[str, str | None] = dict(dotenv_values(path))
        # process environment wins over the .env file
        env.update(os.environ)
        return cls(
            openai_api_key=_env_get(env, "OPENAI_API_KEY"),
            openai_api_base=(_env_get(env, "OPENAI_API_BASE", "https://api.openai.com/v1") or "").rstrip("/"),
            openai_model=_env_get(env, "OPENAI_MODEL", "gpt-3.5-turbo") or "gpt-3.5-turbo",
            openai_timeout_sec=_env_float(env, "OPENAI_TIMEOUT_SEC"),
            summary_sentences=_env_positive_int(env, "SUMMARY_SENTENCES", 3),
            summary_temperature=float(_env_get(env, "SUMMARY_TEMPERATURE", "0.7") or "0.7"),
            summary_max_tokens=_env_positive_int(env, "SUMMARY_MAX_TOKENS", 300),
            log_level=(_env_get(env, "LOG_LEVEL", "ERROR") or "ERROR").upper(),
        )
