import pytest

ENV_KEYS = [
    "OPENAI_API_KEY",
    "OPENAI_API_BASE",
    "OPENAI_MODEL",
    "OPENAI_TIMEOUT_SEC",
    "SUMMARY_SENTENCES",
    "SUMMARY_TEMPERATURE",
    "SUMMARY_MAX_TOKENS",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    # Settings.load reads ./.env and the process environment
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
