import pytest

from config.settings import Settings


def test_defaults_without_env(clean_env):
    settings = Settings.load()

    assert settings.openai_api_key is None
    assert not settings.remote_enabled
    assert settings.openai_api_base == "https://api.openai.com/v1"
    assert settings.openai_model == "gpt-3.5-turbo"
    assert settings.openai_timeout_sec is None
    assert settings.summary_sentences == 3
    assert settings.summary_temperature == 0.7
    assert settings.summary_max_tokens == 300
    assert settings.log_level == "ERROR"


def test_reads_dotenv_file(clean_env):
    (clean_env / ".env").write_text(
        "OPENAI_API_KEY=sk-file\n"
        "OPENAI_API_BASE=https://proxy.example.test/v1/\n"
        "OPENAI_TIMEOUT_SEC=20\n"
        "SUMMARY_SENTENCES=2\n"
        "LOG_LEVEL=warning\n"
    )

    settings = Settings.load()

    assert settings.openai_api_key == "sk-file"
    assert settings.remote_enabled
    assert settings.openai_api_base == "https://proxy.example.test/v1"
    assert settings.openai_timeout_sec == 20.0
    assert settings.summary_sentences == 2
    assert settings.log_level == "WARNING"


def test_process_env_overrides_dotenv(clean_env, monkeypatch):
    (clean_env / ".env").write_text("OPENAI_API_KEY=sk-file\nOPENAI_MODEL=from-file\n")
    monkeypatch.setenv("OPENAI_MODEL", "from-env")

    settings = Settings.load()

    assert settings.openai_api_key == "sk-file"
    assert settings.openai_model == "from-env"


def test_empty_key_means_local_only(clean_env, monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "")

    assert not Settings.load().remote_enabled


def test_explicit_env_file(tmp_path):
    env_file = tmp_path / "custom.env"
    env_file.write_text("SUMMARY_MAX_TOKENS=150\n")

    assert Settings.load(env_file).summary_max_tokens == 150


def test_invalid_number_raises(clean_env, monkeypatch):
    monkeypatch.setenv("SUMMARY_SENTENCES", "three")

    with pytest.raises(ValueError):
        Settings.load()


@pytest.mark.parametrize(
    "key, value",
    [("SUMMARY_SENTENCES", "0"), ("SUMMARY_SENTENCES", "-1"), ("SUMMARY_MAX_TOKENS", "0"), ("SUMMARY_MAX_TOKENS", "-5")],
)
def test_non_positive_counts_raise(clean_env, monkeypatch, key, value):
    monkeypatch.setenv(key, value)

    with pytest.raises(ValueError, match=key):
        Settings.load()
