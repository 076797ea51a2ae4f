from config import Settings


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("OPENAI_API_KEY", "OPENAI_MODEL", "CAPTION_LANGUAGE", "SUMMARY_MAX_TOKENS",
                 "TRANSCRIPT_MAX_TOKENS", "REQUEST_TIMEOUT", "DATABASE_URL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()

    assert settings.openai_api_key is None
    assert settings.model == "gpt-4o-mini"
    assert settings.caption_language == "en"
    assert settings.request_timeout == 20.0
    assert settings.database_url == "sqlite:///app.db"


def test_reads_environment(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    monkeypatch.setenv("SUMMARY_MAX_TOKENS", "123")
    monkeypatch.setenv("REQUEST_TIMEOUT", "7.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_env()

    assert settings.openai_api_key == "sk-env"
    assert settings.summary_max_tokens == 123
    assert settings.request_timeout == 7.5
    assert settings.log_level == "DEBUG"
