from pydantic import ValidationError
from Config.settings import DEFAULT_ALLOWED_ORIGINS, Settings
import pytest


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("AIRTABLE_PAT", "ALLOWED_ORIGINS", "AIRTABLE_API_URL", "AIRTABLE_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("Config.settings.load_dotenv", lambda: None)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings.from_env()

    assert settings.airtable_pat is None
    assert settings.allowed_origins == DEFAULT_ALLOWED_ORIGINS
    assert settings.airtable_api_url == "https://api.airtable.com/v0"
    assert settings.airtable_timeout is None


def test_values_from_environment(clean_env):
    clean_env.setenv("AIRTABLE_PAT", "pat123")
    clean_env.setenv("ALLOWED_ORIGINS", "https://a.example, ,https://b.example ")
    clean_env.setenv("AIRTABLE_API_URL", "http://proxy.local/v0/")
    clean_env.setenv("AIRTABLE_TIMEOUT", "7.5")

    settings = Settings.from_env()

    assert settings.airtable_pat == "pat123"
    assert settings.allowed_origins == ("https://a.example", "https://b.example")
    assert settings.airtable_api_url == "http://proxy.local/v0"
    assert settings.airtable_timeout == 7.5


def test_empty_pat_counts_as_missing(clean_env):
    clean_env.setenv("AIRTABLE_PAT", "")

    assert Settings.from_env().airtable_pat is None


def test_settings_are_immutable():
    settings = Settings(airtable_pat="x")

    with pytest.raises(ValidationError):
        settings.airtable_pat = "y"
