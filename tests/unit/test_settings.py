# tests/unit/test_settings.py
from deformity_planner.config.settings import load_default_language, load_supported_languages


def test_supported_languages_limited_to_message_catalogue(monkeypatch):
    monkeypatch.setenv("SUPPORTED_LANGUAGES", "en,FR,de,fr")
    assert load_supported_languages() == ["en", "fr"]


def test_supported_languages_fallback_when_none_known(monkeypatch):
    monkeypatch.setenv("SUPPORTED_LANGUAGES", "de,ko")
    assert load_supported_languages() == ["en", "fr"]


def test_default_language(monkeypatch):
    monkeypatch.setenv("DEFAULT_LANGUAGE", "FR")
    assert load_default_language(["en", "fr"]) == "fr"

    monkeypatch.setenv("DEFAULT_LANGUAGE", "de")
    assert load_default_language(["en", "fr"]) == "en"

    monkeypatch.delenv("DEFAULT_LANGUAGE")
    assert load_default_language(["fr"]) == "fr"
