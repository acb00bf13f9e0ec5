"""Tests for settings loading and environment overrides."""

import json
from pathlib import Path

import pytest

from lotus_riyaaz.raga.catalog import FallbackPolicy
from lotus_riyaaz.raga.text import Language
from lotus_riyaaz.settings import load_settings


@pytest.fixture()
def config_file(tmp_path):
    path = tmp_path / "app.json"
    path.write_text(json.dumps({
        "catalog_source": "configs/ragas.json",
        "catalog_fallback": "empty",
        "default_language": "hi",
        "log_level": "debug",
    }))
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "RIYAAZ_CATALOG_SOURCE",
        "RIYAAZ_CATALOG_FALLBACK",
        "RIYAAZ_LANGUAGE",
        "RIYAAZ_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


class TestLoadSettings:
    def test_bundled_config(self):
        settings = load_settings()
        assert settings.catalog_fallback == FallbackPolicy.BUILTIN
        assert settings.default_language == Language.en
        assert Path(settings.catalog_source).name == "ragas.json"
        assert Path(settings.catalog_source).is_absolute()

    def test_from_file(self, config_file):
        settings = load_settings(config_file)
        assert settings.catalog_fallback == FallbackPolicy.EMPTY
        assert settings.default_language == Language.hi
        assert settings.log_level == "DEBUG"

    def test_env_overrides_file(self, config_file, monkeypatch):
        monkeypatch.setenv("RIYAAZ_CATALOG_SOURCE", "https://example.test/ragas.json")
        monkeypatch.setenv("RIYAAZ_CATALOG_FALLBACK", "builtin")
        monkeypatch.setenv("RIYAAZ_LANGUAGE", "en")
        settings = load_settings(config_file)
        assert settings.catalog_source == "https://example.test/ragas.json"
        assert settings.catalog_fallback == FallbackPolicy.BUILTIN
        assert settings.default_language == Language.en

    def test_absolute_path_kept(self, config_file, monkeypatch, tmp_path):
        target = tmp_path / "mine.json"
        monkeypatch.setenv("RIYAAZ_CATALOG_SOURCE", str(target))
        assert load_settings(config_file).catalog_source == target

    def test_invalid_fallback_rejected(self, config_file, monkeypatch):
        monkeypatch.setenv("RIYAAZ_CATALOG_FALLBACK", "retry")
        with pytest.raises(ValueError):
            load_settings(config_file)
