from pathlib import Path

import pytest

from ftl_i18n.errors import ConfigurationError
from ftl_i18n.settings import I18nSettings, load_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("I18N_ID", raising=False)
    monkeypatch.delenv("I18N_DIR", raising=False)

    settings = load_settings()
    assert settings.locale_id == "en-US"
    assert settings.locale_dir == Path("./assets/locales/")
    assert settings.resource_path == Path("assets/locales/en-US/main.ftl")


def test_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("I18N_ID", "pt-BR")
    monkeypatch.setenv("I18N_DIR", str(tmp_path))

    settings = load_settings()
    assert settings.locale_id == "pt-BR"
    assert settings.resource_path == tmp_path / "pt-BR" / "main.ftl"


@pytest.mark.parametrize("value", ["not a locale!", "en_US", "12"])
def test_invalid_locale_id(monkeypatch, value):
    monkeypatch.setenv("I18N_ID", value)
    with pytest.raises(ConfigurationError, match="Parsing language failed"):
        load_settings()


def test_settings_are_frozen():
    settings = I18nSettings()
    with pytest.raises(Exception):
        settings.locale_id = "fr-FR"


@pytest.mark.parametrize("value", ["true", "1_0", "1.10", "@int 5"])
def test_directory_is_read_verbatim(monkeypatch, value):
    monkeypatch.setenv("I18N_ID", "en-US")
    monkeypatch.setenv("I18N_DIR", value)

    settings = load_settings()
    assert settings.locale_dir == Path(value)
    assert str(settings.locale_dir) == value
