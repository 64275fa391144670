"""Pytest configuration and shared fixtures for all tests."""

import sys
from pathlib import Path

# Adiciona a raiz do projeto ao PYTHONPATH
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
import yaml

from localize.core.catalog import StaticCatalog
from localize.core.preferences import MemoryPreferencesStore
from localize.core.negotiation import StaticLocaleNegotiator
from localize.core.display_names import CatalogDisplayNames
from localize.core.selector import LanguageSelector
from localize.core.strings import install


LOCALE_TABLES = {
    "Base": {
        "greeting": "Hello",
        "only_base": "Base text",
        "files": {"one": "{count} file", "other": "{count} files"},
    },
    "en": {
        "greeting": "Hello",
        "welcome": "Welcome, {name}!",
        "positional": "{0} of {1}",
        "files": {"one": "{count} file", "other": "{count} files"},
        "languages": {"en": "English", "fr": "French", "pt": "Portuguese"},
        "regions": {"BR": "Brazil"},
    },
    "fr": {
        "greeting": "Bonjour",
        "welcome": "Bienvenue, {name} !",
        "files": {"one": "{count} fichier", "other": "{count} fichiers"},
        "languages": {"en": "anglais", "fr": "français", "pt": "portugais"},
        "regions": {"BR": "Brésil"},
    },
}


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove variáveis que alteram configuração e negociação de idioma."""
    for var in ("LOCALIZE_LOCALES_DIR", "LOCALIZE_LANGUAGE", "LOCALIZE_FALLBACK_LANGUAGE",
                "LOCALIZE_PREFERENCES", "LOCALIZE_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    yield
    install(None)


@pytest.fixture
def locales_dir(tmp_path):
    """Diretório de locales com Base, en e fr."""
    directory = tmp_path / "locales"
    directory.mkdir()
    for language, table in LOCALE_TABLES.items():
        with open(directory / f"{language}.yaml", "w", encoding="utf-8") as f:
            yaml.safe_dump(table, f, allow_unicode=True)
    return directory


@pytest.fixture
def store():
    return MemoryPreferencesStore()


@pytest.fixture
def make_selector(store):
    """Fábrica de seletores com catálogo e preferências em memória."""

    def _make(localizations=("en", "fr", "Base"), preferred=(), store=store, fallback="en"):
        catalog = StaticCatalog(
            {language: LOCALE_TABLES.get(language, {}) for language in localizations}
        )
        return LanguageSelector(
            catalog=catalog,
            store=store,
            negotiator=StaticLocaleNegotiator(preferred),
            display_names=CatalogDisplayNames(catalog),
            fallback_language=fallback,
        )

    return _make
