"""
Unit tests for building the selector from configuration.
"""

import pytest
import yaml

from localize.core import strings
from localize.core.bootstrap import create_selector, init_localization
from localize.core.config import ConfigManager
from localize.core.negotiation import StaticLocaleNegotiator
from localize.core.preferences import PreferencesStore
from localize.core.selector import CURRENT_LANGUAGE_KEY


@pytest.fixture
def config_factory(tmp_path, locales_dir):
    def _make(**localization):
        localization.setdefault("locales_dir", str(locales_dir))
        path = tmp_path / "localize.yml"
        path.write_text(yaml.safe_dump({
            "localization": localization,
            "preferences": {"path": str(tmp_path / "prefs.yml")},
        }), encoding="utf-8")
        return ConfigManager(str(path))

    return _make


class TestCreateSelector:
    """Test selector construction."""

    def test_uses_configured_collaborators(self, config_factory):
        selector = create_selector(config_factory(), StaticLocaleNegotiator(["fr"]))

        assert selector.available_languages() == ["Base", "en", "fr"]
        assert selector.current_language == "fr"
        assert selector.display_name_for_language("en") == "anglais"

    def test_auto_language_keeps_stored_selection(self, config_factory, tmp_path):
        store = PreferencesStore(tmp_path / "prefs.yml")
        store.set(CURRENT_LANGUAGE_KEY, "fr")
        store.synchronize()

        selector = create_selector(config_factory(), StaticLocaleNegotiator(["en"]))

        assert selector.current_language == "fr"

    def test_configured_language_is_applied(self, config_factory, tmp_path):
        selector = create_selector(config_factory(language="fr"), StaticLocaleNegotiator(["en"]))

        assert selector.current_language == "fr"
        assert PreferencesStore(tmp_path / "prefs.yml").get(CURRENT_LANGUAGE_KEY) == "fr"

    def test_configured_fallback_language(self, config_factory):
        selector = create_selector(config_factory(fallback_language="fr"), StaticLocaleNegotiator(["ja"]))

        assert selector.default_language == "fr"


class TestInitLocalization:
    """Test installing the default localizer."""

    def test_installs_localizer(self, config_factory):
        localizer = init_localization(config_factory(), StaticLocaleNegotiator(["fr"]))

        assert strings.get_localizer() is localizer
        assert strings.localized("greeting") == "Bonjour"

        localizer.selector.set_current_language("en")

        assert strings.localized("greeting") == "Hello"
