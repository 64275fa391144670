"""
Unit tests for the resource catalogs.
"""

from localize.core.catalog import (
    BASE_LOCALIZATION,
    DirectoryCatalog,
    StaticCatalog,
    get_nested_value,
)
from localize.locales import LOCALES_DIR


class TestDirectoryCatalog:
    """Test the YAML directory catalog."""

    def test_lists_yaml_files_sorted(self, locales_dir):
        catalog = DirectoryCatalog(locales_dir)

        assert catalog.localizations() == ["Base", "en", "fr"]

    def test_ignores_other_files(self, locales_dir):
        (locales_dir / "notes.txt").write_text("x", encoding="utf-8")
        (locales_dir / "de.yml").write_text("x: y", encoding="utf-8")

        assert DirectoryCatalog(locales_dir).localizations() == ["Base", "en", "fr"]

    def test_missing_directory(self, tmp_path):
        catalog = DirectoryCatalog(tmp_path / "nope")

        assert catalog.localizations() == []
        assert catalog.load_table("en") == {}

    def test_load_table(self, locales_dir):
        table = DirectoryCatalog(locales_dir).load_table("fr")

        assert table["greeting"] == "Bonjour"

    def test_load_malformed_table(self, locales_dir):
        (locales_dir / "de.yaml").write_text("greeting: [unclosed\n", encoding="utf-8")

        assert DirectoryCatalog(locales_dir).load_table("de") == {}

    def test_load_empty_table(self, locales_dir):
        (locales_dir / "de.yaml").write_text("", encoding="utf-8")

        assert DirectoryCatalog(locales_dir).load_table("de") == {}

    def test_load_non_mapping_table(self, locales_dir):
        (locales_dir / "de.yaml").write_text("- a\n- b\n", encoding="utf-8")

        assert DirectoryCatalog(locales_dir).load_table("de") == {}

    def test_packaged_locales(self):
        catalog = DirectoryCatalog(LOCALES_DIR)

        languages = catalog.localizations()

        assert BASE_LOCALIZATION in languages
        assert {"en", "fr", "de", "pt-BR"} <= set(languages)
        for language in languages:
            assert "cli" in catalog.load_table(language)


class TestStaticCatalog:
    """Test the in-memory catalog."""

    def test_sequence_keeps_order(self):
        catalog = StaticCatalog(["en", "fr", "Base"])

        assert catalog.localizations() == ["en", "fr", "Base"]
        assert catalog.load_table("en") == {}

    def test_mapping(self):
        catalog = StaticCatalog({"en": {"a": "b"}, "fr": None})

        assert catalog.localizations() == ["en", "fr"]
        assert catalog.load_table("en") == {"a": "b"}
        assert catalog.load_table("fr") == {}
        assert catalog.load_table("de") == {}


class TestGetNestedValue:
    """Test dotted key lookup."""

    def test_nested(self):
        assert get_nested_value({"a": {"b": {"c": "x"}}}, "a.b.c") == "x"

    def test_literal_key_with_dots(self):
        assert get_nested_value({"a.b": "literal", "a": {"b": "nested"}}, "a.b") == "literal"

    def test_missing(self):
        assert get_nested_value({"a": {"b": "x"}}, "a.c") is None
        assert get_nested_value({"a": "x"}, "a.b") is None
        assert get_nested_value({"a": ["x"]}, "a.0") is None

    def test_non_dict(self):
        assert get_nested_value(None, "a") is None
