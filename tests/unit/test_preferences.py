"""
Unit tests for the preferences stores.
"""

import yaml

from localize.core.preferences import MemoryPreferencesStore, PreferencesStore


class TestPreferencesStore:
    """Test the YAML backed store."""

    def test_missing_file_reads_as_empty(self, tmp_path):
        store = PreferencesStore(tmp_path / "missing.yml")

        assert store.get("current_language") is None

    def test_set_is_pending_until_synchronize(self, tmp_path):
        path = tmp_path / "preferences.yml"
        store = PreferencesStore(path)

        store.set("current_language", "fr")

        assert store.get("current_language") == "fr"
        assert not path.exists()

        assert store.synchronize() is True
        assert yaml.safe_load(path.read_text(encoding="utf-8")) == {"current_language": "fr"}

    def test_synchronize_creates_parent_directories(self, tmp_path):
        path = tmp_path / "a" / "b" / "preferences.yml"
        store = PreferencesStore(path)

        store.set("current_language", "de")
        store.synchronize()

        assert PreferencesStore(path).get("current_language") == "de"

    def test_synchronize_without_changes(self, tmp_path):
        path = tmp_path / "preferences.yml"
        store = PreferencesStore(path)

        assert store.synchronize() is True
        assert not path.exists()

    def test_keeps_other_keys(self, tmp_path):
        path = tmp_path / "preferences.yml"
        path.write_text("theme: dark\n", encoding="utf-8")
        store = PreferencesStore(path)

        store.set("current_language", "en")
        store.synchronize()

        assert yaml.safe_load(path.read_text(encoding="utf-8")) == {
            "theme": "dark",
            "current_language": "en",
        }

    def test_corrupt_file_reads_as_empty(self, tmp_path):
        path = tmp_path / "preferences.yml"
        path.write_text("current_language: [unclosed\n", encoding="utf-8")

        assert PreferencesStore(path).get("current_language") is None

    def test_non_mapping_file_reads_as_empty(self, tmp_path):
        path = tmp_path / "preferences.yml"
        path.write_text("- en\n- fr\n", encoding="utf-8")

        assert PreferencesStore(path).get("current_language") is None

    def test_values_are_strings(self, tmp_path):
        path = tmp_path / "preferences.yml"
        path.write_text("current_language: 42\n", encoding="utf-8")

        assert PreferencesStore(path).get("current_language") == "42"

    def test_sees_writes_from_other_instances(self, tmp_path):
        path = tmp_path / "preferences.yml"
        reader = PreferencesStore(path)
        writer = PreferencesStore(path)
        assert reader.get("current_language") is None

        writer.set("current_language", "fr")
        writer.synchronize()

        assert reader.get("current_language") == "fr"

    def test_synchronize_failure_returns_false(self, tmp_path):
        # Parent "directory" is a regular file
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = PreferencesStore(blocker / "preferences.yml")

        store.set("current_language", "fr")

        assert store.synchronize() is False
        assert store.get("current_language") == "fr"

    def test_failed_write_retried_then_reads_resume(self, tmp_path):
        blocker = tmp_path / "prefs"
        blocker.write_text("", encoding="utf-8")
        path = blocker / "preferences.yml"
        store = PreferencesStore(path)
        store.set("current_language", "fr")
        assert store.synchronize() is False

        blocker.unlink()
        assert store.get("current_language") == "fr"
        assert yaml.safe_load(path.read_text(encoding="utf-8")) == {"current_language": "fr"}

        # Pending write is gone: later reads see changes from other writers
        writer = PreferencesStore(path)
        writer.set("current_language", "de")
        writer.synchronize()

        assert store.get("current_language") == "de"


class TestMemoryPreferencesStore:
    """Test the in-memory store."""

    def test_roundtrip_and_sync_count(self):
        store = MemoryPreferencesStore({"current_language": "en"})

        store.set("current_language", "fr")
        store.synchronize()

        assert store.get("current_language") == "fr"
        assert store.sync_count == 1
