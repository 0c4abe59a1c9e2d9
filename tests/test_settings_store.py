# ==============================================
# Tests for SettingsStore & PluginSettings
# ==============================================

import json

from hdr_manager.persistence.settings_store import PluginSettings, SettingsStore, SettingsValues


class TestSettingsStore:
    def test_creates_directory(self, tmp_path):
        store = SettingsStore(str(tmp_path / "nested" / "settings"))

        assert store.storage_dir.is_dir()
        assert not store.exists()

    def test_load_defaults_without_file(self, tmp_path):
        values = SettingsStore(str(tmp_path)).load()

        assert values == SettingsValues()
        assert values.is_pcgamingwiki_warning_suppressed is False

    def test_save_and_load(self, tmp_path):
        store = SettingsStore(str(tmp_path))

        store.save(SettingsValues(is_pcgamingwiki_warning_suppressed=True))

        assert store.exists()
        assert json.loads(store.settings_file.read_text(encoding="utf-8")) == {
            "is_pcgamingwiki_warning_suppressed": True
        }
        assert store.load().is_pcgamingwiki_warning_suppressed is True

    def test_clear(self, tmp_path):
        store = SettingsStore(str(tmp_path))
        store.save(SettingsValues())

        store.clear()

        assert not store.exists()

    def test_unknown_keys_ignored(self, tmp_path):
        store = SettingsStore(str(tmp_path))
        store.settings_file.write_text('{"legacy": 1}', encoding="utf-8")

        assert store.load() == SettingsValues()


class TestPluginSettings:
    def test_loads_saved_values(self, tmp_path):
        store = SettingsStore(str(tmp_path))
        store.save(SettingsValues(is_pcgamingwiki_warning_suppressed=True))

        assert PluginSettings(store).is_pcgamingwiki_warning_suppressed is True

    def test_end_edit_saves(self, settings, tmp_path):
        settings.begin_edit()
        settings.is_pcgamingwiki_warning_suppressed = True
        settings.end_edit()

        reloaded = PluginSettings(SettingsStore(str(tmp_path / "settings")))
        assert reloaded.is_pcgamingwiki_warning_suppressed is True

    def test_cancel_edit_restores(self, settings):
        settings.begin_edit()
        settings.is_pcgamingwiki_warning_suppressed = True
        settings.cancel_edit()

        assert settings.is_pcgamingwiki_warning_suppressed is False

    def test_cancel_edit_does_not_save(self, settings, tmp_path):
        settings.begin_edit()
        settings.is_pcgamingwiki_warning_suppressed = True
        settings.cancel_edit()

        assert not SettingsStore(str(tmp_path / "settings")).exists()

    def test_verify_settings(self, settings):
        assert settings.verify_settings() == (True, [])
