# ==============================================
# Tests for Configuration
# ==============================================

import uuid

import pytest

from hdr_manager import config as config_module
from hdr_manager.config import get_config, parse_plugin_ids


@pytest.fixture
def fresh_config(monkeypatch):
    monkeypatch.setattr(config_module, "_config_instance", None)
    for name in ("MONGO_HOST", "MONGO_PORT", "MONGO_DATABASE", "SETTINGS_DIR",
                 "LOCALE", "INSTALLED_PLUGIN_IDS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_parse_plugin_ids():
    first, second = uuid.uuid4(), uuid.uuid4()

    assert parse_plugin_ids(f"{first}, {second},") == [first, second]
    assert parse_plugin_ids("") == []


def test_parse_plugin_ids_rejects_garbage():
    with pytest.raises(ValueError):
        parse_plugin_ids("not-a-uuid")


def test_reads_environment(fresh_config, monkeypatch):
    plugin_id = uuid.uuid4()
    monkeypatch.setenv("MONGO_HOST", "library-db")
    monkeypatch.setenv("MONGO_PORT", "27018")
    monkeypatch.setenv("LOCALE", "fr_FR")
    monkeypatch.setenv("INSTALLED_PLUGIN_IDS", str(plugin_id))
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = get_config()

    assert config.mongo.host == "library-db"
    assert config.mongo.port == 27018
    assert config.locale == "fr_FR"
    assert config.installed_plugin_ids == [plugin_id]
    assert config.log_level == "DEBUG"


def test_singleton(fresh_config):
    assert get_config() is get_config()
