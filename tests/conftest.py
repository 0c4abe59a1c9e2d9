# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# - make_game     → factory building Game records
# - database      → empty in-memory GameDatabase
# - manager       → SystemHdrManager over `database`
# - settings      → PluginSettings stored under tmp_path
#
# ==============================================

import uuid
from typing import Iterable, Optional

import pytest

from hdr_manager.library.database import GameDatabase
from hdr_manager.library.models import Game
from hdr_manager.manager import SystemHdrManager
from hdr_manager.persistence.settings_store import PluginSettings, SettingsStore


@pytest.fixture
def make_game():
    """Return a factory for games; tag/feature ids default to None like the host."""
    def _make_game(
        name: str = "",
        enable_system_hdr: bool = False,
        tag_ids: Optional[Iterable[uuid.UUID]] = None,
        feature_ids: Optional[Iterable[uuid.UUID]] = None,
    ) -> Game:
        return Game(
            name=name,
            enable_system_hdr=enable_system_hdr,
            tag_ids=list(tag_ids) if tag_ids is not None else None,
            feature_ids=list(feature_ids) if feature_ids is not None else None,
        )
    return _make_game


@pytest.fixture
def database():
    """Create a fresh, empty game database."""
    return GameDatabase()


@pytest.fixture
def manager(database):
    return SystemHdrManager(database)


@pytest.fixture
def settings(tmp_path):
    return PluginSettings(SettingsStore(str(tmp_path / "settings")))
