import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

log = logging.getLogger(__name__)


# ==============================================
# SettingsStore
# ==============================================
#
# PURPOSE:
#   Persist the add-on's settings to disk so that choices made in
#   a dialog ("don't show this again") survive host restarts.
#
# WHAT IS PERSISTED:
#   1. is_pcgamingwiki_warning_suppressed → user dismissed the
#      companion add-on recommendation for good
#
@dataclass
class SettingsValues:
    """Plain settings values as written to disk."""
    is_pcgamingwiki_warning_suppressed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SettingsValues":
        return cls(
            is_pcgamingwiki_warning_suppressed=bool(data.get("is_pcgamingwiki_warning_suppressed", False))
        )


# CLASS: SettingsStore
# --------------------
#   Stateful: holds a reference to the storage directory.
#
#   Methods:
#   --------
#   - save(values: SettingsValues) -> None
#   - load() -> SettingsValues     (defaults if no file)
#   - exists() -> bool
#   - clear() -> None
#
class SettingsStore:
    """
    Handles persistence of the add-on settings.

    Files created:
    - <storage_dir>/config.json
    """

    def __init__(self, storage_dir: str = "settings/"):
        """
        Initialize the settings store.

        Args:
            storage_dir: Directory to store the settings file
        """
        self.storage_dir = Path(storage_dir)
        self.storage_dir.mkdir(parents=True, exist_ok=True)
        self.settings_file = self.storage_dir / "config.json"

    def save(self, values: SettingsValues) -> None:
        with open(self.settings_file, 'w', encoding='utf-8') as f:
            json.dump(values.to_dict(), f, indent=2)

        log.debug(f"Saved settings to {self.settings_file}")

    def load(self) -> SettingsValues:
        """
        Load settings from disk.

        Returns:
            Saved SettingsValues, or defaults if the file doesn't exist
        """
        if not self.settings_file.exists():
            log.debug(f"No settings file found at {self.settings_file}")
            return SettingsValues()

        with open(self.settings_file, 'r', encoding='utf-8') as f:
            data = json.load(f)

        return SettingsValues.from_dict(data)

    def exists(self) -> bool:
        return self.settings_file.exists()

    def clear(self) -> None:
        if self.settings_file.exists():
            self.settings_file.unlink()
            log.info(f"Deleted {self.settings_file}")


# CLASS: PluginSettings
# ---------------------
#   Editable view over the stored values, following the host's
#   settings protocol: begin_edit / cancel_edit / end_edit /
#   verify_settings.
#
class PluginSettings:
    def __init__(self, store: SettingsStore):
        self._store = store
        self._values = store.load()
        self._snapshot: Optional[SettingsValues] = None

    @property
    def is_pcgamingwiki_warning_suppressed(self) -> bool:
        return self._values.is_pcgamingwiki_warning_suppressed

    @is_pcgamingwiki_warning_suppressed.setter
    def is_pcgamingwiki_warning_suppressed(self, value: bool) -> None:
        self._values.is_pcgamingwiki_warning_suppressed = value

    def begin_edit(self) -> None:
        self._snapshot = SettingsValues(**self._values.to_dict())

    def cancel_edit(self) -> None:
        if self._snapshot is not None:
            self._values = self._snapshot
            self._snapshot = None

    def end_edit(self) -> None:
        self._snapshot = None
        self._store.save(self._values)

    def verify_settings(self) -> Tuple[bool, List[str]]:
        # Nothing the user can enter is invalid
        return True, []
