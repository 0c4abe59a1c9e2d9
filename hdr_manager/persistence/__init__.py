# ==============================================
# PERSISTENCE (Settings across restarts)
# ==============================================
#
# Modules:
# --------
# - settings_store.py  → Save/load the add-on settings
#
# ==============================================

from .settings_store import PluginSettings, SettingsStore, SettingsValues

__all__ = ["PluginSettings", "SettingsStore", "SettingsValues"]
