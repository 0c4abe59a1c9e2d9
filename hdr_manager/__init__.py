# ==============================================
# HDR Manager
# ==============================================
#
# Package Structure:
#
# hdr_manager/
# ├── analysis/         # HDR feature classification
# ├── library/          # Host game database (records, collections, MongoDB)
# ├── localization/     # Localized string tables
# ├── persistence/      # Plugin settings across restarts
# ├── config.py         # Configuration management
# ├── host.py           # Host API seam (dialogs, installed plugins)
# ├── manager.py        # SystemHdrManager: the update operations
# ├── plugin.py         # Plugin entry points: events and menus
# └── cli.py            # Command line entry point
#
# ==============================================

__version__ = "0.1.0"
