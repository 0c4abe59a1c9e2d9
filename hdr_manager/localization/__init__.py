# ==============================================
# LOCALIZATION
# ==============================================
#
# Modules:
# --------
# - keys.py       → LocalizationKeys constants
# - resources.py  → ResourceProvider over the *.json string tables
#
# ==============================================

from .keys import LocalizationKeys
from .resources import ResourceProvider, available_locales

__all__ = ["LocalizationKeys", "ResourceProvider", "available_locales"]
