# ==============================================
# LIBRARY: HOST GAME DATABASE
# ==============================================
#
# This package models the parts of the host's game library
# that the add-on reads and writes.
#
# Modules:
# --------
# - models.py           → Game, Tag, GameFeature records
# - game_extensions.py  → Tag / feature membership helpers
# - database.py         → ItemCollection + in-memory GameDatabase
# - mongo_database.py   → MongoDB-backed GameDatabase
#
# ==============================================

from .models import Game, GameFeature, Tag
from .database import GameDatabase, ItemCollection

__all__ = [
    "Game",
    "GameFeature",
    "Tag",
    "GameDatabase",
    "ItemCollection",
]
