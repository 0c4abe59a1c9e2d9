# ==============================================
# SystemHdrManager
# ==============================================
#
# PURPOSE:
#   Ties the feature classifier to the host game database. Users
#   (the plugin, the CLI) call this class only.
#
#   ┌──────────────────────────────────────────────┐
#   │ ANALYSIS                                     │
#   │  FeatureClassifier → HDR feature ids         │
#   └──────────────┬───────────────────────────────┘
#                  │ feature ids
#                  ▼
#   ┌──────────────────────────────────────────────┐
#   │ LIBRARY                                      │
#   │  has HDR feature AND NOT exclusion tag       │
#   │  → enable_system_hdr = True (buffered)       │
#   └──────────────────────────────────────────────┘
#
# CLASS: SystemHdrManager
# -----------------------
#
#   Public Methods:
#   ---------------
#   - enable_system_hdr_for_managed_games() -> list[Game]
#   - set_system_hdr_for_games(games, enable_system_hdr) -> None
#   - add_hdr_exclusion_tag_to_games(games) -> None
#   - remove_hdr_exclusion_tag_from_games(games) -> None
#   - create_or_update_hdr_exclusion_tag(name) -> Tag
#
#   Games that are not in the database are skipped.
#
# ==============================================

import logging
import uuid
from typing import Callable, Iterable, List, Optional

from hdr_manager.analysis.feature_classifier import FeatureClassifier
from hdr_manager.library.database import GameDatabase
from hdr_manager.library.game_extensions import add_tag, has_any_feature, has_tag, remove_tag
from hdr_manager.library.models import Game, Tag

log = logging.getLogger(__name__)

HDR_EXCLUSION_TAG_ID = uuid.UUID("b7f2a9d3-4c1e-4a8b-9f6d-2e3c1a5d7b84")


class SystemHdrManager:
    """
    Turns on the host's per-game system HDR switch for games that
    declare an HDR feature, honouring the exclusion tag.
    """

    def __init__(self, database: GameDatabase, classifier: Optional[FeatureClassifier] = None):
        """
        Args:
            database: The host game database
            classifier: Optional FeatureClassifier; the default tokens are used otherwise
        """
        self._database = database
        self._classifier = classifier or FeatureClassifier()

    @property
    def hdr_exclusion_tag(self) -> Optional[Tag]:
        return self._database.tags.get(HDR_EXCLUSION_TAG_ID)

    def managed_games(self) -> List[Game]:
        """
        Games that declare an HDR feature and are not excluded.

        Returns:
            The games activation would switch on
        """
        hdr_feature_ids = self._classifier.hdr_feature_ids(self._database.features)
        return [
            game for game in self._database.games
            if has_any_feature(game, hdr_feature_ids) and not has_tag(game, HDR_EXCLUSION_TAG_ID)
        ]

    def enable_system_hdr_for_managed_games(self) -> List[Game]:
        """
        Switch system HDR on for every managed game.

        Games without an HDR feature are left as they are; this never
        switches HDR off.

        Returns:
            The managed games
        """
        games = self.managed_games()
        log.info(f"Enabling System HDR for {len(games)} games")
        self.set_system_hdr_for_games(games, True)
        return games

    def set_system_hdr_for_games(self, games: Iterable[Game], enable_system_hdr: bool) -> None:
        def apply(game: Game) -> None:
            log.debug(f"Setting enable_system_hdr for game {game.name} to {enable_system_hdr}")
            game.enable_system_hdr = enable_system_hdr

        self._update_games(games, apply)

    def add_hdr_exclusion_tag_to_games(self, games: Iterable[Game]) -> None:
        def apply(game: Game) -> None:
            log.debug(f"Adding HDR exclusion tag to game {game.name}")
            add_tag(game, HDR_EXCLUSION_TAG_ID)

        self._update_games(games, apply)

    def remove_hdr_exclusion_tag_from_games(self, games: Iterable[Game]) -> None:
        def apply(game: Game) -> None:
            log.debug(f"Removing HDR exclusion tag from game {game.name}")
            remove_tag(game, HDR_EXCLUSION_TAG_ID)

        self._update_games(games, apply)

    def create_or_update_hdr_exclusion_tag(self, name: str) -> Tag:
        """
        Make sure the exclusion tag exists under the given name.

        Args:
            name: Localized tag name

        Returns:
            The exclusion tag (created, renamed, or untouched)
        """
        tag = self.hdr_exclusion_tag
        if tag is None:
            log.info("Creating HDR exclusion tag")
            tag = Tag(name=name, id=HDR_EXCLUSION_TAG_ID)
            self._database.tags.add(tag)
        elif tag.name != name:
            log.info(f"Renaming HDR exclusion tag from '{tag.name}' to '{name}'")
            tag.name = name
            self._database.tags.update(tag)
        return tag

    def _update_games(self, games: Iterable[Game], apply: Callable[[Game], None]) -> None:
        with self._database.buffered_update():
            for game in games:
                if game.id not in self._database.games:
                    log.debug(f"Skipping game {game.name} ({game.id}): not in the database")
                    continue
                apply(game)
                self._database.games.update(game)
