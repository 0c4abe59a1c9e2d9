# ==============================================
# HdrManagerPlugin
# ==============================================
#
# PURPOSE:
#   Entry points the host calls: startup and library-updated
#   events, the game context menu and the main (extensions) menu.
#
# CLASS: HdrManagerPlugin
# -----------------------
#
#   Constructor:
#   ------------
#   - __init__(api: HostApi, settings=None, manager=None)
#       settings defaults to PluginSettings over a SettingsStore in
#       the configured settings directory; manager defaults to a
#       SystemHdrManager over api.database.
#
#   Events:
#   -------
#   - on_application_started()
#       1. Create / rename the exclusion tag (localized name)
#       2. Enable system HDR for managed games
#       3. Recommend the PCGamingWiki add-on if it is missing
#
#   - on_library_updated()
#       Enable system HDR for managed games.
#
#   Menus:
#   ------
#   - get_game_menu_items(games) -> Iterator[GameMenuItem]
#       Exclusion: "remove" when every selected game has the tag,
#       otherwise "add". HDR: "disable" when every selected game has
#       system HDR on, otherwise "enable".
#
#   - get_main_menu_items() -> Iterator[MainMenuItem]
#       "Run HDR activation".
#
# ==============================================

import logging
import uuid
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional

from hdr_manager.config import get_config
from hdr_manager.host import HostApi, MessageBoxImage, MessageBoxOption
from hdr_manager.library.game_extensions import has_tag
from hdr_manager.library.models import Game
from hdr_manager.localization.keys import LocalizationKeys
from hdr_manager.manager import HDR_EXCLUSION_TAG_ID, SystemHdrManager
from hdr_manager.persistence.settings_store import PluginSettings, SettingsStore

log = logging.getLogger(__name__)

PCGAMINGWIKI_PLUGIN_ID = uuid.UUID("c038558e-427b-4551-be4c-be7009ce5a8d")

MAIN_MENU_SECTION = "@"


@dataclass
class GameMenuItem:
    description: str
    menu_section: str
    action: Callable[[List[Game]], None]


@dataclass
class MainMenuItem:
    description: str
    menu_section: str
    action: Callable[[], None]


class HdrManagerPlugin:
    ID = uuid.UUID("b73b5b49-acdf-4da4-a2cc-b91d34d57c9a")

    def __init__(
        self,
        api: HostApi,
        settings: Optional[PluginSettings] = None,
        manager: Optional[SystemHdrManager] = None
    ):
        self.api = api
        self.settings = settings or PluginSettings(SettingsStore(get_config().settings_dir))
        self.manager = manager or SystemHdrManager(api.database)

    def _string(self, key: str) -> str:
        return self.api.resources.get_string(key)

    def get_settings(self) -> PluginSettings:
        return self.settings

    def on_application_started(self) -> None:
        self.manager.create_or_update_hdr_exclusion_tag(
            self._string(LocalizationKeys.HDR_MANAGER_EXCLUSION_TAG)
        )
        self.manager.enable_system_hdr_for_managed_games()
        self._show_pcgamingwiki_warning()

    def on_library_updated(self) -> None:
        self.manager.enable_system_hdr_for_managed_games()

    def get_game_menu_items(self, games: List[Game]) -> Iterator[GameMenuItem]:
        section = self._string(LocalizationKeys.CONTEXT_MENU_SECTION_HEADER)

        if all(has_tag(game, HDR_EXCLUSION_TAG_ID) for game in games):
            yield GameMenuItem(
                description=self._string(LocalizationKeys.CONTEXT_MENU_REMOVE_EXCLUSION_TAG),
                menu_section=section,
                action=self.manager.remove_hdr_exclusion_tag_from_games
            )
        else:
            yield GameMenuItem(
                description=self._string(LocalizationKeys.CONTEXT_MENU_ADD_EXCLUSION_TAG),
                menu_section=section,
                action=self._exclude_games
            )

        if all(game.enable_system_hdr for game in games):
            yield GameMenuItem(
                description=self._string(LocalizationKeys.CONTEXT_MENU_DISABLE_HDR_SUPPORT),
                menu_section=section,
                action=lambda selected: self.manager.set_system_hdr_for_games(selected, False)
            )
        else:
            yield GameMenuItem(
                description=self._string(LocalizationKeys.CONTEXT_MENU_ENABLE_HDR_SUPPORT),
                menu_section=section,
                action=lambda selected: self.manager.set_system_hdr_for_games(selected, True)
            )

    def get_main_menu_items(self) -> Iterator[MainMenuItem]:
        yield MainMenuItem(
            description=self._string(LocalizationKeys.EXTENSION_MENU_RUN_HDR_ACTIVATION),
            menu_section=MAIN_MENU_SECTION,
            action=self.manager.enable_system_hdr_for_managed_games
        )

    def _exclude_games(self, games: List[Game]) -> None:
        # The user may have deleted the tag since startup
        self.manager.create_or_update_hdr_exclusion_tag(
            self._string(LocalizationKeys.HDR_MANAGER_EXCLUSION_TAG)
        )
        self.manager.add_hdr_exclusion_tag_to_games(games)

    def _is_pcgamingwiki_installed(self) -> bool:
        return any(plugin.id == PCGAMINGWIKI_PLUGIN_ID for plugin in self.api.plugins)

    def _show_pcgamingwiki_warning(self) -> None:
        if self.settings.is_pcgamingwiki_warning_suppressed or self._is_pcgamingwiki_installed():
            return

        ok_response = MessageBoxOption(
            self._string(LocalizationKeys.DIALOG_RESPONSE_OK), is_default=True, is_cancel=True
        )
        suppress_warning_response = MessageBoxOption(
            self._string(LocalizationKeys.DIALOG_RESPONSE_SUPPRESS_WARNING)
        )

        response = self.api.dialogs.show_message(
            self._string(LocalizationKeys.PCGAMINGWIKI_DIALOG_WARNING_MESSAGE),
            "",
            MessageBoxImage.WARNING,
            [ok_response, suppress_warning_response]
        )
        if response is suppress_warning_response:
            log.info("PCGamingWiki recommendation suppressed")
            self.settings.begin_edit()
            self.settings.is_pcgamingwiki_warning_suppressed = True
            self.settings.end_edit()
