# ==============================================
# CLI: Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Run the add-on's operations against the library stored in
#   MongoDB, outside the host application.
#
# COMMANDS:
# ---------
# 1. Check how feature names are classified (no database needed):
#    python -m hdr_manager.cli classify "HDR Available" "No HDR"
#
# 2. Run the same steps as a host startup:
#    python -m hdr_manager.cli start
#
# 3. Enable system HDR for every managed game:
#    python -m hdr_manager.cli run
#
# 4. Exclude / include games by id:
#    python -m hdr_manager.cli exclude <game-id> [<game-id> ...]
#    python -m hdr_manager.cli include <game-id> [<game-id> ...]
#
# 5. Switch system HDR on or off by id:
#    python -m hdr_manager.cli hdr on <game-id> [<game-id> ...]
#
# 6. Show library counts:
#    python -m hdr_manager.cli status
#
# EXIT CODES:
# -----------
#   0 success, 1 database unreachable or refused, 2 bad arguments
#
# ==============================================

import argparse
import logging
import sys
import uuid
from contextlib import contextmanager
from typing import Iterator, List, Optional

from pymongo.errors import ConnectionFailure, OperationFailure

from hdr_manager.analysis.feature_classifier import FeatureClassifier
from hdr_manager.config import AppConfig, get_config
from hdr_manager.host import ConsoleDialogs, HostApi, PluginInfo
from hdr_manager.library.database import GameDatabase
from hdr_manager.library.game_extensions import has_tag
from hdr_manager.library.models import Game
from hdr_manager.library.mongo_database import MongoConnection, MongoGameDatabase
from hdr_manager.localization.keys import LocalizationKeys
from hdr_manager.localization.resources import ResourceProvider
from hdr_manager.manager import HDR_EXCLUSION_TAG_ID, SystemHdrManager
from hdr_manager.persistence.settings_store import PluginSettings, SettingsStore
from hdr_manager.plugin import HdrManagerPlugin

log = logging.getLogger(__name__)


@contextmanager
def open_library(config: AppConfig) -> Iterator[GameDatabase]:
    """Connect to MongoDB and load the library for the duration of the block."""
    with MongoConnection(config.mongo) as connection:
        yield MongoGameDatabase.load(connection)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hdr-manager",
        description="Enable system HDR for games that declare an HDR feature."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    classify = subparsers.add_parser("classify", help="classify feature names")
    classify.add_argument("names", nargs="+", metavar="NAME")

    subparsers.add_parser("start", help="run the host startup steps")
    subparsers.add_parser("run", help="enable system HDR for managed games")
    subparsers.add_parser("status", help="show library counts")

    for name, help_text in (
        ("exclude", "add the HDR exclusion tag to games"),
        ("include", "remove the HDR exclusion tag from games"),
    ):
        command = subparsers.add_parser(name, help=help_text)
        command.add_argument("game_ids", nargs="+", type=uuid.UUID, metavar="GAME_ID")

    hdr = subparsers.add_parser("hdr", help="switch system HDR on or off")
    hdr.add_argument("state", choices=["on", "off"])
    hdr.add_argument("game_ids", nargs="+", type=uuid.UUID, metavar="GAME_ID")

    return parser


def _resolve_games(database: GameDatabase, game_ids: List[uuid.UUID]) -> List[Game]:
    games = []
    for game_id in game_ids:
        game = database.games.get(game_id)
        if game is None:
            print(f"Game {game_id} not found, skipping", file=sys.stderr)
            continue
        games.append(game)
    return games


def _classify(names: List[str]) -> None:
    classifier = FeatureClassifier()
    for name in names:
        verdict = "HDR" if classifier.is_hdr_feature(name) else "not HDR"
        print(f"{name!r}: {verdict}")


def _status(database: GameDatabase, manager: SystemHdrManager) -> None:
    hdr_features = FeatureClassifier().hdr_feature_ids(database.features)
    games = list(database.games)
    print(f"Games:                 {len(games)}")
    print(f"HDR features:          {len(hdr_features)}")
    print(f"Managed games:         {len(manager.managed_games())}")
    print(f"Excluded games:        {sum(1 for game in games if has_tag(game, HDR_EXCLUSION_TAG_ID))}")
    print(f"System HDR enabled:    {sum(1 for game in games if game.enable_system_hdr)}")


def _run_command(args: argparse.Namespace, config: AppConfig, database: GameDatabase) -> None:
    resources = ResourceProvider(config.locale)
    manager = SystemHdrManager(database)

    if args.command == "start":
        api = HostApi(
            database=database,
            resources=resources,
            dialogs=ConsoleDialogs(),
            plugins=[PluginInfo(id=plugin_id) for plugin_id in config.installed_plugin_ids]
        )
        settings = PluginSettings(SettingsStore(config.settings_dir))
        HdrManagerPlugin(api, settings=settings, manager=manager).on_application_started()
        print("Startup steps completed")
    elif args.command == "run":
        games = manager.enable_system_hdr_for_managed_games()
        print(f"System HDR enabled for {len(games)} games")
    elif args.command == "status":
        _status(database, manager)
    elif args.command == "exclude":
        games = _resolve_games(database, args.game_ids)
        manager.create_or_update_hdr_exclusion_tag(
            resources.get_string(LocalizationKeys.HDR_MANAGER_EXCLUSION_TAG)
        )
        manager.add_hdr_exclusion_tag_to_games(games)
        print(f"Excluded {len(games)} games")
    elif args.command == "include":
        games = _resolve_games(database, args.game_ids)
        manager.remove_hdr_exclusion_tag_from_games(games)
        print(f"Included {len(games)} games")
    elif args.command == "hdr":
        games = _resolve_games(database, args.game_ids)
        manager.set_system_hdr_for_games(games, args.state == "on")
        print(f"System HDR {args.state} for {len(games)} games")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = get_config()

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    log.debug(f"Running '{args.command}'")

    if args.command == "classify":
        _classify(args.names)
        return 0

    try:
        with open_library(config) as database:
            _run_command(args, config, database)
    except ConnectionFailure as e:
        print(f"Could not reach the game library: {e}", file=sys.stderr)
        return 1
    except OperationFailure as e:
        print(f"The game library refused the request: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
