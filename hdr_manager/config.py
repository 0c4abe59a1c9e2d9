# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load all configuration from environment variables / .env file.
#   Provides typed config objects to the rest of the add-on.
#
# CLASSES:
# --------
# - MongoConfig (dataclass)
#     host: str          (default "localhost")
#     port: int          (default 27017)
#     user: str | None   (default None)
#     password: str | None (default None)
#     database: str      (default "playnite")
#
# - AppConfig (dataclass)
#     mongo: MongoConfig
#     settings_dir: str             (default "settings/")
#     locale: str                   (default "en_US")
#     installed_plugin_ids: list    (default [])
#     log_level: str                (default "INFO")
#
# FUNCTION:
# ---------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# USAGE:
# ------
#   from hdr_manager.config import get_config
#   config = get_config()
#   print(config.mongo.host)
#   print(config.locale)
#
# ==============================================

import os
import uuid
from dataclasses import dataclass, field
from typing import List, Optional
from pathlib import Path

from dotenv import load_dotenv


@dataclass
class MongoConfig:
    """MongoDB connection holding the host's game library."""
    host: str = "localhost"
    port: int = 27017
    user: Optional[str] = None
    password: Optional[str] = None
    database: str = "playnite"


@dataclass
class AppConfig:
    """Main add-on configuration."""
    mongo: MongoConfig = field(default_factory=MongoConfig)
    settings_dir: str = "settings/"
    locale: str = "en_US"
    installed_plugin_ids: List[uuid.UUID] = field(default_factory=list)
    log_level: str = "INFO"


# Singleton instance
_config_instance: Optional[AppConfig] = None


def parse_plugin_ids(raw: str) -> List[uuid.UUID]:
    """
    Parse a comma-separated list of plugin ids.

    Blank entries are ignored; a malformed id raises ValueError.
    """
    return [uuid.UUID(part.strip()) for part in raw.split(",") if part.strip()]


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Add-on configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    mongo_config = MongoConfig(
        host=os.getenv("MONGO_HOST", "localhost"),
        port=int(os.getenv("MONGO_PORT", "27017")),
        user=os.getenv("MONGO_USER") or None,
        password=os.getenv("MONGO_PASSWORD") or None,
        database=os.getenv("MONGO_DATABASE", "playnite")
    )

    _config_instance = AppConfig(
        mongo=mongo_config,
        settings_dir=os.getenv("SETTINGS_DIR", "settings/"),
        locale=os.getenv("LOCALE", "en_US"),
        installed_plugin_ids=parse_plugin_ids(os.getenv("INSTALLED_PLUGIN_IDS", "")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper()
    )

    return _config_instance
