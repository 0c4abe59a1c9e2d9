# ==============================================
# MongoGameDatabase
# ==============================================
#
# PURPOSE:
#   Backs the host game database with MongoDB. Games, tags and
#   features live in three collections, one document per record,
#   keyed by the string form of the record id (`id` field).
#
# CLASS: MongoConnection
# ----------------------
#   Opens the pymongo client described by a MongoConfig and hands
#   out its collections. Usable as a context manager.
#
# CLASS: MongoItemCollection
# --------------------------
#   ItemCollection whose changes go through to MongoDB:
#     add     → insert_one
#     update  → bulk_write of ReplaceOne(upsert=True), one call per
#               flush (so a buffered update is a single round trip)
#     remove  → delete_one
#
# CLASS: MongoGameDatabase
# ------------------------
#   - load(connection) (classmethod) → read all three collections
#
# ==============================================

import logging
from typing import Any, Dict, List, Optional, Type
from uuid import UUID

from pymongo import MongoClient as PyMongoClient
from pymongo import ReplaceOne
from pymongo.errors import ConnectionFailure, OperationFailure

from hdr_manager.config import MongoConfig

from .database import GameDatabase, ItemCollection, T
from .models import Game, GameFeature, Tag

log = logging.getLogger(__name__)

GAMES_COLLECTION = "games"
TAGS_COLLECTION = "tags"
FEATURES_COLLECTION = "features"


class MongoConnection:
    def __init__(self, config: MongoConfig):
        self.config = config
        self.client: Optional[PyMongoClient] = None

    def _auth_options(self) -> Dict[str, str]:
        if not (self.config.user and self.config.password):
            return {}
        return {
            "username": self.config.user,
            "password": self.config.password,
            "authSource": self.config.database,
        }

    def connect(self) -> None:
        address = f"{self.config.host}:{self.config.port}"
        client = PyMongoClient(self.config.host, self.config.port, **self._auth_options())
        try:
            client.admin.command("ping")
        except (ConnectionFailure, OperationFailure) as e:
            client.close()
            log.error(f"MongoDB at {address} is unavailable: {e}")
            raise
        self.client = client
        log.info(f"Connected to MongoDB at {address}")

    def disconnect(self) -> None:
        if self.client is None:
            return
        self.client.close()
        self.client = None
        log.info("Disconnected from MongoDB")

    def collection(self, name: str):
        if self.client is None:
            raise RuntimeError("connect() must be called before using collections")
        return self.client[self.config.database][name]

    def __enter__(self) -> "MongoConnection":
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.disconnect()


class MongoItemCollection(ItemCollection[T]):
    """
    Item collection mirrored into one MongoDB collection.
    """

    def __init__(self, collection, record_type: Type[T]):
        """
        Load every document of the collection.

        Args:
            collection: pymongo Collection holding the records
            record_type: Record class used to decode documents
        """
        documents: List[Dict[str, Any]] = list(collection.find({}, {"_id": 0}))
        super().__init__(record_type.from_dict(document) for document in documents)
        self._collection = collection
        log.debug(f"Loaded {len(documents)} documents from '{collection.name}'")

    def _insert(self, item: T) -> None:
        self._collection.insert_one(item.to_dict())

    def _write(self, items: List[T]) -> None:
        operations = [
            ReplaceOne({"id": str(item.id)}, item.to_dict(), upsert=True)
            for item in items
        ]
        if not operations:
            return
        self._collection.bulk_write(operations, ordered=False)
        log.debug(f"Wrote {len(operations)} documents to '{self._collection.name}'")

    def _delete(self, item_id: UUID) -> None:
        self._collection.delete_one({"id": str(item_id)})


class MongoGameDatabase(GameDatabase):
    """Game database whose collections are stored in MongoDB."""

    @classmethod
    def load(cls, connection: MongoConnection) -> "MongoGameDatabase":
        """
        Read games, tags and features over an open connection.

        Args:
            connection: Connected MongoConnection

        Returns:
            A MongoGameDatabase writing changes back through the connection
        """
        database = cls(
            games=MongoItemCollection(connection.collection(GAMES_COLLECTION), Game),
            tags=MongoItemCollection(connection.collection(TAGS_COLLECTION), Tag),
            features=MongoItemCollection(connection.collection(FEATURES_COLLECTION), GameFeature),
        )
        log.info(
            f"Loaded library: {len(database.games)} games, "
            f"{len(database.tags)} tags, {len(database.features)} features"
        )
        return database
