# ==============================================
# Item Collections & GameDatabase
# ==============================================
#
# PURPOSE:
#   In-memory stand-in for the host's game database. The host
#   keeps games, tags and features in separate collections keyed
#   by id and notifies listeners whenever items are updated.
#
# CLASS: ItemCollection[T]
# ------------------------
#   Stateful: holds items keyed by their `id`.
#
#   Methods:
#   --------
#   - get(item_id) -> T | None
#   - add(item) -> None            ValueError on duplicate id
#   - update(item) -> None         KeyError on unknown id
#   - remove(item_id) -> None      KeyError on unknown id
#   - subscribe(callback) -> None  callback(list[T]) after updates
#
#   Buffering:
#   ----------
#   While a buffer is open, updates are applied in memory but their
#   writes and notifications are held back. When the outermost
#   buffer closes they are delivered as a single batch, one entry
#   per item id. A batch whose write fails stays queued for the
#   next flush.
#
#   Subclasses hook into _write / _insert / _delete to persist
#   changes (see mongo_database.py).
#
# CLASS: GameDatabase
# -------------------
#   - games: ItemCollection[Game]
#   - tags: ItemCollection[Tag]
#   - features: ItemCollection[GameFeature]
#   - buffered_update()  → context manager buffering all three
#
# ==============================================

import logging
from contextlib import contextmanager
from typing import Callable, Dict, Generic, Iterable, Iterator, List, Optional, TypeVar, Union
from uuid import UUID

from .models import Game, GameFeature, Tag

log = logging.getLogger(__name__)

T = TypeVar("T", Game, Tag, GameFeature)

UpdateListener = Callable[[List[T]], None]


class ItemCollection(Generic[T]):
    def __init__(self, items: Iterable[T] = ()):
        self._items: Dict[UUID, T] = {}
        for item in items:
            self._items[item.id] = item
        self._listeners: List[UpdateListener] = []
        self._buffer_depth = 0
        self._pending: Dict[UUID, T] = {}

    def __iter__(self) -> Iterator[T]:
        # Snapshot so callers may update while iterating
        return iter(list(self._items.values()))

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: Union[T, UUID]) -> bool:
        item_id = item if isinstance(item, UUID) else item.id
        return item_id in self._items

    def get(self, item_id: UUID) -> Optional[T]:
        return self._items.get(item_id)

    def add(self, item: T) -> None:
        if item.id in self._items:
            raise ValueError(f"Item {item.id} already exists")
        self._items[item.id] = item
        self._insert(item)

    def update(self, item: T) -> None:
        if item.id not in self._items:
            raise KeyError(item.id)
        self._items[item.id] = item
        self._pending[item.id] = item
        if self._buffer_depth == 0:
            self._flush()

    def remove(self, item_id: UUID) -> None:
        del self._items[item_id]
        self._pending.pop(item_id, None)
        self._delete(item_id)

    def subscribe(self, callback: UpdateListener) -> None:
        self._listeners.append(callback)

    def begin_buffer(self) -> None:
        self._buffer_depth += 1

    def end_buffer(self) -> None:
        if self._buffer_depth == 0:
            raise RuntimeError("end_buffer() called without begin_buffer()")
        self._buffer_depth -= 1
        if self._buffer_depth == 0 and self._pending:
            log.debug(f"Flushing {len(self._pending)} buffered updates")
            self._flush()

    @property
    def is_buffered(self) -> bool:
        return self._buffer_depth > 0

    def _flush(self) -> None:
        # Pending items stay queued until the write succeeds
        items = list(self._pending.values())
        self._write(items)
        self._pending.clear()
        for callback in self._listeners:
            callback(list(items))

    # Persistence hooks. The in-memory collection keeps everything in _items.
    def _insert(self, item: T) -> None:
        pass

    def _write(self, items: List[T]) -> None:
        pass

    def _delete(self, item_id: UUID) -> None:
        pass


class GameDatabase:
    """
    The host's game database: games, tags and features.
    """

    def __init__(
        self,
        games: Optional[ItemCollection[Game]] = None,
        tags: Optional[ItemCollection[Tag]] = None,
        features: Optional[ItemCollection[GameFeature]] = None
    ):
        self.games: ItemCollection[Game] = games if games is not None else ItemCollection()
        self.tags: ItemCollection[Tag] = tags if tags is not None else ItemCollection()
        self.features: ItemCollection[GameFeature] = features if features is not None else ItemCollection()

    @classmethod
    def from_items(
        cls,
        games: Iterable[Game] = (),
        tags: Iterable[Tag] = (),
        features: Iterable[GameFeature] = ()
    ) -> "GameDatabase":
        """
        Build an in-memory database from plain records.

        Args:
            games: Games in the library
            tags: Tags defined by the user
            features: Features known to the host

        Returns:
            A GameDatabase holding the given records
        """
        return cls(
            games=ItemCollection(games),
            tags=ItemCollection(tags),
            features=ItemCollection(features),
        )

    @contextmanager
    def buffered_update(self) -> Iterator["GameDatabase"]:
        """
        Hold back writes and notifications until the block exits.

        Nested blocks are allowed; only the outermost one flushes.
        Pending changes are flushed even if the block raises. Every
        collection leaves buffering even when another one fails to
        flush; the first flush error is re-raised afterwards.
        """
        collections = (self.games, self.tags, self.features)
        for collection in collections:
            collection.begin_buffer()
        try:
            yield self
        finally:
            errors = []
            for collection in collections:
                try:
                    collection.end_buffer()
                except Exception as e:
                    log.error(f"Flushing buffered updates failed: {e}")
                    errors.append(e)
            if errors:
                raise errors[0]
