"""Tag and feature membership helpers for Game records."""

from typing import Iterable, Optional, TypeVar
from uuid import UUID

from .models import Game

T = TypeVar("T")


def empty_if_null(iterable: Optional[Iterable[T]]) -> Iterable[T]:
    """Return the iterable itself, or an empty one for None."""
    if iterable is None:
        return ()
    return iterable


def has_any_feature(game: Game, feature_ids: Iterable[UUID]) -> bool:
    """True if the game declares at least one of the given features."""
    return not set(empty_if_null(game.feature_ids)).isdisjoint(feature_ids)


def has_tag(game: Game, tag_id: UUID) -> bool:
    return tag_id in empty_if_null(game.tag_ids)


def add_tag(game: Game, tag_id: UUID) -> None:
    """
    Add a tag id to the game unless it is already there.

    A game with no tag list gets a new one holding just this tag.
    """
    if game.tag_ids is None:
        game.tag_ids = [tag_id]
    elif tag_id not in game.tag_ids:
        game.tag_ids.append(tag_id)


def remove_tag(game: Game, tag_id: UUID) -> None:
    """Remove every occurrence of a tag id. A missing tag list stays None."""
    if game.tag_ids is None:
        return
    game.tag_ids[:] = [existing for existing in game.tag_ids if existing != tag_id]
