# ==============================================
# Library Records (Data Classes)
# ==============================================
#
# PURPOSE:
#   Mirrors of the host's Game, Tag and GameFeature records.
#   The host owns these; only the fields the add-on reads or
#   writes are modelled here.
#
# CLASSES:
# --------
# - Game (dataclass)
#     - id: UUID
#     - name: str
#     - enable_system_hdr: bool
#     - tag_ids: list[UUID] | None      → None behaves as empty
#     - feature_ids: list[UUID] | None  → None behaves as empty
#
# - Tag (dataclass)
#     - id: UUID
#     - name: str
#
# - GameFeature (dataclass)
#     - id: UUID
#     - name: str
#
#   Each class has to_dict() / from_dict() for the document store.
#   UUIDs are stored as strings.
#
# ==============================================

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def _ids_to_list(ids: Optional[List[uuid.UUID]]) -> Optional[List[str]]:
    if ids is None:
        return None
    return [str(item_id) for item_id in ids]


def _ids_from_list(values: Optional[List[Any]]) -> Optional[List[uuid.UUID]]:
    if values is None:
        return None
    return [uuid.UUID(str(value)) for value in values]


@dataclass
class Tag:
    """A user-visible label the host attaches to games."""
    name: str = ""
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": str(self.id), "name": self.name}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tag":
        return cls(name=data.get("name", ""), id=uuid.UUID(str(data["id"])))


@dataclass
class GameFeature:
    """A capability a game declares, e.g. "HDR Available"."""
    name: str = ""
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": str(self.id), "name": self.name}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameFeature":
        return cls(name=data.get("name", ""), id=uuid.UUID(str(data["id"])))


@dataclass
class Game:
    """
    A game in the user's library.

    Only enable_system_hdr and tag_ids are ever written by the add-on.
    """

    name: str = ""
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    enable_system_hdr: bool = False
    tag_ids: Optional[List[uuid.UUID]] = None
    feature_ids: Optional[List[uuid.UUID]] = None

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the game for the document store.

        Returns:
            A JSON-serializable dictionary representation
        """
        return {
            "id": str(self.id),
            "name": self.name,
            "enable_system_hdr": self.enable_system_hdr,
            "tag_ids": _ids_to_list(self.tag_ids),
            "feature_ids": _ids_to_list(self.feature_ids),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Game":
        """
        Reconstruct a Game from a stored document.

        Args:
            data: Dictionary with the saved game fields

        Returns:
            A Game instance
        """
        return cls(
            name=data.get("name", ""),
            id=uuid.UUID(str(data["id"])),
            enable_system_hdr=bool(data.get("enable_system_hdr", False)),
            tag_ids=_ids_from_list(data.get("tag_ids")),
            feature_ids=_ids_from_list(data.get("feature_ids")),
        )
