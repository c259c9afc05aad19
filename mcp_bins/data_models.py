import enum
from dataclasses import dataclass, asdict, field
from typing import Any, Dict, List


class BinCategory(enum.Enum):
    """Bin categories with their display colour name and emoji."""
    BLACK = ("black", "⚫")
    RED = ("red", "🔴")
    GREEN = ("green", "🟢")
    UNKNOWN = ("unknown", "🗑️")

    def __init__(self, colour: str, emoji: str):
        self.colour = colour
        self.emoji = emoji


@dataclass(frozen=True)
class BinCollection:
    """Represents a single upcoming bin collection."""
    date: str  # "DD/MM/YYYY HH:MM:SS"
    day: str
    service: str


@dataclass
class CollectionsResult:
    """Represents the successful result from a BinDataFetcher."""
    collections: List[BinCollection] = field(default_factory=list)

    def collections_as_dicts(self) -> List[dict]:
        return [asdict(collection) for collection in self.collections]

    @classmethod
    def from_api_payload(cls, payload: Any) -> "CollectionsResult":
        """
        Builds a result from the council API payload:
        {"Collections": [{"Date": ..., "Day": ..., "Service": ...}, ...]}

        Keys are matched case-insensitively, an exact match taking priority.
        A missing or null "Collections" means no collections.

        Raises:
            TypeError: If the payload does not have that shape.
        """
        if not isinstance(payload, dict):
            raise TypeError(f"expected a JSON object, got {type(payload).__name__}")
        raw_collections = _lookup(payload, "Collections")
        if raw_collections is None:
            raw_collections = []
        if not isinstance(raw_collections, list):
            raise TypeError(f"'Collections' must be a list, got {type(raw_collections).__name__}")

        collections = []
        for item in raw_collections:
            if not isinstance(item, dict):
                raise TypeError(f"collection entries must be objects, got {type(item).__name__}")
            collections.append(BinCollection(
                date=_as_text(item, "Date"),
                day=_as_text(item, "Day"),
                service=_as_text(item, "Service"),
            ))
        return cls(collections=collections)


def _lookup(obj: Dict[str, Any], key: str) -> Any:
    if key in obj:
        return obj[key]
    key_lower = key.lower()
    for name, value in obj.items():
        if isinstance(name, str) and name.lower() == key_lower:
            return value
    return None


def _as_text(item: Dict[str, Any], key: str) -> str:
    value = _lookup(item, key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string, got {type(value).__name__}")
    return value
