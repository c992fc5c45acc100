"""Cache element domain entity."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CacheElement:
    """Unit written to and read from the key-value store.

    Attributes:
        key: Entity key ("<type>.<id>") or a caller-chosen logical key
        content: Either ``{"data": <wire resource>}`` for a resource or
            ``{"keys": [<entity key>, ...]}`` for a collection index
    """

    key: str
    content: dict[str, Any]

    @property
    def is_index(self) -> bool:
        return "keys" in self.content

    def to_record(self, updated_at: int) -> dict[str, Any]:
        """Stored form of the element, stamped with its write time (ms)."""
        return {"content": self.content, "updated_at": updated_at}
