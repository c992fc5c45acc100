"""Resource collection domain entity."""

from collections.abc import Iterator
from dataclasses import dataclass, field

from .resource import Resource


@dataclass
class ResourceCollection:
    """Ordered primary result set of a query.

    Member order is insertion order and is carried into the cache as-is.
    """

    data: list[Resource] = field(default_factory=list)

    def append(self, resource: Resource) -> None:
        self.data.append(resource)

    def __iter__(self) -> Iterator[Resource]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)
