"""Domain entities for internal representation.

These are plain dataclasses used by the ripper, the assembler and the
service. They are NOT used for API contracts - use DTOs from the dto
package for that.
"""

from .cache_element import CacheElement
from .collection import ResourceCollection
from .resource import Relationship, Resource

__all__ = ["CacheElement", "Relationship", "Resource", "ResourceCollection"]
