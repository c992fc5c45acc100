#!/usr/bin/env python3
"""
Demo script for the JSON:API cache.

This script rips a small library of books and authors into cache elements
and assembles documents back out of them.
"""

import asyncio
import json

from jsonapi_cache import CacheService, MemoryCacheRepository, Resource, ResourceCollection


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def build_library() -> ResourceCollection:
    """Two authors and their books, linked both ways."""
    bradbury = Resource(type="authors", id="1", attributes={"name": "Ray Bradbury"})
    le_guin = Resource(type="authors", id="2", attributes={"name": "Ursula K. Le Guin"})

    for book_id, title, author in [
        ("1", "Fahrenheit 451", bradbury),
        ("2", "The Martian Chronicles", bradbury),
        ("3", "The Left Hand of Darkness", le_guin),
    ]:
        book = Resource(type="books", id=book_id, attributes={"title": title})
        book.add_relationship(author, "author")
        author.add_relationship(book)

    return ResourceCollection(data=[le_guin, bradbury])


async def demo_ripping(cache: CacheService) -> None:
    """Show the flat elements a collection turns into."""
    print_section("Ripping")

    elements = await cache.save_collection("/authors?include=books", build_library(), ["books"])
    for element in elements:
        print(f"  {element.key:<28} {json.dumps(element.content)[:70]}...")


async def demo_assembly(cache: CacheService) -> None:
    """Show documents assembled from the cache."""
    print_section("Assembly")

    document = await cache.get_collection("/authors?include=books", ["books"])
    print(f"\n  Collection: {[resource['attributes']['name'] for resource in document['data']]}")
    print(f"  Included:   {[resource['attributes']['title'] for resource in document['included']]}")

    document = await cache.get_resource("books.1", ["author"])
    print(f"\n  Book:       {document['data']['attributes']['title']}")
    print(f"  Author:     {document['included'][0]['attributes']['name']}")
    print(f"  Cached at:  {document['meta']['_cache_updated_at']}")


async def demo_deprecation(cache: CacheService) -> None:
    """Show a collection going stale."""
    print_section("Deprecation")

    count = await cache.deprecate_collections("/authors")
    document = await cache.get_collection("/authors?include=books")
    print(f"\n  Deprecated {count} collection(s)")
    print(f"  Fresh (60s TTL): {CacheService.is_fresh(document, ttl_seconds=60)}")


async def main() -> None:
    """Run all demos."""
    print("\nJSON:API Cache Demo")

    cache = CacheService.create(repository=MemoryCacheRepository())
    await demo_ripping(cache)
    await demo_assembly(cache)
    await demo_deprecation(cache)

    print("\n" + "=" * 70)
    print("Demo completed successfully!")
    print("=" * 70)


if __name__ == "__main__":
    asyncio.run(main())
