"""Tests for saving to and reading from the cache through CacheService."""

import time

import pytest
from factories import get_author, get_authors_collection, get_book, get_photo

from jsonapi_cache.entities import Relationship, Resource, ResourceCollection
from jsonapi_cache.exceptions import NotFoundError
from jsonapi_cache.keys import resource_key
from jsonapi_cache.services import CacheService

pytestmark = pytest.mark.asyncio


@pytest.fixture
def book() -> Resource:
    return get_book("5", author=get_author("2"), title="Fahrenheit 451")


class TestResources:
    async def test_saved_resource_is_assembled(self, cache_service, book):
        await cache_service.save_resource(book)

        document = await cache_service.get_resource(resource_key(book))

        assert document["data"] == {
            "id": "5",
            "type": "books",
            "attributes": {"title": "Fahrenheit 451", "date_published": "2016-12-01"},
            "relationships": {"author": {"data": {"id": "2", "type": "authors"}}},
        }
        assert document["included"] == []

    async def test_resource_without_relationships_round_trips(self, cache_service):
        photo = get_photo("1")
        await cache_service.save_resource(photo)

        document = await cache_service.get_resource("photos.1")

        assert document["data"] == {
            "id": "1",
            "type": "photos",
            "attributes": photo.attributes,
            "relationships": {},
        }

    async def test_resource_keeps_cache_updated_at(self, cache_service, book):
        await cache_service.save_resource(book)

        document = await cache_service.get_resource("books.5")

        now = int(time.time() * 1000)
        assert now - 100 <= document["meta"]["_cache_updated_at"] <= now

    async def test_resource_with_include(self, cache_service, book):
        await cache_service.save_resource(book, ["author"])

        document = await cache_service.get_resource("books.5", ["author"])

        assert len(document["included"]) == 1
        assert document["included"][0] == {
            "id": "2",
            "type": "authors",
            "attributes": {"name": "Author 2", "date_of_birth": "1920-08-22"},
            "relationships": {},
        }

    async def test_include_only_expands_when_requested(self, cache_service, book):
        await cache_service.save_resource(book, ["author"])

        document = await cache_service.get_resource("books.5")

        assert document["included"] == []

    async def test_resource_with_null_to_one(self, cache_service, book):
        book.relationships["author"] = Relationship(data=None)
        await cache_service.save_resource(book, ["author"])

        document = await cache_service.get_resource("books.5", ["author"])

        assert document["included"] == []
        assert document["data"]["relationships"]["author"]["data"] is None

    async def test_missing_include_target_is_skipped(self, cache_service):
        book = get_book("5", author=Resource.reference("authors", "404"))
        book.add_relationship(get_photo("1"))
        await cache_service.save_resource(book, ["author", "photos"])

        document = await cache_service.get_resource("books.5", ["author", "photos"])

        assert [resource["id"] for resource in document["included"]] == ["1"]

    async def test_included_resource_saved_elsewhere_is_found(self, cache_service):
        await cache_service.save_resource(get_author("2"))
        await cache_service.save_resource(get_book("5", author=Resource.reference("authors", "2")))

        document = await cache_service.get_resource("books.5", ["author"])

        assert document["included"][0]["attributes"]["name"] == "Author 2"

    async def test_included_is_deduplicated_across_relationships(self, cache_service):
        author = get_author("2")
        book = get_book("5", author=author)
        book.add_relationship(author, "editor")
        book.add_relationship(get_photo("1"))
        await cache_service.save_resource(book, ["author", "editor", "photos"])

        document = await cache_service.get_resource("books.5", ["author", "editor", "photos"])

        assert [(r["type"], r["id"]) for r in document["included"]] == [
            ("authors", "2"),
            ("photos", "1"),
        ]

    async def test_resource_saved_under_logical_key(self, cache_service, book):
        elements = await cache_service.save_resource(book, ["author"], key="/books/5")

        document = await cache_service.get_resource("/books/5", ["author"])

        assert elements[0].key == "/books/5"
        assert document["data"]["id"] == "5"
        assert document["included"][0]["id"] == "2"

    async def test_explicit_empty_key_is_not_replaced(self, cache_service, book):
        elements = await cache_service.save_resource(book, key="")

        assert elements[0].key == ""
        assert (await cache_service.get_resource(""))["data"]["id"] == "5"
        with pytest.raises(NotFoundError):
            await cache_service.get_resource("books.5")

    async def test_linked_resource_without_valid_key_is_not_saved(self, cache_service, repository):
        book = get_book("5", author=Resource.reference("legacy.authors", "2"))

        with pytest.raises(ValueError):
            await cache_service.save_resource(book, ["author"])

        assert await repository.count_all() == 0

    async def test_saving_again_overwrites(self, cache_service, book):
        await cache_service.save_resource(book)
        book.attributes["title"] = "The Martian Chronicles"
        await cache_service.save_resource(book)

        document = await cache_service.get_resource("books.5")

        assert document["data"]["attributes"]["title"] == "The Martian Chronicles"

    async def test_not_cached_resource_raises(self, cache_service):
        with pytest.raises(NotFoundError) as exc_info:
            await cache_service.get_resource("extrange_type.id")

        assert exc_info.value.key == "extrange_type.id"

    async def test_collection_key_is_not_a_resource(self, cache_service):
        await cache_service.save_collection("some/url", get_authors_collection())

        with pytest.raises(NotFoundError):
            await cache_service.get_resource("some/url")


class TestCollections:
    async def test_saved_collection_is_assembled(self, cache_service):
        await cache_service.save_collection("some/url", get_authors_collection())

        document = await cache_service.get_collection("some/url")

        assert len(document["data"]) == 2
        assert document["data"][1] == {
            "id": "1",
            "type": "authors",
            "attributes": {"name": "Ray Bradbury", "date_of_birth": "1920-08-22"},
            "relationships": {
                "books": {"data": [{"id": "1", "type": "books"}, {"id": "2", "type": "books"}]},
            },
        }

    async def test_collection_keeps_member_order(self, cache_service):
        collection = ResourceCollection(data=[get_author("9"), get_author("1"), get_author("5")])
        await cache_service.save_collection("authors?sort=-rating", collection)

        document = await cache_service.get_collection("authors?sort=-rating")

        assert [resource["id"] for resource in document["data"]] == ["9", "1", "5"]

    async def test_collection_keeps_cache_updated_at(self, cache_service):
        await cache_service.save_collection("some/url", get_authors_collection())

        document = await cache_service.get_collection("some/url")

        now = int(time.time() * 1000)
        assert now - 100 <= document["meta"]["_cache_updated_at"] <= now

    async def test_collection_with_include(self, cache_service):
        await cache_service.save_collection("some/url/include", get_authors_collection(), ["books"])

        document = await cache_service.get_collection("some/url/include", ["books"])

        assert len(document["data"]) == 2
        assert len(document["included"]) == 2
        assert document["included"][1]["id"] == "2"
        assert document["included"][1]["type"] == "books"
        assert document["included"][1]["relationships"] == {
            "author": {"data": {"id": "3", "type": "authors"}},
        }

    async def test_included_excludes_resources_in_data(self, cache_service):
        author1 = get_author("1")
        author2 = get_author("2")
        author1.add_relationship(author2, "mentor")
        author1.add_relationship(get_author("3"), "friend")
        await cache_service.save_collection("authors", ResourceCollection(data=[author1, author2]), ["mentor", "friend"])

        document = await cache_service.get_collection("authors", ["mentor", "friend"])

        assert [resource["id"] for resource in document["included"]] == ["3"]

    async def test_shared_included_resource_appears_once(self, cache_service):
        author = get_author("7")
        collection = ResourceCollection(data=[get_book("1", author=author), get_book("2", author=author)])
        elements = await cache_service.save_collection("books", collection, ["author"])

        document = await cache_service.get_collection("books", ["author"])

        assert [element.key for element in elements].count("authors.7") == 1
        assert [resource["id"] for resource in document["included"]] == ["7"]

    async def test_missing_member_is_skipped(self, cache_service, repository):
        await cache_service.save_collection("some/url", get_authors_collection())
        await repository.delete_by_key("authors.2")

        document = await cache_service.get_collection("some/url")

        assert [resource["id"] for resource in document["data"]] == ["1"]

    async def test_members_are_fetchable_on_their_own(self, cache_service):
        await cache_service.save_collection("some/url", get_authors_collection(), ["books"])

        document = await cache_service.get_resource("authors.1", ["books"])

        assert [resource["id"] for resource in document["included"]] == ["1", "2"]

    async def test_not_cached_collection_raises(self, cache_service):
        with pytest.raises(NotFoundError):
            await cache_service.get_collection("some/bad/url")

    async def test_resource_key_is_not_a_collection(self, cache_service):
        await cache_service.save_resource(get_author("1"))

        with pytest.raises(NotFoundError):
            await cache_service.get_collection("authors.1")


class TestDeprecation:
    async def test_deprecate_collections_by_prefix(self, cache_service):
        await cache_service.save_collection("books/page/1", ResourceCollection(data=[get_book("1")]))
        await cache_service.save_collection("books/page/2", ResourceCollection(data=[get_book("2")]))
        await cache_service.save_collection("authors/page/1", ResourceCollection(data=[get_author("1")]))

        count = await cache_service.deprecate_collections("books")

        assert count == 2
        for key in ("books/page/1", "books/page/2"):
            document = await cache_service.get_collection(key)
            assert document["meta"]["_cache_updated_at"] == 0
            assert len(document["data"]) == 1
        authors = await cache_service.get_collection("authors/page/1")
        assert authors["meta"]["_cache_updated_at"] > 0

    async def test_deprecate_leaves_resources_untouched(self, cache_service):
        await cache_service.save_collection("books/page/1", ResourceCollection(data=[get_book("1")]))

        await cache_service.deprecate_collections("books")

        document = await cache_service.get_resource("books.1")
        assert document["meta"]["_cache_updated_at"] > 0

    async def test_is_fresh(self, cache_service, book):
        await cache_service.save_collection("books", ResourceCollection(data=[book]))

        fresh = await cache_service.get_collection("books")
        await cache_service.deprecate_collections("")
        stale = await cache_service.get_collection("books")

        assert CacheService.is_fresh(fresh, ttl_seconds=60)
        assert not CacheService.is_fresh(stale, ttl_seconds=60)


class TestAdministration:
    async def test_delete_and_clear(self, cache_service, book):
        await cache_service.save_resource(book, ["author"])

        assert await cache_service.delete("authors.2") is True
        assert await cache_service.delete("authors.2") is False
        assert await cache_service.clear() == 1
        with pytest.raises(NotFoundError):
            await cache_service.get_resource("books.5")

    async def test_stats_and_health(self, cache_service, book):
        await cache_service.save_resource(book, ["author"])

        stats = await cache_service.get_stats()

        assert stats == {"backend": "memory", "total_entries": 2}
        assert await cache_service.is_healthy() is True


async def test_store_write_failure_propagates(book):
    class FailingStore:
        async def set(self, key, record):
            raise ConnectionError("store unavailable")

    cache_service = CacheService(repository=FailingStore())

    with pytest.raises(ConnectionError):
        await cache_service.save_resource(book)
