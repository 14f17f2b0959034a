import asyncio
from datetime import date
from types import SimpleNamespace

import pytest

from bookstore.core.errors import StorageFailure
from bookstore.schemas.aggregate import Known
from bookstore.services.aggregate import AggregateService
from bookstore.services.book import BookService
from bookstore.services.magazine import MagazineService


class StubRepository:
    def __init__(self, records=(), error=None):
        self.records = list(records)
        self.error = error

    async def get_all(self):
        if self.error:
            raise self.error
        return self.records


def _service(books=(), magazines=(), magazine_error=None):
    return AggregateService(
        BookService(StubRepository(books)),
        MagazineService(StubRepository(magazines, magazine_error)),
    )


class TestGroupByAuthor:
    def test_book_groups_keep_title_and_isbn(self) -> None:
        service = BookService(StubRepository([
            SimpleNamespace(author="A", title="X", isbn="1", publish_date=date(2001, 1, 1)),
        ]))

        [group] = asyncio.run(service.group_by_author())

        assert group.items == [{"title": "X", "isbn": "1"}]

    def test_magazine_groups_keep_title_and_isbn(self) -> None:
        service = MagazineService(StubRepository([
            SimpleNamespace(author="A", title="M", isbn="9", issue="3", publish_date=None),
        ]))

        [group] = asyncio.run(service.group_by_author())

        assert group.items == [{"title": "M", "isbn": "9"}]


class TestCombinedByAuthor:
    def test_combined_summaries(self) -> None:
        published = date(1999, 9, 9)
        service = _service(
            books=[SimpleNamespace(author="A", title="X", isbn="1", publish_date=published)],
            magazines=[SimpleNamespace(author="A", title="M", isbn="9", issue="3", publish_date=published)],
        )

        [record] = asyncio.run(service.combined_by_author())

        assert record.author == Known("A")
        assert record.books == [{"title": "X", "isbn": "1", "publish_date": published}]
        assert record.magazines == [{"title": "M", "issue": "3", "publish_date": published}]

    def test_magazine_failure_fails_whole_view(self) -> None:
        service = _service(
            books=[SimpleNamespace(author="A", title="X", isbn="1", publish_date=None)],
            magazine_error=StorageFailure("Magazine store call failed"),
        )

        with pytest.raises(StorageFailure):
            asyncio.run(service.combined_by_author())
