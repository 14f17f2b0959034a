import logging
from typing import List, Sequence, Union
from sqlalchemy.ext.asyncio import AsyncSession
from bookstore.db.models.scheme import Book
from bookstore.db.repositories.book import BookRepository
from bookstore.schemas.aggregate import AuthorGroup
from bookstore.schemas.book import BookBase, BookCreate
from bookstore.services.grouping import BOOK_GROUP_FIELDS, group_by_author

class BookService:
    def __init__(self, book_repo: BookRepository):
        self.book_repo = book_repo
        self.logger = logging.getLogger(__name__)

    async def create_book(self, book: BookCreate) -> int:
        created = await self.book_repo.create_book(book)
        self.logger.info(f"Created book {created.id} ({created.title!r})")
        return created.id

    async def list_books(self) -> List[Book]:
        return await self.book_repo.get_all()

    async def get_book(self, book_id: Union[int, str]) -> Book:
        return await self.book_repo.get_by_id(book_id)

    async def update_book(self, book_id: Union[int, str], book: BookBase):
        # full replace: fields left out of the form are cleared
        await self.book_repo.replace_by_id(book_id, book.model_dump())
        self.logger.info(f"Replaced book {book_id}")

    async def delete_book(self, book_id: Union[int, str]):
        await self.book_repo.delete_by_id(book_id)
        self.logger.info(f"Deleted book {book_id}")

    async def group_by_author(self, summary_fields: Sequence[str] = BOOK_GROUP_FIELDS) -> List[AuthorGroup]:
        return group_by_author(await self.list_books(), summary_fields)

def get_book_service(session: AsyncSession) -> BookService:
    return BookService(BookRepository(session))
