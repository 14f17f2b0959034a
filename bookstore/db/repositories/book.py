from sqlalchemy.ext.asyncio import AsyncSession
from bookstore.db.models.scheme import Book
from bookstore.db.repositories.base import BaseRepository
from bookstore.schemas.book import BookCreate

class BookRepository(BaseRepository[Book]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, Book, "Book")

    async def create_book(self, book: BookCreate) -> Book:
        return await self.create(Book(**book.model_dump()))
