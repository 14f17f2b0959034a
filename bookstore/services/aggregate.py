import logging
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from bookstore.schemas.aggregate import CombinedAuthorRecord
from bookstore.services.book import BookService, get_book_service
from bookstore.services.magazine import MagazineService, get_magazine_service
from bookstore.services.grouping import COMBINED_BOOK_FIELDS, COMBINED_MAGAZINE_FIELDS, merge

class AggregateService:
    def __init__(self, book_service: BookService, magazine_service: MagazineService):
        self.book_service = book_service
        self.magazine_service = magazine_service
        self.logger = logging.getLogger(__name__)

    async def combined_by_author(self) -> List[CombinedAuthorRecord]:
        """Books and magazines per author; fails as a whole if either collection can't be read."""
        book_groups = await self.book_service.group_by_author(COMBINED_BOOK_FIELDS)
        magazine_groups = await self.magazine_service.group_by_author(COMBINED_MAGAZINE_FIELDS)
        combined = merge(book_groups, magazine_groups)
        self.logger.debug(
            f"Merged {len(book_groups)} book authors and {len(magazine_groups)} magazine authors into {len(combined)} records"
        )
        return combined

def get_aggregate_service(session: AsyncSession) -> AggregateService:
    return AggregateService(get_book_service(session), get_magazine_service(session))
