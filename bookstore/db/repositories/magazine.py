from sqlalchemy.ext.asyncio import AsyncSession
from bookstore.db.models.scheme import Magazine
from bookstore.db.repositories.base import BaseRepository
from bookstore.schemas.magazine import MagazineCreate

class MagazineRepository(BaseRepository[Magazine]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, Magazine, "Magazine")

    async def create_magazine(self, magazine: MagazineCreate) -> Magazine:
        return await self.create(Magazine(**magazine.model_dump()))
