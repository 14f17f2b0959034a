import logging
from typing import List, Sequence, Union
from sqlalchemy.ext.asyncio import AsyncSession
from bookstore.db.models.scheme import Magazine
from bookstore.db.repositories.magazine import MagazineRepository
from bookstore.schemas.aggregate import AuthorGroup
from bookstore.schemas.magazine import MagazineBase, MagazineCreate
from bookstore.services.grouping import MAGAZINE_GROUP_FIELDS, group_by_author

class MagazineService:
    def __init__(self, magazine_repo: MagazineRepository):
        self.magazine_repo = magazine_repo
        self.logger = logging.getLogger(__name__)

    async def create_magazine(self, magazine: MagazineCreate) -> int:
        created = await self.magazine_repo.create_magazine(magazine)
        self.logger.info(f"Created magazine {created.id} ({created.title!r})")
        return created.id

    async def list_magazines(self) -> List[Magazine]:
        return await self.magazine_repo.get_all()

    async def get_magazine(self, magazine_id: Union[int, str]) -> Magazine:
        return await self.magazine_repo.get_by_id(magazine_id)

    async def update_magazine(self, magazine_id: Union[int, str], magazine: MagazineBase):
        # full replace: fields left out of the form are cleared
        await self.magazine_repo.replace_by_id(magazine_id, magazine.model_dump())
        self.logger.info(f"Replaced magazine {magazine_id}")

    async def delete_magazine(self, magazine_id: Union[int, str]):
        await self.magazine_repo.delete_by_id(magazine_id)
        self.logger.info(f"Deleted magazine {magazine_id}")

    async def group_by_author(self, summary_fields: Sequence[str] = MAGAZINE_GROUP_FIELDS) -> List[AuthorGroup]:
        return group_by_author(await self.list_magazines(), summary_fields)

def get_magazine_service(session: AsyncSession) -> MagazineService:
    return MagazineService(MagazineRepository(session))
