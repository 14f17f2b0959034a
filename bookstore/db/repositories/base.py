import asyncio
from sqlalchemy import select, update, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any, Awaitable, Dict, Optional, List, TypeVar, Generic, Type, Union
from bookstore.core.errors import NotFound, StorageFailure

T = TypeVar('T')
R = TypeVar('R')

# upper bound of a 32-bit integer key column
MAX_ID = 2**31 - 1

class BaseRepository(Generic[T]):
    """
    Store operations shared by every collection.

    Driver and timeout errors leave this class as StorageFailure; a missed
    identifier on read or replace leaves it as NotFound.
    """

    def __init__(self, session: AsyncSession, model: Type[T], kind: str):
        self.session = session
        self.model = model
        self.kind = kind

    @property
    def timeout(self) -> Optional[float]:
        return self.session.info.get("store_timeout")

    async def _execute(self, operation: Awaitable[R]) -> R:
        try:
            return await asyncio.wait_for(operation, self.timeout)
        except asyncio.TimeoutError as e:
            raise StorageFailure(f"{self.kind} store call timed out after {self.timeout}s") from e
        except (SQLAlchemyError, OSError) as e:
            raise StorageFailure(f"{self.kind} store call failed: {e}") from e

    @staticmethod
    def _parse_id(id: Union[int, str]) -> Optional[int]:
        # ids are store-assigned integers; anything else names no record
        try:
            key = int(id)
        except (TypeError, ValueError):
            return None
        return key if 0 < key <= MAX_ID else None

    async def create(self, obj: T) -> T:
        async def _create():
            self.session.add(obj)
            await self.session.commit()
            await self.session.refresh(obj)
            return obj
        return await self._execute(_create())

    async def get_by_id(self, id: Union[int, str]) -> T:
        key = self._parse_id(id)
        if key is None:
            raise NotFound(self.kind, id)
        obj = await self._execute(self.session.get(self.model, key))
        if obj is None:
            raise NotFound(self.kind, id)
        return obj

    async def get_all(self) -> List[T]:
        async def _get_all():
            result = await self.session.execute(select(self.model).order_by(self.model.id))
            return list(result.scalars().all())
        return await self._execute(_get_all())

    async def replace_by_id(self, id: Union[int, str], fields: Dict[str, Any]) -> None:
        key = self._parse_id(id)
        if key is None:
            raise NotFound(self.kind, id)

        async def _replace():
            statement = (
                update(self.model)
                .where(self.model.id == key)
                .values(**fields)
                .execution_options(synchronize_session=False)
            )
            result = await self.session.execute(statement)
            if result.rowcount == 0:
                await self.session.rollback()
                raise NotFound(self.kind, id)
            await self.session.commit()
        await self._execute(_replace())

    async def delete_by_id(self, id: Union[int, str]) -> None:
        # deleting a missing id is a no-op
        key = self._parse_id(id)
        if key is None:
            return

        async def _delete():
            statement = delete(self.model).where(self.model.id == key).execution_options(synchronize_session=False)
            await self.session.execute(statement)
            await self.session.commit()
        await self._execute(_delete())
