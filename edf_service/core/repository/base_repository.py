from typing import Any, Generic, Optional, Type, TypeVar

from loguru import logger
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")


class BaseRepository(Generic[T]):
    def __init__(self, model: Type[T], db: AsyncSession):
        self.model = model
        self.db = db

    async def add(self, db_obj: T) -> T:
        self.db.add(db_obj)
        await self.db.commit()
        await self.db.refresh(db_obj)
        logger.debug(f"{self.model.__name__} stored with id {db_obj.id}")
        return db_obj

    async def get_by_id(self, id: Any) -> Optional[T]:
        return (
            (await self.db.execute(select(self.model).filter(self.model.id == id)))
            .scalars()
            .first()
        )
