from abc import ABC, abstractmethod

from sqlalchemy.ext.asyncio import AsyncSession


class BaseService(ABC):
    """Base class for all services."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @classmethod
    @abstractmethod
    def from_db(cls, db: AsyncSession) -> "BaseService":
        """Factory method to create service instance."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the service is healthy."""
        pass
