"""FastAPI dependencies."""

from typing import Callable, Type, TypeVar

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from .database import get_db
from .registry import get_service_factory
from .services.base import BaseService

T = TypeVar("T", bound=BaseService)


def get_service(service_class: Type[T]) -> Callable[[AsyncSession], T]:
    """Dependency injector for services.

    Args:
        service_class: The service class to get an instance of

    Returns:
        A callable that creates a service instance
    """

    def get_instance(db: AsyncSession = Depends(get_db)) -> T:
        factory = get_service_factory(service_class)
        return factory(db)

    return get_instance
