import logging
from typing import Any, Callable, Generic, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import StorageReadError
from app.models.orm.base import Base

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Shared read helpers for single-table repositories."""

    read_error_detail = "Error reading data"

    def __init__(self, session_factory: Callable[..., Any], model: Type[ModelType]) -> None:
        self.session_factory = session_factory
        self.model = model

    async def read_all(self) -> List[ModelType]:
        """Every row of the table, in primary key order."""
        try:
            async with self.session_factory() as session:
                result = await session.execute(select(self.model).order_by(self.model.id))
                return list(result.scalars().all())
        except SQLAlchemyError:
            logger.exception("[DB] failed to read %s", self.model.__tablename__)
            raise StorageReadError(detail=self.read_error_detail)

    async def _find_one(self, session: AsyncSession, **filters: Any) -> Optional[ModelType]:
        result = await session.execute(select(self.model).filter_by(**filters))
        return result.scalar_one_or_none()
