from typing import Generic, TypeVar, Type, Optional, Any
from sqlmodel import SQLModel, select
from sqlalchemy import update, delete
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

logger = structlog.get_logger()

ModelType = TypeVar("ModelType", bound=SQLModel)


class BaseDAO(Generic[ModelType]):
    def __init__(self, model: Type[ModelType]):
        self.model = model

    async def create(self, db: AsyncSession, *, obj_in: dict) -> ModelType:
        try:
            db_obj = self.model(**obj_in)
            db.add(db_obj)
            await db.commit()
            await db.refresh(db_obj)
            logger.info(f"Created {self.model.__name__}", id=str(db_obj.id))
            return db_obj
        except Exception as e:
            await db.rollback()
            logger.error(f"Error creating {self.model.__name__}", error=str(e))
            raise

    async def get_by_id(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        try:
            result = await db.execute(select(self.model).where(self.model.id == id))
            return result.scalar_one_or_none()
        except Exception as e:
            logger.error(f"Error getting {self.model.__name__} by id", id=str(id), error=str(e))
            raise

    async def patch(self, db: AsyncSession, *, id: Any, values: dict) -> int:
        """Overwrite only the given columns of the row with ``id``; returns rows matched."""
        if not values:
            return 0
        try:
            result = await db.execute(
                update(self.model).where(self.model.id == id).values(**values)
            )
            await db.commit()
            logger.info(f"Patched {self.model.__name__}", id=str(id), fields=sorted(values))
            return result.rowcount
        except Exception as e:
            await db.rollback()
            logger.error(f"Error patching {self.model.__name__}", id=str(id), error=str(e))
            raise

    async def delete_by_id(self, db: AsyncSession, *, id: Any) -> int:
        """Delete the row with ``id`` if present; returns rows deleted."""
        try:
            result = await db.execute(delete(self.model).where(self.model.id == id))
            await db.commit()
            logger.info(f"Deleted {self.model.__name__}", id=str(id), deleted=result.rowcount)
            return result.rowcount
        except Exception as e:
            await db.rollback()
            logger.error(f"Error deleting {self.model.__name__}", id=str(id), error=str(e))
            raise
