from typing import List, Optional
from sqlmodel import select
from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement
from storefront.dao.base_dao import BaseDAO
from storefront.models.product import Product, PUBLIC_LIST_FIELDS
import structlog

logger = structlog.get_logger()

LIKE_ESCAPE = "\\"


def escape_like(text: str) -> str:
    """Escape LIKE wildcards so the text is matched literally."""
    return (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def contains_text(column, text: str) -> ColumnElement[bool]:
    """Case-insensitive, unanchored substring match of ``text`` against ``column``."""
    return column.ilike(f"%{escape_like(text)}%", escape=LIKE_ESCAPE)


class ProductDAO(BaseDAO[Product]):
    def __init__(self):
        super().__init__(Product)

    async def list_public(
        self,
        db: AsyncSession,
        *,
        owner_id: Optional[str] = None,
        search_text: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Row]:
        """Page over products in store order, returning only the public list columns."""
        columns = [getattr(Product, field) for field in PUBLIC_LIST_FIELDS]
        query = select(*columns)
        if owner_id is not None:
            query = query.where(Product.owner_id == owner_id)
        if search_text:
            query = query.where(contains_text(Product.name, search_text))
        try:
            result = await db.execute(query.offset(skip).limit(limit))
            return result.all()
        except Exception as e:
            logger.error(
                "Error listing products",
                owner_id=owner_id,
                search_text=search_text,
                skip=skip,
                limit=limit,
                error=str(e),
            )
            raise


product_dao = ProductDAO()
