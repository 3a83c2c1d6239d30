from typing import List
from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from storefront.core.gates import CurrentUser
from storefront.dao.product_dao import product_dao
from storefront.schemas.product_schemas import (
    PaginationRequest,
    ProductCreateRequest,
    ProductDetails,
    ProductListItem,
    ProductUpdateRequest,
)
from uuid import UUID
import structlog

logger = structlog.get_logger()


class ProductService:
    """Product operations.

    Role, id-format and ownership gates have already run by the time any of
    these methods is called; the caller is passed in explicitly.
    """

    def __init__(self):
        self.product_dao = product_dao

    async def add_product(self, db: AsyncSession, product_in: ProductCreateRequest, caller: CurrentUser) -> UUID:
        try:
            product_data = product_in.model_dump()
            # the owner always comes from the authenticated caller
            product_data["owner_id"] = caller.id

            product = await self.product_dao.create(db, obj_in=product_data)
            logger.info("Product created successfully", product_id=str(product.id), owner_id=caller.id)
            return product.id

        except Exception as e:
            logger.error("Error creating product", owner_id=caller.id, error=str(e))
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Product creation failed"
            )

    async def get_product_details(self, db: AsyncSession, product_id: UUID) -> ProductDetails:
        try:
            product = await self.product_dao.get_by_id(db, product_id)
        except Exception as e:
            logger.error("Error getting product", product_id=str(product_id), error=str(e))
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Could not retrieve product"
            )

        if not product:
            logger.warning("Product not found", product_id=str(product_id))
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product does not exist."
            )
        # ProductDetails has no owner field
        return ProductDetails.model_validate(product)

    async def delete_product(self, db: AsyncSession, product_id: UUID, caller: CurrentUser) -> None:
        try:
            deleted = await self.product_dao.delete_by_id(db, id=product_id)
            logger.info("Product delete processed", product_id=str(product_id), user_id=caller.id, deleted=deleted)
        except Exception as e:
            logger.error("Error deleting product", product_id=str(product_id), user_id=caller.id, error=str(e))
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Product deletion failed"
            )

    async def edit_product(
        self, db: AsyncSession, product_id: UUID, product_update: ProductUpdateRequest, caller: CurrentUser
    ) -> None:
        update_data = product_update.to_patch()
        try:
            matched = await self.product_dao.patch(db, id=product_id, values=update_data)
            logger.info(
                "Product update processed",
                product_id=str(product_id),
                user_id=caller.id,
                fields=sorted(update_data),
                matched=matched,
            )
        except Exception as e:
            logger.error("Error updating product", product_id=str(product_id), user_id=caller.id, error=str(e))
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Product update failed"
            )

    async def list_for_buyer(self, db: AsyncSession, pagination: PaginationRequest) -> List[ProductListItem]:
        try:
            rows = await self.product_dao.list_public(
                db,
                search_text=pagination.search_text,
                skip=pagination.skip,
                limit=pagination.limit,
            )
            logger.info("Retrieved products for buyer", count=len(rows), skip=pagination.skip, limit=pagination.limit)
            return [ProductListItem.model_validate(row) for row in rows]
        except Exception as e:
            logger.error("Error getting products for buyer", skip=pagination.skip, limit=pagination.limit, error=str(e))
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Could not retrieve products"
            )

    async def list_for_seller(
        self, db: AsyncSession, pagination: PaginationRequest, caller: CurrentUser
    ) -> List[ProductListItem]:
        try:
            rows = await self.product_dao.list_public(
                db,
                owner_id=caller.id,
                search_text=pagination.search_text,
                skip=pagination.skip,
                limit=pagination.limit,
            )
            logger.info("Retrieved seller products", user_id=caller.id, count=len(rows))
            return [ProductListItem.model_validate(row) for row in rows]
        except Exception as e:
            logger.error("Error getting seller products", user_id=caller.id, error=str(e))
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Could not retrieve user products"
            )


product_service = ProductService()
