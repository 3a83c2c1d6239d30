from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from storefront.core.database import get_async_session
from storefront.core.gates import CurrentUser
from storefront.core.security import (
    ProductEdit,
    check_edit_ownership,
    check_product_ownership,
    is_buyer,
    is_seller,
    is_user,
    valid_product_id,
)
from storefront.schemas.product_schemas import (
    MessageResponse,
    PaginationRequest,
    ProductCreateRequest,
    ProductDetailsResponse,
    ProductListResponse,
)
from storefront.services.product_service import product_service
from uuid import UUID
import structlog

logger = structlog.get_logger()

router = APIRouter(prefix="/product", tags=["Products"])


@router.post("/add", response_model=MessageResponse)
async def add_product(
    product: ProductCreateRequest,
    current_user: CurrentUser = Depends(is_seller),
    db: AsyncSession = Depends(get_async_session),
):
    """Create a product owned by the calling seller"""
    await product_service.add_product(db, product, current_user)
    return {"message": "Product is added successfully."}


@router.get("/details/{id}", response_model=ProductDetailsResponse)
async def get_product_details(
    current_user: CurrentUser = Depends(is_user),
    product_id: UUID = Depends(valid_product_id),
    db: AsyncSession = Depends(get_async_session),
):
    product = await product_service.get_product_details(db, product_id)
    return {"message": "success", "product": product}


@router.delete("/delete/{id}", response_model=MessageResponse)
async def delete_product(
    current_user: CurrentUser = Depends(is_seller),
    product_id: UUID = Depends(check_product_ownership),
    db: AsyncSession = Depends(get_async_session),
):
    await product_service.delete_product(db, product_id, current_user)
    return {"message": "Product is deleted successfully."}


@router.put("/edit/{id}", response_model=MessageResponse)
async def edit_product(
    current_user: CurrentUser = Depends(is_seller),
    edit: ProductEdit = Depends(check_edit_ownership),
    db: AsyncSession = Depends(get_async_session),
):
    """Apply the supplied fields to a product owned by the calling seller"""
    await product_service.edit_product(db, edit.product_id, edit.changes, current_user)
    return {"message": "Product is updated successfully."}


@router.post("/buyer/list", response_model=ProductListResponse)
async def list_products_for_buyer(
    pagination: PaginationRequest,
    current_user: CurrentUser = Depends(is_buyer),
    db: AsyncSession = Depends(get_async_session),
):
    products = await product_service.list_for_buyer(db, pagination)
    return {"message": "success", "products": products}


@router.post("/seller/list", response_model=ProductListResponse)
async def list_products_for_seller(
    pagination: PaginationRequest,
    current_user: CurrentUser = Depends(is_seller),
    db: AsyncSession = Depends(get_async_session),
):
    """List only the calling seller's products"""
    products = await product_service.list_for_seller(db, pagination, current_user)
    return {"message": "success", "products": products}
