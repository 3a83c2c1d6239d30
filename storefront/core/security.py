from dataclasses import dataclass
from jose import JWTError, jwt
from fastapi import HTTPException, status, Depends, Path
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from uuid import UUID
from storefront.core.config import settings
from storefront.core.database import get_async_session
from storefront.core.gates import CurrentUser, has_role, is_product_owner, parse_product_id
from storefront.dao.product_dao import product_dao
from storefront.dao.user_dao import user_dao
from storefront.models.enums import UserRole
from storefront.schemas.product_schemas import ProductUpdateRequest
import structlog

logger = structlog.get_logger()

security = HTTPBearer(auto_error=False)


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized.",
        headers={"WWW-Authenticate": "Bearer"},
    )


def create_access_token(user_id: str) -> str:
    return jwt.encode({"userId": user_id}, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def verify_token(token: str) -> str:
    """Decode the bearer token and return the ``userId`` claim."""
    try:
        payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        logger.warning("JWT validation error", error=str(e))
        raise _unauthorized()

    user_id = payload.get("userId")
    if not user_id:
        logger.warning("Token missing userId")
        raise _unauthorized()
    return str(user_id)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_async_session),
) -> CurrentUser:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise _unauthorized()

    user_id = verify_token(credentials.credentials)
    user = await user_dao.get_by_id(db, user_id)
    if not user:
        logger.warning("Token refers to unknown user", user_id=user_id)
        raise _unauthorized()

    return CurrentUser(id=user.id, email=user.email, role=UserRole(user.role))


def require_role(required_role: Optional[UserRole] = None):
    """Create a dependency that authenticates the caller and checks their role."""

    async def dep(current_user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
        if not has_role(current_user, required_role):
            logger.warning(
                "Role check failed",
                user_id=current_user.id,
                role=current_user.role.value,
                required_role=required_role.value,
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Only {required_role.value}s are allowed.",
            )
        return current_user

    return dep


is_user = require_role()
is_buyer = require_role(UserRole.BUYER)
is_seller = require_role(UserRole.SELLER)


def valid_product_id(id: str = Path(...)) -> UUID:
    product_id = parse_product_id(id)
    if product_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid product id.")
    return product_id


async def ensure_product_owner(db: AsyncSession, current_user: CurrentUser, product_id: UUID) -> None:
    product = await product_dao.get_by_id(db, product_id)
    owner_id = product.owner_id if product else None
    if not is_product_owner(current_user, owner_id):
        logger.warning(
            "Ownership check failed",
            product_id=str(product_id),
            user_id=current_user.id,
        )
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You are not owner of this product.",
        )


async def check_product_ownership(
    current_user: CurrentUser = Depends(is_seller),
    product_id: UUID = Depends(valid_product_id),
    db: AsyncSession = Depends(get_async_session),
) -> UUID:
    await ensure_product_owner(db, current_user, product_id)
    return product_id


@dataclass(frozen=True)
class ProductEdit:
    product_id: UUID
    changes: ProductUpdateRequest


async def check_edit_ownership(
    product: ProductUpdateRequest,
    current_user: CurrentUser = Depends(is_seller),
    product_id: UUID = Depends(valid_product_id),
    db: AsyncSession = Depends(get_async_session),
) -> ProductEdit:
    """Ownership gate for edits; runs only once the body has passed validation."""
    await ensure_product_owner(db, current_user, product_id)
    return ProductEdit(product_id=product_id, changes=product)
