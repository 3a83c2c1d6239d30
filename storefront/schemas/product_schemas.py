from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List
from uuid import UUID

from storefront.core.config import settings


class ProductCreateRequest(BaseModel):
    """Seller-supplied product fields. Unknown keys such as ``ownerId`` are dropped."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True, extra="ignore")

    name: str = Field(min_length=1, max_length=55)
    brand: str = Field(min_length=1, max_length=55)
    price: float = Field(ge=0)
    image: Optional[str] = None
    category: Optional[str] = None
    quantity: int = Field(default=1, ge=1)
    free_shipping: bool = Field(default=False, alias="freeShipping")
    description: Optional[str] = Field(default=None, max_length=1000)


class ProductUpdateRequest(BaseModel):
    """Partial product update; only the keys present in the body are applied."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True, extra="ignore")

    name: Optional[str] = Field(default=None, min_length=1, max_length=55)
    brand: Optional[str] = Field(default=None, min_length=1, max_length=55)
    price: Optional[float] = Field(default=None, ge=0)
    image: Optional[str] = None
    category: Optional[str] = None
    quantity: Optional[int] = Field(default=None, ge=1)
    free_shipping: Optional[bool] = Field(default=None, alias="freeShipping")
    description: Optional[str] = Field(default=None, max_length=1000)

    @field_validator("name", "brand", "price", "quantity", "free_shipping")
    @classmethod
    def reject_null(cls, value):
        # these columns are NOT NULL, so an explicit null cannot be patched in
        if value is None:
            raise ValueError("must not be null")
        return value

    def to_patch(self) -> dict:
        return self.model_dump(exclude_unset=True)


class PaginationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    page: int = Field(ge=1)
    limit: int = Field(ge=1)
    search_text: Optional[str] = Field(default=None, alias="searchText")

    @field_validator("limit")
    @classmethod
    def cap_limit(cls, value: int) -> int:
        if value > settings.max_page_size:
            raise ValueError(f"limit must be less than or equal to {settings.max_page_size}")
        return value

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


class ProductDetails(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    name: str
    brand: str
    price: float
    image: Optional[str]
    category: Optional[str]
    quantity: int
    free_shipping: bool = Field(alias="freeShipping")
    description: Optional[str]


class ProductListItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    price: float
    brand: str
    image: Optional[str]


class MessageResponse(BaseModel):
    message: str


class ProductDetailsResponse(MessageResponse):
    product: ProductDetails


class ProductListResponse(MessageResponse):
    products: List[ProductListItem]
