from sqlmodel import SQLModel, Field
from typing import Optional
import uuid


class ProductBase(SQLModel):
    name: str = Field(index=True, max_length=55)
    brand: str = Field(max_length=55)
    price: float = Field(ge=0)
    image: Optional[str] = None
    category: Optional[str] = None
    quantity: int = Field(default=1, ge=1)
    free_shipping: bool = Field(default=False)
    description: Optional[str] = Field(default=None, max_length=1000)


class Product(ProductBase, table=True):
    __tablename__ = "product"

    id: Optional[uuid.UUID] = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
        nullable=False
    )
    owner_id: str = Field(foreign_key="user.id", index=True, nullable=False)


# Columns a list query is allowed to return
PUBLIC_LIST_FIELDS = ("name", "price", "brand", "image")
