from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime, timezone
from storefront.models.enums import UserRole


class User(SQLModel, table=True):
    __tablename__ = "user"

    id: str = Field(primary_key=True, nullable=False)
    email: str = Field(nullable=False, unique=True, index=True)
    first_name: Optional[str] = Field(default=None)
    last_name: Optional[str] = Field(default=None)
    role: UserRole = Field(default=UserRole.BUYER, nullable=False)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), nullable=False)
