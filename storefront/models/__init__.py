# Import all models for easy access
from .enums import UserRole
from .user import User
from .product import Product, ProductBase, PUBLIC_LIST_FIELDS

__all__ = [
    "UserRole",
    "User",
    "Product", "ProductBase", "PUBLIC_LIST_FIELDS",
]
