# Export all DAO classes
from .base_dao import BaseDAO
from .user_dao import user_dao
from .product_dao import product_dao

__all__ = [
    "BaseDAO",
    "user_dao",
    "product_dao",
]
