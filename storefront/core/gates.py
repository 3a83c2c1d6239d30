"""Precondition checks run before a product handler's body.

Each check is a plain function of the caller (and, where relevant, the
resource) so it can be exercised without a request; ``security`` wraps them
into FastAPI dependencies.
"""
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from storefront.models.enums import UserRole


@dataclass(frozen=True)
class CurrentUser:
    """Authenticated caller, passed explicitly into every product operation."""
    id: str
    email: str
    role: UserRole


def has_role(caller: CurrentUser, required: Optional[UserRole]) -> bool:
    """A ``None`` requirement admits any authenticated user."""
    return required is None or caller.role == required


def is_product_owner(caller: CurrentUser, owner_id: Optional[str]) -> bool:
    """Allow when the caller owns the product.

    ``owner_id`` is ``None`` when no product matched the id; there is nothing
    to protect then, so the caller is let through and the operation becomes a
    no-op.
    """
    return owner_id is None or owner_id == caller.id


def parse_product_id(raw: str) -> Optional[UUID]:
    """Return the id as a UUID, or ``None`` when it is not well formed."""
    try:
        return UUID(raw)
    except (ValueError, TypeError, AttributeError):
        return None
