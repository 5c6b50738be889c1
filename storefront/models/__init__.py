# Import all models to register them with SQLModel
from storefront.models.user import User, UserPublic
from storefront.models.item import Item, PLACEHOLDER_IMAGE
from storefront.models.cart import CartEntry, ResolvedCartEntry

__all__ = [
    "User",
    "UserPublic",
    "Item",
    "PLACEHOLDER_IMAGE",
    "CartEntry",
    "ResolvedCartEntry",
]
