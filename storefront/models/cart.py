from typing import Optional
from pydantic import BaseModel
from storefront.models.item import Item

class CartEntry(BaseModel):
    """One line of a user's cart as stored on the user row."""
    item: int
    quantity: int = 1

class ResolvedCartEntry(BaseModel):
    # item is None when the referenced item no longer exists
    item: Optional[Item] = None
    quantity: int
