from typing import Optional
from sqlmodel import Field, SQLModel

PLACEHOLDER_IMAGE = "https://via.placeholder.com/400x400"

class Item(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)

    # Basic Info
    name: str = Field(index=True)
    description: str
    category: str = Field(index=True)

    # Pricing
    price: float = Field(ge=0)

    # Images
    image: str = Field(default=PLACEHOLDER_IMAGE)

    # Inventory
    stock: int = Field(default=10)
