from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from sqlmodel import Session, select
from storefront.models.item import Item

ALL_CATEGORIES = "all"

class ItemFilter(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    category: Optional[str] = None
    min_price: Optional[float] = Field(default=None, alias="minPrice")
    max_price: Optional[float] = Field(default=None, alias="maxPrice")
    search: Optional[str] = None

    # Empty query parameters count as absent
    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and value == "":
            return None
        return value

class CatalogService:
    def __init__(self, session: Session):
        self.session = session

    def list_items(self, filters: ItemFilter) -> List[Item]:
        statement = select(Item)
        if filters.category and filters.category != ALL_CATEGORIES:
            statement = statement.where(Item.category == filters.category)
        if filters.min_price is not None:
            statement = statement.where(Item.price >= filters.min_price)
        if filters.max_price is not None:
            statement = statement.where(Item.price <= filters.max_price)
        if filters.search:
            # literal substring: % and _ in the search text are not wildcards
            statement = statement.where(Item.name.icontains(filters.search, autoescape=True))
        return self.session.exec(statement.order_by(Item.id)).all()
