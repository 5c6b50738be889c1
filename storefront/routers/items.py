from typing import Annotated, List
from fastapi import APIRouter, Depends, Query
from sqlmodel import Session
from storefront.db.session import get_session
from storefront.models.item import Item
from storefront.services.catalog import CatalogService, ItemFilter

router = APIRouter()

def get_catalog_service(session: Session = Depends(get_session)) -> CatalogService:
    return CatalogService(session)

@router.get("", response_model=List[Item])
def read_items(
    filters: Annotated[ItemFilter, Query()],
    service: CatalogService = Depends(get_catalog_service),
):
    return service.list_items(filters)
