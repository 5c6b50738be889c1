from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlmodel import Session
from pydantic import BaseModel, Field
from storefront.db.session import get_session
from storefront.core.errors import ServerError
from storefront.models.cart import ResolvedCartEntry
from storefront.models.user import User
from storefront.routers.auth import get_current_user
from storefront.services.cart import CartService

router = APIRouter()

class CartItemAdd(BaseModel):
    item_id: int = Field(alias="itemId")
    quantity: int = 1

class CartItemUpdate(BaseModel):
    item_id: int = Field(alias="itemId")
    quantity: int

def get_cart_service(session: Session = Depends(get_session)) -> CartService:
    return CartService(session)

def _user_id(user: Optional[User]) -> int:
    if user is None:
        raise ServerError(error="User not found")
    return user.id

@router.get("", response_model=List[ResolvedCartEntry])
def get_cart(current_user: Optional[User] = Depends(get_current_user), service: CartService = Depends(get_cart_service)):
    """Get user's cart items"""
    return service.get_cart(_user_id(current_user))

@router.post("/add", response_model=List[ResolvedCartEntry])
def add_to_cart(
    cart_item: CartItemAdd,
    current_user: Optional[User] = Depends(get_current_user),
    service: CartService = Depends(get_cart_service)
):
    return service.add_to_cart(_user_id(current_user), cart_item.item_id, cart_item.quantity)

@router.put("/update", response_model=List[ResolvedCartEntry])
def update_cart_item(
    cart_update: CartItemUpdate,
    current_user: Optional[User] = Depends(get_current_user),
    service: CartService = Depends(get_cart_service)
):
    return service.update_cart_item(_user_id(current_user), cart_update.item_id, cart_update.quantity)

@router.delete("/remove/{item_id}", response_model=List[ResolvedCartEntry])
def remove_from_cart(
    item_id: int,
    current_user: Optional[User] = Depends(get_current_user),
    service: CartService = Depends(get_cart_service)
):
    return service.remove_from_cart(_user_id(current_user), item_id)
