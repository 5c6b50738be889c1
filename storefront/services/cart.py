from typing import Callable, List, Optional
from sqlalchemy import update
from sqlmodel import Session, select
from storefront.core.errors import ServerError
from storefront.core.logging import get_logger
from storefront.models.cart import CartEntry, ResolvedCartEntry
from storefront.models.item import Item
from storefront.models.user import User

logger = get_logger(__name__)

# Attempts at a conditional cart write before giving up
MAX_CART_WRITE_ATTEMPTS = 3

# A cart mutation returns the new entries, or None when nothing changes
CartMutation = Callable[[List[CartEntry]], Optional[List[CartEntry]]]

class CartService:
    def __init__(self, session: Session):
        self.session = session

    def _load_user(self, user_id: int) -> User:
        user = self.session.get(User, user_id, populate_existing=True)
        if user is None:
            raise ServerError(error="User not found")
        return user

    def resolve_cart(self, user: User) -> List[ResolvedCartEntry]:
        """Cart entries with their item ids replaced by the Item rows."""
        entries = [CartEntry(**entry) for entry in user.cart]
        item_ids = {entry.item for entry in entries}
        items = {}
        if item_ids:
            rows = self.session.exec(select(Item).where(Item.id.in_(item_ids))).all()
            items = {item.id: item for item in rows}
        return [
            ResolvedCartEntry(item=items.get(entry.item), quantity=entry.quantity)
            for entry in entries
        ]

    def _write(self, user_id: int, mutation: CartMutation) -> User:
        # Conditional on cart_version so a concurrent writer cannot be overwritten;
        # on conflict the mutation is re-applied to the fresh cart.
        for attempt in range(1, MAX_CART_WRITE_ATTEMPTS + 1):
            user = self._load_user(user_id)
            new_cart = mutation([CartEntry(**entry) for entry in user.cart])
            if new_cart is None:
                return user

            seen_version = user.cart_version
            result = self.session.exec(
                update(User)
                .where(User.id == user_id, User.cart_version == seen_version)
                .values(
                    cart=[entry.model_dump() for entry in new_cart],
                    cart_version=seen_version + 1,
                )
                .execution_options(synchronize_session=False)
            )
            self.session.commit()
            if result.rowcount == 1:
                logger.debug("Cart of user %s written at version %s", user_id, seen_version + 1)
                return self._load_user(user_id)
            logger.warning("Cart version conflict for user %s (attempt %s)", user_id, attempt)

        raise ServerError(error="Cart was modified concurrently, please retry")

    def get_cart(self, user_id: int) -> List[ResolvedCartEntry]:
        return self.resolve_cart(self._load_user(user_id))

    def add_to_cart(self, user_id: int, item_id: int, quantity: int = 1) -> List[ResolvedCartEntry]:
        """Add item to cart or increase quantity if already there"""
        def add(entries: List[CartEntry]) -> List[CartEntry]:
            for entry in entries:
                if entry.item == item_id:
                    entry.quantity += quantity
                    return entries
            entries.append(CartEntry(item=item_id, quantity=quantity))
            return entries

        return self.resolve_cart(self._write(user_id, add))

    def update_cart_item(self, user_id: int, item_id: int, quantity: int) -> List[ResolvedCartEntry]:
        """Overwrite the quantity of an entry; unknown items are left alone"""
        def set_quantity(entries: List[CartEntry]) -> Optional[List[CartEntry]]:
            for entry in entries:
                if entry.item == item_id:
                    entry.quantity = quantity
                    return entries
            return None

        return self.resolve_cart(self._write(user_id, set_quantity))

    def remove_from_cart(self, user_id: int, item_id: int) -> List[ResolvedCartEntry]:
        """Drop the entry for item_id, if any"""
        def remove(entries: List[CartEntry]) -> Optional[List[CartEntry]]:
            kept = [entry for entry in entries if entry.item != item_id]
            if len(kept) == len(entries):
                return None
            return kept

        return self.resolve_cart(self._write(user_id, remove))
