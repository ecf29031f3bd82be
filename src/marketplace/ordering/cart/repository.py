"""Repository for the ShoppingCart aggregate."""

from marketplace.domain import marketplace
from marketplace.ordering.cart.cart import ShoppingCart


@marketplace.repository(part_of=ShoppingCart)
class ShoppingCartRepository:
    def for_user(self, user_id: str) -> ShoppingCart | None:
        """The user's cart, or None before the first item is added."""
        carts = self._dao.query.filter(user_id=str(user_id)).all().items
        return carts[0] if carts else None
