"""Shopping Cart aggregate: one cart per user, converted to an Order at checkout.

Each product appears on at most one line. Adding a product that is already in
the cart increases that line's quantity instead of creating a second line.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer

from marketplace.domain import marketplace
from marketplace.ordering.cart.events import (
    CartCheckedOut,
    CartItemAdded,
    CartItemRemoved,
    CartQuantityUpdated,
)

EMPTY_CART_MESSAGE = "Cart is empty. Add products to your cart before placing an order."


@marketplace.entity(part_of="ShoppingCart", limit=None)
class CartItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()


@marketplace.aggregate(limit=None)
class ShoppingCart:
    user_id = Identifier(required=True, unique=True)
    items = HasMany(CartItem)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def one_line_per_product(self):
        product_ids = [str(item.product_id) for item in self.items]
        if len(product_ids) != len(set(product_ids)):
            raise ValidationError({"items": ["A product can appear only once in a cart"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, user_id):
        now = datetime.now(UTC)
        return cls(user_id=user_id, created_at=now, updated_at=now)

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    @property
    def total_quantity(self):
        return sum(item.quantity for item in self.items)

    def find_item(self, item_id):
        return next((i for i in self.items if str(i.id) == str(item_id)), None)

    def _require_item(self, item_id):
        item = self.find_item(item_id)
        if item is None:
            raise ObjectNotFoundError("Cart item not found")
        return item

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(self, product_id, quantity):
        """Add ``quantity`` of a product, merging into an existing line."""
        if quantity is None or quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})

        existing = next((i for i in self.items if str(i.product_id) == str(product_id)), None)
        now = datetime.now(UTC)

        if existing:
            existing.quantity += quantity
            item = existing
        else:
            item = CartItem(product_id=product_id, quantity=quantity, added_at=now)
            self.add_items(item)

        self.updated_at = now

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                user_id=str(self.user_id),
                item_id=str(item.id),
                product_id=str(product_id),
                quantity=quantity,
                line_quantity=item.quantity,
            )
        )
        return item

    def update_item_quantity(self, item_id, new_quantity):
        """Overwrite the quantity of an existing line."""
        if new_quantity is None or new_quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})

        item = self._require_item(item_id)
        previous_quantity = item.quantity
        item.quantity = new_quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartQuantityUpdated(
                cart_id=str(self.id),
                item_id=str(item_id),
                previous_quantity=previous_quantity,
                new_quantity=new_quantity,
            )
        )
        return item

    def remove_item(self, item_id):
        item = self._require_item(item_id)
        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(CartItemRemoved(cart_id=str(self.id), item_id=str(item_id)))

    # -------------------------------------------------------------------
    # Checkout
    # -------------------------------------------------------------------
    def checkout(self):
        """Empty the cart and return its lines as ``(product_id, quantity)`` dicts.

        The snapshot and the clearing happen on the same aggregate instance, so
        persisting it commits exactly the lines that were ordered.
        """
        if not self.items:
            raise ValidationError({"cart": [EMPTY_CART_MESSAGE]})

        snapshot = [{"product_id": str(item.product_id), "quantity": item.quantity} for item in self.items]

        for item in list(self.items):
            self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartCheckedOut(
                cart_id=str(self.id),
                user_id=str(self.user_id),
                line_count=len(snapshot),
                total_quantity=sum(line["quantity"] for line in snapshot),
            )
        )
        return snapshot
