"""Cart item management: commands and handler.

Commands are addressed by user id; a cart is created lazily on the first add.
"""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from marketplace.catalogue.product.product import Product
from marketplace.domain import marketplace
from marketplace.ordering.cart.cart import ShoppingCart

logger = structlog.get_logger(__name__)


@marketplace.command(part_of="ShoppingCart")
class AddToCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@marketplace.command(part_of="ShoppingCart")
class UpdateCartQuantity:
    user_id = Identifier(required=True)
    item_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@marketplace.command(part_of="ShoppingCart")
class RemoveFromCart:
    user_id = Identifier(required=True)
    item_id = Identifier(required=True)


@marketplace.command_handler(part_of=ShoppingCart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        # Raises ObjectNotFoundError for an unknown product
        current_domain.repository_for(Product).get(command.product_id)

        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.for_user(command.user_id) or ShoppingCart.create(user_id=command.user_id)
        item = cart.add_item(product_id=command.product_id, quantity=command.quantity)
        repo.add(cart)

        logger.info(
            "Cart item added",
            user_id=str(command.user_id),
            product_id=str(command.product_id),
            line_quantity=item.quantity,
        )
        return str(item.id)

    @handle(UpdateCartQuantity)
    def update_cart_quantity(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = self._cart_of(repo, command.user_id)
        cart.update_item_quantity(item_id=command.item_id, new_quantity=command.quantity)
        repo.add(cart)
        return str(command.item_id)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = self._cart_of(repo, command.user_id)
        cart.remove_item(item_id=command.item_id)
        repo.add(cart)

    @staticmethod
    def _cart_of(repo, user_id):
        cart = repo.for_user(user_id)
        if cart is None:
            raise ObjectNotFoundError("Cart item not found")
        return cart
