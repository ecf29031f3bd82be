"""Place an order from the user's cart.

The order and the emptied cart are written by the same handler, so they share
one unit of work: either both commit or neither does.
"""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.ordering.cart.cart import EMPTY_CART_MESSAGE, ShoppingCart
from marketplace.ordering.order.order import Order

logger = structlog.get_logger(__name__)


@marketplace.command(part_of="Order")
class PlaceOrder:
    user_id = Identifier(required=True)


@marketplace.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        cart_repo = current_domain.repository_for(ShoppingCart)
        cart = cart_repo.for_user(command.user_id)
        if cart is None:
            raise ValidationError({"cart": [EMPTY_CART_MESSAGE]})

        lines = cart.checkout()
        order = Order.place(user_id=command.user_id, lines=lines)

        current_domain.repository_for(Order).add(order)
        cart_repo.add(cart)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            user_id=str(command.user_id),
            line_count=len(lines),
            total_quantity=order.total_quantity,
        )
        return str(order.id)
