"""Read side of the cart: enriched lines and totals."""

from protean.utils.globals import current_domain

from marketplace.catalogue.product.cards import product_summaries
from marketplace.ordering.cart.cart import ShoppingCart


def view_cart(user_id):
    """Cart lines for ``user_id`` with product title, price and availability."""
    cart = current_domain.repository_for(ShoppingCart).for_user(user_id)
    if cart is None:
        return []

    summaries = product_summaries(item.product_id for item in cart.items)
    return [cart_line(cart, item, summaries.get(str(item.product_id))) for item in cart.items]


def cart_line(cart, item, product=None):
    return {
        "id": str(item.id),
        "user_id": str(cart.user_id),
        "product_id": str(item.product_id),
        "quantity": item.quantity,
        "product": product,
    }


def total_quantity(user_id):
    cart = current_domain.repository_for(ShoppingCart).for_user(user_id)
    return cart.total_quantity if cart is not None else 0
