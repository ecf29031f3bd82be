"""Read side of orders: history and details with product summaries."""

from protean.utils.globals import current_domain

from marketplace.catalogue.product.cards import product_summaries
from marketplace.ordering.order.order import Order


def order_view(order, summaries=None):
    if summaries is None:
        summaries = product_summaries(line.product_id for line in order.lines)

    return {
        "id": str(order.id),
        "user_id": str(order.user_id),
        "ordered_at": order.ordered_at.isoformat(),
        "total_quantity": order.total_quantity,
        "lines": [
            {
                "id": str(line.id),
                "product_id": str(line.product_id),
                "quantity": line.quantity,
                "product": summaries.get(str(line.product_id)),
            }
            for line in order.lines
        ],
    }


def order_history(user_id):
    orders = current_domain.repository_for(Order).history_for(user_id)
    summaries = product_summaries(line.product_id for order in orders for line in order.lines)
    return [order_view(order, summaries) for order in orders]


def order_details(order_id):
    """Raises ObjectNotFoundError for an unknown order."""
    return current_domain.repository_for(Order).get(order_id)
