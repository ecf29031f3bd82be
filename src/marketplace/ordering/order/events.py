"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Identifier, Integer

from marketplace.domain import marketplace


@marketplace.event(part_of="Order")
class OrderPlaced:
    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    line_count = Integer(required=True)
    total_quantity = Integer(required=True)
    ordered_at = DateTime(required=True)
