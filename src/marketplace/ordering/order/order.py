"""Order aggregate: an immutable record of a placed cart."""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer

from marketplace.domain import marketplace
from marketplace.ordering.order.events import OrderPlaced


@marketplace.entity(part_of="Order", limit=None)
class OrderLine:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@marketplace.aggregate(limit=None)
class Order:
    user_id = Identifier(required=True)
    lines = HasMany(OrderLine)
    ordered_at = DateTime(required=True)

    @classmethod
    def place(cls, user_id, lines, ordered_at=None):
        """Create an order from ``(product_id, quantity)`` dicts, in cart order."""
        if not lines:
            raise ValidationError({"lines": ["An order must contain at least one line"]})

        ordered_at = ordered_at or datetime.now(UTC)
        order = cls(
            user_id=user_id,
            ordered_at=ordered_at,
            lines=[OrderLine(product_id=line["product_id"], quantity=line["quantity"]) for line in lines],
        )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                user_id=str(user_id),
                line_count=len(order.lines),
                total_quantity=order.total_quantity,
                ordered_at=ordered_at,
            )
        )
        return order

    @property
    def total_quantity(self):
        return sum(line.quantity for line in self.lines)
