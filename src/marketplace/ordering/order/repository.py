"""Repository for the Order aggregate."""

from marketplace.domain import marketplace
from marketplace.ordering.order.order import Order


@marketplace.repository(part_of=Order)
class OrderRepository:
    def history_for(self, user_id: str) -> list[Order]:
        """Orders placed by ``user_id``, newest first."""
        return (
            self._dao.query.filter(user_id=str(user_id))
            .order_by("-ordered_at")
            .limit(None)
            .all()
            .items
        )
