"""Domain events for the Product aggregate."""

from protean.fields import Boolean, DateTime, Float, Identifier, String

from marketplace.domain import marketplace


@marketplace.event(part_of="Product")
class ProductAdded:
    """A product was added to a category."""

    product_id: Identifier(required=True)
    category_id: Identifier(required=True)
    title: String(required=True)
    price: Float(required=True)
    availability: Boolean(required=True)
    created_at: DateTime(required=True)
