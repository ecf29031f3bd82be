"""Domain events for the Category aggregate."""

from protean.fields import DateTime, Identifier, String

from marketplace.domain import marketplace


@marketplace.event(part_of="Category")
class CategoryAdded:
    """A new product category was added to the catalogue."""

    category_id: Identifier(required=True)
    name: String(required=True)
    created_at: DateTime(required=True)
