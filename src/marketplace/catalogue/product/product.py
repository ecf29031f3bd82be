"""Product aggregate: a sellable item filed under one category."""

from datetime import datetime

from protean.fields import Boolean, DateTime, Float, Identifier, String, Text

from marketplace.domain import marketplace


@marketplace.aggregate(limit=None)
class Product:
    """A catalogue entry with a price and an availability flag.

    The category reference is checked when the product is added and never
    re-validated afterwards.
    """

    title: String(required=True, max_length=255)
    description: Text(required=True)
    price: Float(required=True, min_value=0.0)
    availability: Boolean(default=True)
    category_id: Identifier(required=True)
    created_at: DateTime(default=datetime.now)

    @classmethod
    def add(cls, category_id, title, description, price, availability=True):
        from marketplace.catalogue.product.events import ProductAdded

        now = datetime.now()
        product = cls(
            category_id=category_id,
            title=title,
            description=description,
            price=price,
            availability=availability,
            created_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=product.id,
                category_id=category_id,
                title=title,
                price=price,
                availability=availability,
                created_at=now,
            )
        )
        return product
