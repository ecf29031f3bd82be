"""Repository for the Product aggregate."""

from protean.exceptions import ObjectNotFoundError

from marketplace.catalogue.product.product import Product
from marketplace.domain import marketplace


@marketplace.repository(part_of=Product)
class ProductRepository:
    def all_products(self) -> list[Product]:
        return self._dao.query.limit(None).all().items

    def in_category(self, category_id: str) -> list[Product]:
        return self._dao.query.filter(category_id=str(category_id)).limit(None).all().items

    def find(self, product_id: str) -> Product | None:
        """Product by id, or None when it no longer exists."""
        try:
            return self.get(str(product_id))
        except ObjectNotFoundError:
            return None
