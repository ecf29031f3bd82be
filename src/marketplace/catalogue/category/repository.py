"""Repository for the Category aggregate."""

from protean.exceptions import ObjectNotFoundError

from marketplace.catalogue.category.category import Category
from marketplace.domain import marketplace


@marketplace.repository(part_of=Category)
class CategoryRepository:
    def find_by_name(self, name: str) -> Category | None:
        """First category registered under ``name``."""
        categories = self._dao.query.filter(name=name).all().items
        return categories[0] if categories else None

    def all_categories(self) -> list[Category]:
        return self._dao.query.limit(None).all().items

    def names_by_id(self) -> dict[str, str]:
        return {str(category.id): category.name for category in self.all_categories()}

    def find(self, category_id: str) -> Category | None:
        try:
            return self.get(str(category_id))
        except ObjectNotFoundError:
            return None
