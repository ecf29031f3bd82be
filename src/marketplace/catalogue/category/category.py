"""Category aggregate root for grouping products."""

from datetime import datetime

from protean.fields import DateTime, String

from marketplace.domain import marketplace


@marketplace.aggregate(limit=None)
class Category:
    """A named bucket of products. Names are unique by convention only."""

    name: String(required=True, max_length=100)
    created_at: DateTime(default=datetime.now)

    @classmethod
    def create(cls, name):
        from marketplace.catalogue.category.events import CategoryAdded

        now = datetime.now()
        category = cls(name=name.strip(), created_at=now)
        category.raise_(CategoryAdded(category_id=category.id, name=category.name, created_at=now))
        return category

    def to_public_dict(self):
        return {"id": str(self.id), "name": self.name}
