"""Category management: command and handler."""

from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from marketplace.catalogue.category.category import Category
from marketplace.domain import marketplace


@marketplace.command(part_of="Category")
class AddCategory:
    name: String(required=True, max_length=100)


@marketplace.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(AddCategory)
    def add_category(self, command):
        category = Category.create(name=command.name)
        current_domain.repository_for(Category).add(category)
        return str(category.id)
