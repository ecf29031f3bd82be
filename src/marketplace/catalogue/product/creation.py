"""Product creation: command and handler."""

import structlog
from protean import handle
from protean.fields import Boolean, Float, Identifier, String, Text
from protean.utils.globals import current_domain

from marketplace.catalogue.category.category import Category
from marketplace.catalogue.product.product import Product
from marketplace.domain import marketplace

logger = structlog.get_logger(__name__)


@marketplace.command(part_of="Product")
class AddProduct:
    category_id: Identifier(required=True)
    title: String(required=True, max_length=255)
    description: Text(required=True)
    price: Float(required=True, min_value=0.0)
    availability: Boolean(default=True)


@marketplace.command_handler(part_of=Product)
class AddProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        # Raises ObjectNotFoundError for an unknown category
        current_domain.repository_for(Category).get(command.category_id)

        product = Product.add(
            category_id=command.category_id,
            title=command.title,
            description=command.description,
            price=command.price,
            availability=command.availability if command.availability is not None else True,
        )
        current_domain.repository_for(Product).add(product)

        logger.info("Product added", product_id=str(product.id), category_id=str(command.category_id))
        return str(product.id)
