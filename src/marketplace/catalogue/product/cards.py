"""Read helpers shaping products for API responses and other contexts."""

from protean.utils.globals import current_domain

from marketplace.catalogue.category.category import Category
from marketplace.catalogue.product.product import Product


def product_card(product, category_name=None):
    return {
        "id": str(product.id),
        "title": product.title,
        "description": product.description,
        "price": product.price,
        "availability": product.availability,
        "category_id": str(product.category_id),
        "category_name": category_name,
    }


def product_cards(products):
    """Cards for ``products`` with their category names resolved."""
    names = current_domain.repository_for(Category).names_by_id()
    return [product_card(p, names.get(str(p.category_id))) for p in products]


def product_summaries(product_ids):
    """Map each id to ``{title, price, availability}``, or None if the product is gone."""
    repo = current_domain.repository_for(Product)
    summaries = {}
    for product_id in {str(pid) for pid in product_ids}:
        product = repo.find(product_id)
        summaries[product_id] = (
            {"title": product.title, "price": product.price, "availability": product.availability}
            if product is not None
            else None
        )
    return summaries
