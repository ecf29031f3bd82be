import pytest
from marketplace.catalogue.category.management import AddCategory
from marketplace.catalogue.product.creation import AddProduct
from protean import current_domain


@pytest.fixture()
def category_id():
    return current_domain.process(AddCategory(name="Electronics"), asynchronous=False)


@pytest.fixture()
def add_product(category_id):
    def _add_product(title="Earbuds", price=59.99):
        return current_domain.process(
            AddProduct(category_id=category_id, title=title, description=f"{title} description", price=price),
            asynchronous=False,
        )

    return _add_product
