"""FastAPI routes for the Catalogue domain: categories and products."""

from fastapi import APIRouter
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from marketplace.catalogue.api.schemas import (
    AddCategoryRequest,
    AddCategoryResponse,
    AddProductRequest,
    CategoryResponse,
    ProductResponse,
)
from marketplace.catalogue.category.category import Category
from marketplace.catalogue.category.management import AddCategory
from marketplace.catalogue.product.cards import product_card, product_cards
from marketplace.catalogue.product.creation import AddProduct
from marketplace.catalogue.product.product import Product

# ---------------------------------------------------------------------------
# Category Router
# ---------------------------------------------------------------------------
category_router = APIRouter(prefix="/categories", tags=["categories"])


@category_router.post("/add", response_model=AddCategoryResponse)
async def add_category(body: AddCategoryRequest) -> AddCategoryResponse:
    category_id = current_domain.process(AddCategory(name=body.name), asynchronous=False)
    category = current_domain.repository_for(Category).get(category_id)
    return AddCategoryResponse(
        msg="New category has been added",
        category=CategoryResponse(**category.to_public_dict()),
    )


@category_router.get("/allcategories", response_model=list[CategoryResponse])
async def all_categories() -> list[CategoryResponse]:
    categories = current_domain.repository_for(Category).all_categories()
    return [CategoryResponse(**category.to_public_dict()) for category in categories]


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.post("/addproduct/{category_id}", response_model=ProductResponse)
async def add_product(category_id: str, body: AddProductRequest) -> ProductResponse:
    command = AddProduct(
        category_id=category_id,
        title=body.title,
        description=body.description,
        price=body.price,
        availability=body.availability,
    )
    product_id = current_domain.process(command, asynchronous=False)
    product = current_domain.repository_for(Product).get(product_id)
    category = current_domain.repository_for(Category).get(category_id)
    return ProductResponse(**product_card(product, category.name))


@product_router.get("/allproducts", response_model=list[ProductResponse])
async def all_products() -> list[ProductResponse]:
    products = current_domain.repository_for(Product).all_products()
    return [ProductResponse(**card) for card in product_cards(products)]


@product_router.get("/details/{product_id}", response_model=ProductResponse)
async def product_details(product_id: str) -> ProductResponse:
    product = current_domain.repository_for(Product).get(product_id)
    category = current_domain.repository_for(Category).find(str(product.category_id))
    return ProductResponse(**product_card(product, category.name if category else None))


@product_router.get("/byCategoryName/{category_name}", response_model=list[ProductResponse])
async def products_by_category_name(category_name: str) -> list[ProductResponse]:
    category = current_domain.repository_for(Category).find_by_name(category_name)
    if category is None:
        raise ObjectNotFoundError("Category not found")

    products = current_domain.repository_for(Product).in_category(str(category.id))
    return [ProductResponse(**product_card(product, category.name)) for product in products]
