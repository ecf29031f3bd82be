"""Pydantic request/response schemas for the Ordering API."""

from pydantic import BaseModel, Field

# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------


class ProductSummary(BaseModel):
    title: str
    price: float
    availability: bool


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
class AddToCartRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [{"product_id": "4f0c9a3e-1d2b-4c5e-9f7a-0b1c2d3e4f5a", "quantity": 2}]
        }
    }

    product_id: str
    quantity: int = Field(ge=1, default=1)
    user_id: str | None = None


class UpdateCartQuantityRequest(BaseModel):
    quantity: int = Field(ge=1)


class CartItemResponse(BaseModel):
    id: str
    user_id: str
    product_id: str
    quantity: int
    product: ProductSummary | None = None


class TotalQuantityResponse(BaseModel):
    totalQuantity: int  # noqa: N815


class StatusResponse(BaseModel):
    status: str = "ok"


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class OrderLineResponse(BaseModel):
    id: str
    product_id: str
    quantity: int
    product: ProductSummary | None = None


class OrderResponse(BaseModel):
    id: str
    user_id: str
    ordered_at: str
    total_quantity: int
    lines: list[OrderLineResponse]
