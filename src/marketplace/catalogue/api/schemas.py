"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Request Schemas ---


class AddCategoryRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"name": "Electronics"}]}}

    name: str = Field(..., min_length=1, max_length=100)


class AddProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "title": "Wireless Earbuds",
                    "description": "Noise-isolating Bluetooth earbuds",
                    "price": 59.99,
                    "availability": True,
                }
            ]
        }
    }

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    availability: bool = True


# --- Response Schemas ---


class CategoryResponse(BaseModel):
    id: str
    name: str


class AddCategoryResponse(BaseModel):
    msg: str
    category: CategoryResponse


class ProductResponse(BaseModel):
    id: str
    title: str
    description: str
    price: float
    availability: bool
    category_id: str
    category_name: str | None = None
