"""
Product catalog schemas.

A Product is immutable once loaded: the catalog is fixed for the life of
the process and recommendation results are always drawn from it.
"""

from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """A single catalog entry rendered as a product card."""

    model_config = ConfigDict(
        frozen=True,
        allow_inf_nan=False,
        json_schema_extra={
            "examples": [
                {
                    "id": 1,
                    "name": "Nimbus Air 14 Laptop",
                    "category": "Laptops",
                    "price": 54990,
                    "description": "Thin and light 14-inch laptop with 16GB RAM and 512GB SSD.",
                }
            ]
        },
    )

    id: int = Field(..., description="Unique, stable identifier assigned by the catalog")
    name: str = Field(..., min_length=1, description="Display name")
    category: str = Field(..., description="Product category")
    price: Union[int, float] = Field(..., ge=0, description="Price in rupees (non-negative)")
    description: str = Field("", description="Short marketing description")


class ProductListResponse(BaseModel):
    """Response model for GET /products."""

    products: list[Product] = Field(..., description="Full catalog in catalog order")
    count: int = Field(..., ge=0, description="Number of products in the catalog")
