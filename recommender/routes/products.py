"""
Catalog route.

Read-only listing of the full product catalog, in catalog order.
"""

from fastapi import APIRouter, Depends

from recommender.catalog import Catalog
from recommender.dependencies import get_catalog_dependency
from recommender.schemas.products import ProductListResponse

router = APIRouter(
    prefix="/products",
    tags=["products"]
)


@router.get(
    "",
    response_model=ProductListResponse,
    summary="List catalog products",
)
async def list_products(
    catalog: Catalog = Depends(get_catalog_dependency)
) -> ProductListResponse:
    return ProductListResponse(products=list(catalog), count=len(catalog))
