"""
Product catalog endpoints.

Both routes dump the whole seeded catalog; there is no paging or
filtering.
"""

from fastapi import APIRouter, Depends

from employee_portal_api.app.api.deps import SeedData, get_seed_data
from employee_portal_api.app.schemas.product import InventoryList, ProductList
from employee_portal_api.app.services.product_service import ProductService

router = APIRouter()


@router.api_route("/products", methods=["GET", "HEAD"], response_model=ProductList)
async def list_products(seed: SeedData = Depends(get_seed_data)) -> ProductList:
    return ProductService.list_products(seed)


@router.api_route("/inventory", methods=["GET", "HEAD"], response_model=InventoryList)
async def list_inventory(seed: SeedData = Depends(get_seed_data)) -> InventoryList:
    """Return stock quantity and warehouse location for each product."""
    return ProductService.list_inventory(seed)
