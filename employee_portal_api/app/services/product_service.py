"""
Service layer for the product catalog.

The catalog is a fixed tuple of products.  The inventory view maps
each product to its stock quantity and the warehouse that holds it.
"""

from typing import List

from employee_portal_api.app.core.seed import SeedData
from employee_portal_api.app.schemas.product import InventoryItem, InventoryList, ProductList


class ProductService:
    """Service class for products and inventory."""

    @staticmethod
    def list_products(seed: SeedData) -> ProductList:
        data = list(seed.products)
        return ProductList(data=data, count=len(data))

    @staticmethod
    def list_inventory(seed: SeedData) -> InventoryList:
        items: List[InventoryItem] = [
            InventoryItem(
                id=p.id,
                product_name=p.name,
                quantity=p.stock,
                location=seed.location_of(p.id),
            )
            for p in seed.products
        ]
        return InventoryList(data=items, count=len(items))
