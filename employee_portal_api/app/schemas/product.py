"""
Pydantic models for the product catalog and its inventory view.
"""

from typing import List

from pydantic import BaseModel, Field


class Product(BaseModel):
    """A seeded catalog entry.  Prices are whole currency units."""

    id: int
    name: str
    price: int
    stock: int = Field(..., description="Quantity on hand")

    model_config = {"frozen": True}


class InventoryItem(BaseModel):
    """Stock of one product and the warehouse holding it."""

    id: int
    product_name: str
    quantity: int
    location: str


class ProductList(BaseModel):
    success: bool = True
    data: List[Product]
    count: int


class InventoryList(BaseModel):
    success: bool = True
    data: List[InventoryItem]
    count: int
