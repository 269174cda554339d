"""
Static seed data for the demo service.

Accounts and products are literal constants built once when the
application is created and attached to ``app.state``.  Route handlers
receive them through the :func:`get_seed_data` dependency instead of
importing module globals.  Collections are tuples of frozen models, so
nothing can add, remove or change a record while the process runs.
"""

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional, Tuple
from types import MappingProxyType

from fastapi import Request

from ..schemas.account import Account
from ..schemas.product import Product


DEFAULT_LOCATION = "倉庫A"


@dataclass(frozen=True)
class SeedData:
    """Read‑only accounts, products and product warehouse locations."""

    accounts: Tuple[Account, ...]
    products: Tuple[Product, ...]
    locations: Mapping[int, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        usernames = [a.username for a in self.accounts]
        if len(set(usernames)) != len(usernames):
            raise ValueError("Duplicate username in seed accounts")
        ids = [p.id for p in self.products]
        if len(set(ids)) != len(ids):
            raise ValueError("Duplicate id in seed products")

    def location_of(self, product_id: int) -> str:
        return self.locations.get(product_id, DEFAULT_LOCATION)


def build_seed_data(
    accounts: Iterable[dict],
    products: Iterable[dict],
    locations: Optional[Mapping[int, str]] = None,
) -> SeedData:
    """Validate raw records and freeze them into a :class:`SeedData`."""
    return SeedData(
        accounts=tuple(Account(**a) for a in accounts),
        products=tuple(Product(**p) for p in products),
        locations=MappingProxyType(dict(locations or {})),
    )


def default_seed_data() -> SeedData:
    return build_seed_data(
        accounts=[
            {"username": "test", "password": "123456", "name": "測試員工"},
            {"username": "admin", "password": "admin123", "name": "管理員"},
        ],
        products=[
            {"id": 1, "name": "筆記本電腦", "price": 25000, "stock": 50},
            {"id": 2, "name": "辦公椅", "price": 3500, "stock": 20},
        ],
        locations={1: "倉庫A", 2: "倉庫B"},
    )


def get_seed_data(request: Request) -> SeedData:
    """FastAPI dependency returning the seed data of the running app."""
    return request.app.state.seed_data
