"""
API package containing the HTTP routes.

Each module in ``endpoints`` defines an ``APIRouter`` for one concern
(health, pages, products, login).  The routers are aggregated in
``router.py`` and included in the application by ``create_app``.
"""
