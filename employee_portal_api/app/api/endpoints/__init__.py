"""
Endpoint subpackage.

Each module in this package defines an APIRouter for a specific
concern.  The routers are aggregated in ``router.py`` at the package
level and then included in the main application.
"""
