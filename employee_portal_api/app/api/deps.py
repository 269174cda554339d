"""Request dependencies shared by the endpoint modules."""

from fastapi import Request

from ..core.config import Settings
from ..core.seed import SeedData, get_seed_data

__all__ = ["get_settings", "get_seed_data", "SeedData"]


def get_settings(request: Request) -> Settings:
    """Return the settings the running application was created with."""
    return request.app.state.settings
