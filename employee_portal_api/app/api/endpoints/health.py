"""
Health check endpoints.

``/health`` reports that the process is up, the running version and
the current UTC time.  ``/api/health`` is an alias kept for clients
that look for the health check under the API prefix.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from employee_portal_api.app.api.deps import get_settings
from employee_portal_api.app.core.config import Settings
from employee_portal_api.app.schemas.health import HealthStatus

router = APIRouter()


def utc_timestamp() -> str:
    """Current UTC time as ISO‑8601 with milliseconds and a ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.api_route("/health", methods=["GET", "HEAD"], response_model=HealthStatus)
@router.api_route("/api/health", methods=["GET", "HEAD"], response_model=HealthStatus, include_in_schema=False)
async def health(settings: Settings = Depends(get_settings)) -> HealthStatus:
    return HealthStatus(status="healthy", version=settings.api_version, timestamp=utc_timestamp())
