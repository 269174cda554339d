"""
HTML page routes: the landing page and the dashboard.

The login page is served by :mod:`.auth` because it shares the
``/api/login`` path with the credential check.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from employee_portal_api.app.api.deps import get_settings
from employee_portal_api.app.core.config import Settings
from employee_portal_api.app.pages import render_dashboard, render_landing

router = APIRouter()


@router.api_route("/", methods=["GET", "HEAD"], response_class=HTMLResponse)
async def landing_page(settings: Settings = Depends(get_settings)) -> HTMLResponse:
    return HTMLResponse(render_landing(settings.project_name, settings.api_version))


@router.api_route("/dashboard", methods=["GET", "HEAD"], response_class=HTMLResponse)
async def dashboard_page(settings: Settings = Depends(get_settings)) -> HTMLResponse:
    """Static dashboard shell; its script loads data from the JSON routes."""
    return HTMLResponse(render_dashboard(settings.project_name, settings.api_version))
