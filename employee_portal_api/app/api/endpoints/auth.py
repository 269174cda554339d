"""
Login endpoints.

``GET /api/login`` serves the login form.  ``POST /api/login`` checks
a JSON body ``{"username": ..., "password": ...}`` against the seeded
accounts.

Only JSON bodies are read: a request whose ``Content-Type`` is not
``application/json`` (or a ``+json`` type) carries no credentials.
The body is parsed permissively: invalid JSON, an empty body or a
JSON value that is not an object is treated as a request with no
credentials, which then fails the check with 401 like any other wrong
password.  Declaring a pydantic body model here would turn those cases
into 422 validation errors, so the body is read by hand.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse

from employee_portal_api.app.api.deps import SeedData, get_seed_data, get_settings
from employee_portal_api.app.core.config import Settings
from employee_portal_api.app.pages import render_login
from employee_portal_api.app.schemas.account import ErrorResponse, LoginResponse
from employee_portal_api.app.services.account_service import AccountService

router = APIRouter()
logger = logging.getLogger(__name__)


def is_json_request(request: Request) -> bool:
    media_type = request.headers.get("content-type", "").split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


async def read_credentials(request: Request) -> Dict[str, Any]:
    """Return the JSON object in the request body, or ``{}``."""
    if not is_json_request(request):
        logger.debug("Ignoring login body with content type %r", request.headers.get("content-type"))
        return {}
    try:
        body = await request.json()
    except ValueError:
        logger.debug("Ignoring malformed login body")
        return {}
    if not isinstance(body, dict):
        return {}
    return body


@router.api_route("/login", methods=["GET", "HEAD"], response_class=HTMLResponse)
async def login_page(settings: Settings = Depends(get_settings)) -> HTMLResponse:
    return HTMLResponse(render_login(settings.project_name))


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse}},
)
async def login(request: Request, seed: SeedData = Depends(get_seed_data)) -> LoginResponse:
    credentials = await read_credentials(request)
    return AccountService.login(seed, credentials.get("username"), credentials.get("password"))
