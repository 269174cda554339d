"""
Request path normalisation.

Browser clients of the demo were written against a server that
matches routes case‑insensitively and tolerates one trailing slash,
so ``/HEALTH`` and ``/api/products/`` reach the same handlers as
``/health`` and ``/api/products``.  :class:`PathNormalizationMiddleware`
rewrites the request path before routing; all route paths of the
service are lower case.
"""

from starlette.types import ASGIApp, Receive, Scope, Send


def normalize_path(path: str) -> str:
    """Lower‑case ``path`` and drop a single trailing slash (except for ``/``)."""
    if len(path) > 1 and path.endswith("/"):
        path = path[:-1]
    return path.lower()


class PathNormalizationMiddleware:
    """Pure ASGI middleware applying :func:`normalize_path` to HTTP requests."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            path = normalize_path(scope["path"])
            if path != scope["path"]:
                scope = dict(scope, path=path)
        await self.app(scope, receive, send)
