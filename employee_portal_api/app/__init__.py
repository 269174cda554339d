"""
Application package initializer.

This package contains the main entrypoint for the demo service and
its submodules: configuration and seed data in ``core``, pydantic
models in ``schemas``, the login and catalog logic in ``services``,
the HTML documents in ``pages`` and the routes in ``api``.
"""

from .main import app  # noqa: F401
