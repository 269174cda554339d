"""
Service layer abstraction.

Each service encapsulates the logic for one domain.  Services are
plain functions over :class:`~employee_portal_api.app.core.seed.SeedData`
so they can be tested without an HTTP client.
"""
