"""Employee Portal demo API; the application lives in ``employee_portal_api.app``."""
