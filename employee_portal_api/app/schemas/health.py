"""Pydantic model for the health check."""

from pydantic import BaseModel


class HealthStatus(BaseModel):
    status: str = "healthy"
    version: str
    timestamp: str
