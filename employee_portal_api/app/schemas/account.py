"""
Pydantic models for demo accounts and the login endpoint.

Accounts are static credential records.  Passwords are stored and
compared as plain text, and a successful login echoes the complete
record (password included) back to the client.  This is insecure and
kept only because browser clients of the demo depend on the response
shape.
"""

from pydantic import BaseModel, Field


class Account(BaseModel):
    """A seeded login account."""

    username: str = Field(..., examples=["test"])
    password: str = Field(..., examples=["123456"])
    name: str = Field(..., examples=["測試員工"], description="Display name shown after login")

    model_config = {"frozen": True}


class LoginResponse(BaseModel):
    """Body returned by ``POST /api/login`` on success."""

    success: bool = True
    message: str
    user: Account


class ErrorResponse(BaseModel):
    """Body returned for every error status."""

    success: bool = False
    message: str
