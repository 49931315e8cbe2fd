"""Pydantic DTOs (Data Transfer Objects) for the mock login and session."""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Credentials posted to the mock login endpoint — presence is checked by the service."""

    email: str | None = Field(None, examples=["admin@example.com"])
    password: str | None = Field(None, examples=["secret"])


class UserResponse(BaseModel):
    """The acting user as returned to the client."""

    id: str
    email: str
    name: str
    role: str

    model_config = {"from_attributes": True}


class LoginResponse(BaseModel):
    """Successful mock login."""

    message: str
    token: str
    user: UserResponse


class MessageResponse(BaseModel):
    """Error body of the login endpoint."""

    message: str
    error: str | None = None
