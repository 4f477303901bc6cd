"""
Pydantic models for user data and the response envelopes.

``UserCreate`` is deliberately permissive: ``name`` and ``email`` are
optional at the schema level so that missing fields are reported by
the validation dependency with the API's own error envelope instead
of FastAPI's default 422 body.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


DEFAULT_ROLE = "user"


class UserCreate(BaseModel):
    """Schema for creating a user."""

    name: Optional[str] = Field(None, examples=["New User"])
    email: Optional[str] = Field(None, examples=["newuser@example.com"])
    role: Optional[str] = Field(None, examples=["user"], description="Defaults to ``user`` when omitted")


class UserRead(BaseModel):
    """A stored user record as returned by the API."""

    id: str
    name: str
    email: str
    role: str = DEFAULT_ROLE
    created_at: Optional[str] = Field(None, alias="createdAt", description="ISO‑8601 creation time (UTC)")

    model_config = {
        "populate_by_name": True,
    }


class UserListResponse(BaseModel):
    success: bool = True
    count: int
    data: List[UserRead]


class UserResponse(BaseModel):
    success: bool = True
    data: UserRead


class UserCreatedResponse(BaseModel):
    success: bool = True
    message: str = "User created successfully"
    data: UserRead


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    """Envelope used for every failed request handled by the API."""

    success: bool = False
    error: str
