from __future__ import annotations

from pydantic import BaseModel, Field


class UserRequest(BaseModel):
    id: int = Field(default=0, description="Ignored, ids are assigned by the service")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Contact e-mail")


class UserResponse(BaseModel):
    id: int
    name: str
    email: str


class ErrorResponse(BaseModel):
    message: str
    details: str
