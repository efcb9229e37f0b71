"""Pydantic request/response schemas for the Identity API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Request Schemas ---


class SignupRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "username": "meera",
                    "email": "meera@example.com",
                    "phone": "+91-98450-12345",
                    "password": "warli-art-42",
                }
            ]
        }
    }

    username: str = Field(..., max_length=100)
    email: str = Field(..., max_length=254)
    phone: str | None = Field(None, max_length=20)
    password: str = Field(..., max_length=128)


class LoginRequest(BaseModel):
    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=128)


# --- Response Schemas ---


class UserProfile(BaseModel):
    id: str
    username: str
    email: str
    phone: str | None = None
    role: str


class AuthResponse(BaseModel):
    message: str
    token: str
    user: UserProfile
