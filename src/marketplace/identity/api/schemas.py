"""Pydantic request/response schemas for the Identity API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Request Schemas ---


class RegisterRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Jane Doe",
                    "email": "jane.doe@example.com",
                    "password": "correct-horse-battery",
                }
            ]
        }
    }

    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., max_length=254)
    password: str = Field(..., min_length=1, max_length=255)


class LoginRequest(BaseModel):
    model_config = {
        "json_schema_extra": {"examples": [{"email": "jane.doe@example.com", "password": "correct-horse-battery"}]}
    }

    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=255)


# --- Response Schemas ---


class AccountResponse(BaseModel):
    id: str
    kind: str
    name: str
    email: str
    registered_at: str | None = None


class RegisterResponse(BaseModel):
    msg: str
    account: AccountResponse


class LoginResponse(BaseModel):
    msg: str
    token: str
    account_id: str


class MessageResponse(BaseModel):
    msg: str
