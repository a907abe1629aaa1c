"""Request/response schemas for registration, login and token checks."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    """
    Registration body. Fields stay loosely typed so each one is checked by the
    validation predicates in order and reported with its own message.
    """

    model_config = ConfigDict(extra="ignore")

    firstname: Any = None
    lastname: Any = None
    username: Any = None
    email: Any = None
    password: Any = None
    phone: Any = None
    role: Any = None


class LoginRequest(BaseModel):
    """Credentials for login."""

    model_config = ConfigDict(extra="ignore")

    email: Any = None
    password: Any = None


class RegisterResponse(BaseModel):
    """JWT and new account id returned after registration."""

    access_token: str = Field(..., serialization_alias="accessToken", description="JWT access token")
    id: int = Field(..., description="New account id")


class UserDetail(BaseModel):
    """Public view of the signed-in account."""

    id: int
    email: str
    name: str = Field(..., description="First and last name")
    role: int


class LoginResponse(BaseModel):
    """JWT plus account details returned after a successful login."""

    access_token: str = Field(..., serialization_alias="accessToken", description="JWT access token")
    user: UserDetail


class HashDemoResponse(BaseModel):
    """Response for GET /hash_demo."""

    salt: str
    salted_hash: str
    unsalted_hash: str


class TokenClaims(BaseModel):
    """Claims of a verified bearer token, injected into closed routes."""

    id: int
    role: int
    name: str | None = None
