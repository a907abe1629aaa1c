"""Pydantic request/response schemas."""

from app.schemas.auth import (
    HashDemoResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    TokenClaims,
    UserDetail,
)
from app.schemas.health import HealthResponse
from app.schemas.library import (
    AddBookRequest,
    BookEntry,
    EntriesResponse,
    EntryResponse,
    MessageResponse,
    UpdateRatingsRequest,
)

__all__ = [
    "AddBookRequest",
    "BookEntry",
    "EntriesResponse",
    "EntryResponse",
    "HashDemoResponse",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "RegisterRequest",
    "RegisterResponse",
    "TokenClaims",
    "UpdateRatingsRequest",
    "UserDetail",
]
