"""Registration, login, hash demo and the bearer-token dependency for closed routes."""

from typing import Annotated

import jwt
from fastapi import APIRouter, Depends, Header, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.core.errors import AuthenticationError
from app.core.security import decode_access_token, generate_hash, generate_salt
from app.schemas.auth import (
    HashDemoResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    TokenClaims,
    UserDetail,
)
from app.schemas.library import MessageResponse
from app.services.accounts import authenticate, register_account

router = APIRouter()
security = HTTPBearer(auto_error=False)

HASH_DEMO_PASSWORD = "password12345"


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> RegisterResponse:
    """
    Register an account and return a JWT plus the new account id.

    - **password**: at least 8 characters with an uppercase letter, a lowercase
      letter and a digit
    - **role**: integer 1 to 5
    - **phone**: optional; when given, 10 or more digits only
    - **username** and **email** must be unique
    """
    account = register_account(db, body, settings)
    return RegisterResponse(access_token=account.access_token, id=account.account_id)


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> LoginResponse:
    """
    Authenticate with email and password; returns a JWT and the account details.
    Include the token in the Authorization header as: Bearer <accessToken>
    """
    account = authenticate(db, body, settings)
    return LoginResponse(
        access_token=account.access_token,
        user=UserDetail(
            id=account.account_id,
            email=account.email,
            name=account.name,
            role=account.role,
        ),
    )


@router.get("/hash_demo", response_model=HashDemoResponse)
def hash_demo() -> HashDemoResponse:
    """Diagnostic: salted and unsalted hashes of a fixed password. Not for production use."""
    salt = generate_salt()
    return HashDemoResponse(
        salt=salt,
        salted_hash=generate_hash(HASH_DEMO_PASSWORD, salt),
        unsalted_hash=generate_hash(HASH_DEMO_PASSWORD, ""),
    )


def check_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: Annotated[Settings, Depends(get_settings)],
    x_access_token: Annotated[str | None, Header()] = None,
) -> TokenClaims:
    """Dependency: require a valid bearer JWT and return its claims. 401 if missing, 403 if invalid."""
    token = credentials.credentials if credentials is not None else x_access_token
    if not token:
        raise AuthenticationError("Auth token is not supplied", status.HTTP_401_UNAUTHORIZED)
    try:
        payload = decode_access_token(token, settings)
        return TokenClaims.model_validate(payload)
    except (jwt.PyJWTError, PydanticValidationError):
        raise AuthenticationError("Token is not valid", status.HTTP_403_FORBIDDEN)


@router.get("/jwt_test", response_model=MessageResponse)
def jwt_test(claims: Annotated[TokenClaims, Depends(check_token)]) -> MessageResponse:
    """Echo the role of a valid token."""
    return MessageResponse(message=f"Your token is valid and your role is: {claims.role}")
