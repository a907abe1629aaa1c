"""Account registration and sign-in: input checks, credential storage, token issuance."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import query_errors, violated_constraint
from app.core.errors import ConflictError, InternalError, ValidationError
from app.core.security import create_access_token, new_credential, verify_password
from app.models import Account, AccountCredential
from app.models.account import ACCOUNT_EMAIL_KEY, ACCOUNT_USERNAME_KEY
from app.schemas.auth import LoginRequest, RegisterRequest
from app.services.validation import (
    is_string_provided,
    is_valid_email,
    is_valid_password,
    is_valid_phone,
    is_valid_role,
    to_number,
)

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

MISSING_INFORMATION = "Missing required information"
INVALID_EMAIL = "Invalid or missing email - please refer to documentation"
INVALID_PHONE = "Invalid or missing phone number - please refer to documentation"
INVALID_PASSWORD = "Invalid or missing password - please refer to documentation"
INVALID_ROLE = "Invalid or missing role - please refer to documentation"
USERNAME_EXISTS = "Username exists"
EMAIL_EXISTS = "Email exists"
# Same message for unknown email and wrong password so accounts cannot be enumerated.
INVALID_CREDENTIALS = "Invalid Credentials"

_CONFLICT_MESSAGES = {
    ACCOUNT_USERNAME_KEY: USERNAME_EXISTS,
    ACCOUNT_EMAIL_KEY: EMAIL_EXISTS,
}


@dataclass(frozen=True)
class RegisteredAccount:
    """Outcome of a registration: the new id, its role and the issued token."""

    account_id: int
    role: int
    access_token: str


@dataclass(frozen=True)
class SignedInAccount:
    """Outcome of a successful sign-in."""

    account_id: int
    email: str
    firstname: str
    lastname: str
    role: int
    access_token: str

    @property
    def name(self) -> str:
        return f"{self.firstname} {self.lastname}"


def validate_registration(body: RegisterRequest) -> None:
    """
    Check registration fields in a fixed order, raising ValidationError at the
    first failure. Phone is optional; when present it must be valid.
    """
    if not is_valid_email(body.email):
        raise ValidationError(INVALID_EMAIL)
    if not (
        is_string_provided(body.firstname)
        and is_string_provided(body.lastname)
        and is_string_provided(body.username)
    ):
        raise ValidationError(MISSING_INFORMATION)
    if body.phone and not is_valid_phone(body.phone):
        raise ValidationError(INVALID_PHONE)
    if not is_valid_password(body.password):
        raise ValidationError(INVALID_PASSWORD)
    if not is_valid_role(body.role):
        raise ValidationError(INVALID_ROLE)


def register_account(
    db: Session, body: RegisterRequest, settings: "Settings | None" = None
) -> RegisteredAccount:
    """
    Validate, then insert the account and its credential in one transaction
    and issue a token carrying {role, id}.

    A unique violation on username or email becomes a ConflictError; any other
    database failure rolls back both rows and becomes an InternalError.
    """
    validate_registration(body)
    role = int(to_number(body.role))

    account = Account(
        firstname=body.firstname,
        lastname=body.lastname,
        username=body.username,
        email=body.email,
        phone=body.phone or None,
        account_role=role,
    )
    db.add(account)
    try:
        db.flush()
    except IntegrityError as e:
        db.rollback()
        message = _CONFLICT_MESSAGES.get(violated_constraint(e))
        if message is not None:
            raise ConflictError(message) from e
        logger.exception("DB query error on register")
        raise InternalError() from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("DB query error on register")
        raise InternalError() from e
    account_id = account.account_id

    salt, salted_hash = new_credential(body.password, settings)
    with query_errors(db, "register credential"):
        db.add(
            AccountCredential(
                account_id=account_id,
                salted_hash=salted_hash,
                salt=salt,
            )
        )
        db.commit()

    token = create_access_token({"role": role, "id": account_id}, settings)
    logger.info("Registered account_id=%s role=%s", account_id, role)
    return RegisteredAccount(account_id=account_id, role=role, access_token=token)


def authenticate(
    db: Session, body: LoginRequest, settings: "Settings | None" = None
) -> SignedInAccount:
    """
    Look up the stored salt and hash by email, re-derive the hash from the
    supplied password and issue a token carrying {name, role, id} on a match.
    """
    if not (is_string_provided(body.email) and is_string_provided(body.password)):
        raise ValidationError(MISSING_INFORMATION)

    with query_errors(db, "sign in"):
        rows = (
            db.query(AccountCredential, Account)
            .join(Account, AccountCredential.account_id == Account.account_id)
            .filter(Account.email == body.email)
            .all()
        )

    if not rows:
        logger.info("Sign in failed: user not found")
        raise ValidationError(INVALID_CREDENTIALS)
    if len(rows) > 1:
        logger.error("DB query error on sign in: too many results returned")
        raise InternalError()

    credential, account = rows[0]
    if not verify_password(body.password, credential.salt, credential.salted_hash):
        logger.info("Sign in failed: credentials did not match")
        raise ValidationError(INVALID_CREDENTIALS)

    token = create_access_token(
        {"name": account.firstname, "role": account.account_role, "id": account.account_id},
        settings,
    )
    return SignedInAccount(
        account_id=account.account_id,
        email=account.email,
        firstname=account.firstname,
        lastname=account.lastname,
        role=account.account_role,
        access_token=token,
    )
