"""
Create an account without going through HTTP (e.g. the first administrator). Run from project root:
  python -m app.scripts.create_account FIRSTNAME LASTNAME USERNAME EMAIL PASSWORD [--role N] [--phone DIGITS]
Example:
  python -m app.scripts.create_account Ada Admin admin admin@example.com 'S3cure-pass' --role 1
"""
import argparse
import sys

from app.core.database import SessionLocal
from app.core.errors import LibraryApiError
from app.schemas.auth import RegisterRequest
from app.services.accounts import register_account


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a library account with credentials.")
    parser.add_argument("firstname")
    parser.add_argument("lastname")
    parser.add_argument("username", help="Unique username")
    parser.add_argument("email", help="Unique email address")
    parser.add_argument("password", help="8+ chars with upper, lower and a digit")
    parser.add_argument("--role", default="1", help="Role 1-5 (default 1)")
    parser.add_argument("--phone", default=None, help="Optional phone number, 10+ digits")
    args = parser.parse_args(argv)

    body = RegisterRequest(
        firstname=args.firstname,
        lastname=args.lastname,
        username=args.username,
        email=args.email,
        password=args.password,
        role=args.role,
        phone=args.phone,
    )
    db = SessionLocal()
    try:
        account = register_account(db, body)
    except LibraryApiError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created account '{args.username}' (id {account.account_id}) with role {account.role}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
