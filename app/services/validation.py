"""
Input predicates for request fields.

Every predicate is pure and returns a bool; callers decide which message to
send. Values arrive straight from decoded JSON, query strings or path
segments, so predicates accept anything and never raise.
"""

import math
import re
from typing import Any

# Decimal literal as accepted by a JavaScript Number() coercion (no hex/octal).
_NUMERIC_STRING = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?Infinity")

_EMAIL = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_PHONE = re.compile(r"[0-9]{10,}")
_UPPER = re.compile(r"[A-Z]")
_LOWER = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")
_ISBN13 = re.compile(r"[0-9]{13}")
_YEAR = re.compile(r"[0-9]{4}")

PASSWORD_MIN_LEN = 8
ROLE_MIN = 1
ROLE_MAX = 5


def is_string_provided(value: Any) -> bool:
    """True for a non-empty str. Whitespace is not trimmed: "  " counts as provided."""
    return isinstance(value, str) and len(value) > 0


def to_number(value: Any) -> float | None:
    """Numeric coercion of `value`, or None where it would be NaN."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return None if isinstance(value, float) and math.isnan(value) else float(value)
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return 0.0
        if _NUMERIC_STRING.fullmatch(stripped):
            return float(stripped.replace("Infinity", "inf"))
    return None


def is_number(value: Any) -> bool:
    return to_number(value) is not None


def is_number_provided(value: Any) -> bool:
    """True when `value` is present, non-empty, and coerces to a number."""
    if value is None or value == "":
        return False
    return is_number(value)


def is_valid_password(password: Any) -> bool:
    """At least 8 characters with an uppercase letter, a lowercase letter and a digit."""
    return (
        is_string_provided(password)
        and len(password) >= PASSWORD_MIN_LEN
        and _UPPER.search(password) is not None
        and _LOWER.search(password) is not None
        and _DIGIT.search(password) is not None
    )


def is_valid_phone(phone: Any) -> bool:
    """Ten or more ASCII digits and nothing else."""
    return is_string_provided(phone) and _PHONE.fullmatch(phone) is not None


def is_valid_email(email: Any) -> bool:
    """Something@something.something with no whitespace; deliberately permissive."""
    return is_string_provided(email) and _EMAIL.fullmatch(email) is not None


def is_valid_role(role: Any) -> bool:
    """Integer-valued number in [1, 5]; "3" and 3 both qualify, "3.5" does not."""
    if not is_number_provided(role):
        return False
    number = to_number(role)
    return number is not None and number.is_integer() and ROLE_MIN <= number <= ROLE_MAX


def is_valid_isbn13(isbn13: Any) -> bool:
    """Thirteen ASCII digits, given as a string or an int."""
    return is_number_provided(isbn13) and _ISBN13.fullmatch(str(isbn13)) is not None


def is_valid_title(title: Any) -> bool:
    """Non-empty and not purely numeric, so a stray ISBN is not taken for a title."""
    return is_string_provided(title) and not is_number(title)


def is_valid_publication_year(year: Any) -> bool:
    return is_number_provided(year) and _YEAR.fullmatch(str(year)) is not None


def is_non_negative_int(value: Any) -> bool:
    """A JSON number with no fractional part and not below zero; 5.0 counts, "5" does not."""
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return value.is_integer() and value >= 0
    return isinstance(value, int) and value >= 0
