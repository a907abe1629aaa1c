"""Unit tests for app.services.validation: field predicates used before any query runs."""

import itertools
import unittest

from app.services.validation import (
    is_non_negative_int,
    is_number,
    is_number_provided,
    is_string_provided,
    is_valid_email,
    is_valid_isbn13,
    is_valid_password,
    is_valid_phone,
    is_valid_publication_year,
    is_valid_role,
    is_valid_title,
)


class TestIsStringProvided(unittest.TestCase):
    """Non-empty str only; whitespace is not trimmed."""

    def test_empty_string_is_false(self) -> None:
        self.assertFalse(is_string_provided(""))

    def test_whitespace_only_is_true(self) -> None:
        self.assertTrue(is_string_provided("   "))

    def test_non_strings_are_false(self) -> None:
        for value in (None, 0, 12, [], {}, True):
            with self.subTest(value=value):
                self.assertFalse(is_string_provided(value))


class TestIsNumberProvided(unittest.TestCase):
    """Present, non-empty and numeric after coercion."""

    def test_numeric_strings_and_numbers(self) -> None:
        for value in ("3", "-2", "4.25", "1e3", 7, 0, 2.5):
            with self.subTest(value=value):
                self.assertTrue(is_number_provided(value))

    def test_missing_or_non_numeric(self) -> None:
        for value in (None, "", "abc", "12abc", True, float("nan"), []):
            with self.subTest(value=value):
                self.assertFalse(is_number_provided(value))

    def test_is_number_accepts_whitespace_as_zero(self) -> None:
        self.assertTrue(is_number("  "))
        self.assertFalse(is_number("Dune"))


class TestPasswordRule(unittest.TestCase):
    """len >= 8 with an uppercase letter, a lowercase letter and a digit."""

    def test_valid_password(self) -> None:
        self.assertTrue(is_valid_password("Abcdefg1"))

    def test_each_rule_is_required(self) -> None:
        for password in ("Abcdef1", "abcdefg1", "ABCDEFG1", "Abcdefgh", "", None, 12345678):
            with self.subTest(password=password):
                self.assertFalse(is_valid_password(password))

    def test_no_special_character_requirement(self) -> None:
        self.assertTrue(is_valid_password("Password1"))
        self.assertTrue(is_valid_password("Pass word1!"))

    def test_matches_definition_over_small_alphabet(self) -> None:
        alphabet = "aA1"
        for length in range(6, 10):
            for chars in itertools.product(alphabet, repeat=min(length, 3)):
                password = "".join(chars) + "x" * (length - len(chars))
                expected = (
                    len(password) >= 8
                    and any(c.isupper() for c in password)
                    and any(c.islower() for c in password)
                    and any(c.isdigit() for c in password)
                )
                with self.subTest(password=password):
                    self.assertEqual(is_valid_password(password), expected)


class TestPhoneRule(unittest.TestCase):
    def test_ten_or_more_digits(self) -> None:
        self.assertTrue(is_valid_phone("1234567890"))
        self.assertTrue(is_valid_phone("123456789012"))

    def test_rejects_short_or_formatted(self) -> None:
        for phone in ("123456789", "123-456-7890", "(123)4567890", "1234567890\n", 1234567890, ""):
            with self.subTest(phone=phone):
                self.assertFalse(is_valid_phone(phone))


class TestEmailRule(unittest.TestCase):
    def test_permissive_shape(self) -> None:
        self.assertTrue(is_valid_email("a@b.com"))
        self.assertTrue(is_valid_email("first.last+tag@sub.example.org"))

    def test_rejects_missing_parts(self) -> None:
        for email in ("ab.com", "a@bcom", "a @b.com", "a@b.", "@b.com", "", None):
            with self.subTest(email=email):
                self.assertFalse(is_valid_email(email))


class TestRoleRule(unittest.TestCase):
    def test_integer_values_in_range(self) -> None:
        for role in ("1", "3", "5", 1, 5):
            with self.subTest(role=role):
                self.assertTrue(is_valid_role(role))

    def test_out_of_range_or_fractional(self) -> None:
        for role in ("0", "6", "3.5", "-1", "admin", None, ""):
            with self.subTest(role=role):
                self.assertFalse(is_valid_role(role))


class TestCatalogPredicates(unittest.TestCase):
    def test_isbn13(self) -> None:
        self.assertTrue(is_valid_isbn13("9780439554930"))
        self.assertTrue(is_valid_isbn13(9780439554930))
        self.assertFalse(is_valid_isbn13("978043955493"))
        self.assertFalse(is_valid_isbn13("97804395549301"))
        self.assertFalse(is_valid_isbn13("978043955493x"))
        self.assertFalse(is_valid_isbn13("             "))

    def test_title_must_not_be_numeric(self) -> None:
        self.assertTrue(is_valid_title("Dune"))
        self.assertTrue(is_valid_title("1984 Revisited"))
        self.assertFalse(is_valid_title("1984"))
        self.assertFalse(is_valid_title(""))

    def test_publication_year_four_digits(self) -> None:
        self.assertTrue(is_valid_publication_year("1997"))
        self.assertTrue(is_valid_publication_year(2001))
        self.assertFalse(is_valid_publication_year("997"))
        self.assertFalse(is_valid_publication_year("19970"))
        self.assertFalse(is_valid_publication_year("19.7"))

    def test_non_negative_int(self) -> None:
        self.assertTrue(is_non_negative_int(0))
        self.assertTrue(is_non_negative_int(12))
        self.assertFalse(is_non_negative_int(-1))
        self.assertTrue(is_non_negative_int(5.0))
        self.assertFalse(is_non_negative_int(1.5))
        self.assertFalse(is_non_negative_int(-2.0))
        self.assertFalse(is_non_negative_int("3"))
        self.assertFalse(is_non_negative_int(True))


if __name__ == "__main__":
    unittest.main()
