"""Tests for pure field rules."""

from __future__ import annotations

import pytest

from credcheck.domain.rules import contains, has_digit, has_letter, is_valid_email


class TestContains:
    def test_substring(self) -> None:
        assert contains("bob@gmail.com", "bob") is True

    def test_case_sensitive(self) -> None:
        assert contains("bob@gmail.com", "Bob") is False

    def test_not_tokenized(self) -> None:
        assert contains("alphabet", "hab") is True

    def test_empty_needle_never_matches(self) -> None:
        assert contains("anything", "") is False
        assert contains("", "") is False

    def test_empty_haystack(self) -> None:
        assert contains("", "x") is False


class TestIsValidEmail:
    @pytest.mark.parametrize(
        "email",
        [
            "bob@gmail.com",
            "first.last+tag@sub.example.org",
            "UPPER_CASE%x@EXAMPLE.IO",
            "a-b@c-d.museum",
        ],
    )
    def test_valid(self, email: str) -> None:
        assert is_valid_email(email) is True

    @pytest.mark.parametrize(
        "email",
        [
            "",
            "plainaddress",
            "@example.com",
            "bob@",
            "bob@example",
            "bob@example.c",
            "bob@example.c0m",
            "bob smith@example.com",
            "bob@gmail.com\n",
            " bob@gmail.com",
        ],
    )
    def test_invalid(self, email: str) -> None:
        assert is_valid_email(email) is False

    def test_whole_string_match(self) -> None:
        """A valid address embedded in other text does not count."""
        assert is_valid_email("mail bob@gmail.com now") is False

    def test_tld_length_bound(self) -> None:
        assert is_valid_email("a@b." + "c" * 64) is True
        assert is_valid_email("a@b." + "c" * 65) is False


class TestCharacterClasses:
    def test_digit(self) -> None:
        assert has_digit("abc1") is True
        assert has_digit("abcd") is False

    def test_unicode_digit(self) -> None:
        assert has_digit("abc٣") is True  # ARABIC-INDIC DIGIT THREE

    def test_letter(self) -> None:
        assert has_letter("1234a") is True
        assert has_letter("1234!") is False

    def test_unicode_letter(self) -> None:
        assert has_letter("1234é") is True

    def test_empty(self) -> None:
        assert has_digit("") is False
        assert has_letter("") is False
