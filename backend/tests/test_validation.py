"""
Tests for request field validation (docshelf/utils/validation.py).
These tests don't require a database.
"""

import pytest

from docshelf.core.exceptions import ValidationException
from docshelf.utils.validation import validate_hex_color, validate_length


class TestValidateLength:
    def test_returns_stripped_value(self):
        assert validate_length("  invoices ", "name", 1, 36) == "invoices"

    def test_boundaries_accepted(self):
        assert validate_length("a", "name", 1, 36) == "a"
        assert validate_length("x" * 36, "name", 1, 36) == "x" * 36

    def test_too_short(self):
        with pytest.raises(ValidationException) as exc_info:
            validate_length("", "name", 1, 36)

        assert exc_info.value.field == "name"
        assert exc_info.value.message == "name must be more than 1 characters"

    def test_too_long(self):
        with pytest.raises(ValidationException) as exc_info:
            validate_length("x" * 37, "name", 1, 36)

        assert exc_info.value.message == "name must be less than 36 characters"

    def test_missing_required(self):
        with pytest.raises(ValidationException) as exc_info:
            validate_length(None, "name", 1, 36)

        assert exc_info.value.message == "name must be set"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_nullable_accepts_blank(self, value):
        assert not validate_length(value, "name", 1, 36, nullable=True)

    def test_nullable_still_checks_length(self):
        with pytest.raises(ValidationException):
            validate_length("x" * 37, "name", 1, 36, nullable=True)

    def test_no_bounds(self):
        assert validate_length("anything", "title") == "anything"


class TestValidateHexColor:
    @pytest.mark.parametrize("value", ["#aabbcc", "#AABBCC", "#012345", "#fF00aA"])
    def test_valid(self, value):
        assert validate_hex_color(value, "color") == value

    @pytest.mark.parametrize(
        "value", ["aabbcc", "#abc", "#aabbccdd", "#gggggg", " #aabbcc", "#aabbcc\n"]
    )
    def test_invalid(self, value):
        with pytest.raises(ValidationException) as exc_info:
            validate_hex_color(value, "color")

        assert exc_info.value.field == "color"
        assert exc_info.value.to_dict()["type"] == "ValidationError"

    def test_required_when_not_nullable(self):
        with pytest.raises(ValidationException):
            validate_hex_color(None, "color")

    @pytest.mark.parametrize("value", [None, ""])
    def test_nullable_accepts_missing(self, value):
        assert validate_hex_color(value, "color", nullable=True) == value
