"""Unit tests for the product route rule sets.

Covers:
- is_positive predicate.
- Error counts and messages for the create / update / id rule sets.
"""

from __future__ import annotations

from decimal import InvalidOperation

import pytest

from modules.core.validation import run_validation
from modules.products.rules import CREATE_RULES, ID_RULES, UPDATE_RULES, is_positive

pytestmark = pytest.mark.unit


def _messages(chains, data, params=None) -> list:
    return [error.message for error in run_validation(chains, data, params or {})]


class TestIsPositive:
    @pytest.mark.parametrize("value", [1, 0.01, "5", "0.5", " 7 ", True])
    def test_positive(self, value):
        assert is_positive(value) is True

    @pytest.mark.parametrize("value", [0, -1, "0", "-0.5", "", None, False])
    def test_not_positive(self, value):
        assert is_positive(value) is False

    def test_non_numeric_text_raises(self):
        with pytest.raises(InvalidOperation):
            is_positive("hola")


class TestCreateRules:
    def test_empty_body(self):
        assert _messages(CREATE_RULES, {}) == [
            "name required",
            "invalid value",
            "price required",
            "invalid price",
        ]

    def test_valid_body(self):
        assert _messages(CREATE_RULES, {"name": "Mouse -Testing", "price": 50}) == []

    def test_zero_price(self):
        assert _messages(CREATE_RULES, {"name": "Monitor", "price": 0}) == [
            "invalid price"
        ]

    def test_text_price(self):
        assert _messages(CREATE_RULES, {"name": "Monitor", "price": "hola"}) == [
            "invalid value",
            "invalid price",
        ]

    def test_boolean_price_only_fails_numeric_check(self):
        assert _messages(CREATE_RULES, {"name": "Monitor", "price": True}) == [
            "invalid value"
        ]

    def test_null_price(self):
        assert len(_messages(CREATE_RULES, {"name": "Monitor", "price": None})) == 3

    def test_availability_not_checked_on_create(self):
        data = {"name": "Monitor", "price": 10, "availability": "maybe"}
        assert _messages(CREATE_RULES, data) == []


class TestIdRules:
    @pytest.mark.parametrize("value", ["1", "2000", "-3", "01"])
    def test_integer_ids_pass(self, value):
        assert _messages(ID_RULES, {}, {"id": value}) == []

    @pytest.mark.parametrize("value", ["abc", "1.5", "", "not-valid-url"])
    def test_non_integer_ids_fail(self, value):
        assert _messages(ID_RULES, {}, {"id": value}) == ["ID in not valid"]


class TestUpdateRules:
    def test_empty_body_with_valid_id(self):
        assert len(_messages(UPDATE_RULES, {}, {"id": "1"})) == 5

    def test_empty_body_with_invalid_id(self):
        messages = _messages(UPDATE_RULES, {}, {"id": "x"})
        assert len(messages) == 6
        assert messages[0] == "ID in not valid"
        assert messages[-1] == "invalid availability value"

    def test_zero_price(self):
        data = {"name": "Monitor", "price": 0, "availability": True}
        assert _messages(UPDATE_RULES, data, {"id": "1"}) == ["invalid price"]

    def test_valid(self):
        data = {"name": "Monitor", "price": 300, "availability": "false"}
        assert _messages(UPDATE_RULES, data, {"id": "1"}) == []
