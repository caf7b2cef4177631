"""Field rules: predicate semantics and error collection.

Tests:
    - Predicates compare values through their text form ("150" and 150 alike)
    - collect_errors keeps declaration order and one entry per failing rule
    - Path-parameter failures hide body failures
"""

import pytest

from products_api.core.product_rules import (
    CREATE_PRODUCT_RULES, UPDATE_PRODUCT_RULES,
)
from products_api.core.validation import (
    as_bool, as_number, as_text, body, collect_errors, param,
    is_boolean, is_int, is_numeric, is_positive, not_empty,
)


@pytest.mark.parametrize("value,expected", [
    ("1", True), ("-4", True), ("+7", True), (12, True), ("0", True),
    ("01", False), ("1.5", False), ("abc", False), ("", False), (None, False),
    ("1\n", False),
])
def test_is_int(value, expected):
    assert is_int(value) is expected


@pytest.mark.parametrize("value,expected", [
    ("150", True), (150, True), (0.5, True), (".5", True), ("-3.25", True),
    ("Hola", False), ("", False), (None, False), (True, False), ("1e3", False),
    ([1], False), ("5\n", False),
])
def test_is_numeric(value, expected):
    assert is_numeric(value) is expected


def test_not_empty_treats_missing_and_null_as_empty():
    assert not_empty("x")
    assert not_empty(0)
    assert not_empty(False)
    assert not not_empty("")
    assert not not_empty(None)
    assert not not_empty({})


@pytest.mark.parametrize("value,expected", [
    ("150", True), (0.01, True), ("0", False), (0, False), (-5, False),
    ("Hola", False), ("", False), (None, False), ("nan", False),
    (10**400, False), ("1" * 400, False), (1e308, True),
])
def test_is_positive(value, expected):
    assert is_positive(value) is expected


@pytest.mark.parametrize("value,expected", [
    (True, True), (False, True), ("true", True), ("false", True),
    ("1", True), (0, True), ("yes", False), (None, False), ("", False),
])
def test_is_boolean(value, expected):
    assert is_boolean(value) is expected


def test_coercions():
    assert as_text(300.0) == "300"
    assert as_text(True) == "true"
    assert as_number(" 12.5 ") == 12.5
    assert as_number("Hola") is None
    assert as_number(10**400) is None
    assert as_number("1" * 400) is None
    assert as_bool("1") is True
    assert as_bool(False) is False
    assert as_bool("maybe") is None


def test_collect_errors_keeps_declaration_order():
    rules = (
        body("a", not_empty, "a vacio"),
        body("b", is_numeric, "b numerico"),
        body("b", is_positive, "b positivo"),
    )

    errors = collect_errors(rules, {}, {"b": "x"})

    assert [e["msg"] for e in errors] == ["a vacio", "b numerico", "b positivo"]


def test_error_entry_omits_value_for_missing_field():
    errors = collect_errors((body("name", not_empty, "vacio"),), {}, {})

    assert errors == [
        {"type": "field", "msg": "vacio", "path": "name", "location": "body"},
    ]


def test_error_entry_carries_present_value():
    errors = collect_errors((body("name", not_empty, "vacio"),), {}, {"name": ""})

    assert errors[0]["value"] == ""


def test_param_failure_skips_body_rules():
    rules = (
        param("id", is_int, "id"),
        body("name", not_empty, "name"),
    )

    errors = collect_errors(rules, {"id": "x"}, {})

    assert [e["msg"] for e in errors] == ["id"]


def test_empty_body_fails_every_declared_body_rule():
    assert len(collect_errors(CREATE_PRODUCT_RULES, {}, {})) == len(
        CREATE_PRODUCT_RULES,
    ) == 4
    assert len(collect_errors(UPDATE_PRODUCT_RULES, {"id": "1"}, {})) == 5


@pytest.mark.parametrize("price", [0, "0", -1, "-0.5"])
def test_non_positive_price_adds_exactly_one_range_error(price):
    errors = collect_errors(
        CREATE_PRODUCT_RULES, {}, {"name": "Mouse", "price": price},
    )

    assert [e["msg"] for e in errors].count("El precio debe ser mayor a 0") == 1
