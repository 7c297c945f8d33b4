"""Tests for the request body validators."""

import pytest

from crud_demo_api.app.core.errors import ValidationError
from crud_demo_api.app.services.validation import (
    ValidationMode,
    validate_product,
    validate_task,
    validate_user,
)


CREATE = ValidationMode.CREATE
REPLACE = ValidationMode.REPLACE
PARTIAL = ValidationMode.PARTIAL


def message_of(validator, body, mode):
    with pytest.raises(ValidationError) as excinfo:
        validator(body, mode)
    return excinfo.value.message


# ----------------------------------------------------------------------
# Body shape
# ----------------------------------------------------------------------
@pytest.mark.parametrize("body", [None, [], "text", 3])
def test_body_must_be_an_object(body):
    assert message_of(validate_task, body, CREATE) == "Request body must be a JSON object"


# ----------------------------------------------------------------------
# Users
# ----------------------------------------------------------------------
def test_user_create_requires_name_and_email():
    assert message_of(validate_user, {"name": "A"}, CREATE) == "Name and email are required"
    assert message_of(validate_user, {"name": "  ", "email": "a@x.io"}, CREATE) == "Name and email are required"


@pytest.mark.parametrize("email", ["plain", "a@b", "a b@c.d", "@x.io"])
def test_user_rejects_bad_email(email):
    assert message_of(validate_user, {"name": "A", "email": email}, CREATE) == "Invalid email format"


def test_user_fields_are_trimmed_and_extra_ignored():
    fields = validate_user({"name": " Ann ", "email": " ann@x.io ", "role": "admin"}, CREATE)
    assert fields == {"name": "Ann", "email": "ann@x.io"}


def test_user_replace_requires_both_fields():
    assert message_of(validate_user, {"email": "a@x.io"}, REPLACE) == "Name and email are required"


def test_user_partial_needs_a_known_field():
    message = message_of(validate_user, {"nickname": "a"}, PARTIAL)
    assert message == "At least one field (name or email) is required for update"
    assert validate_user({"name": "B"}, PARTIAL) == {"name": "B"}


# ----------------------------------------------------------------------
# Products
# ----------------------------------------------------------------------
PRODUCT = {"name": "Desk", "description": "Oak desk", "price": 150, "category": "Furniture", "stock": 4}


def test_product_create_happy_path():
    assert validate_product(PRODUCT, CREATE) == PRODUCT


def test_product_create_requires_all_fields():
    body = dict(PRODUCT)
    del body["stock"]
    assert message_of(validate_product, body, CREATE) == "Name, description, price, category, and stock are required"


@pytest.mark.parametrize("price", [-1, "10", True, float("inf"), 10**400])
def test_product_price_must_be_non_negative_number(price):
    body = dict(PRODUCT, price=price)
    assert message_of(validate_product, body, CREATE) == "Price must be a non-negative number"


@pytest.mark.parametrize("stock", [-1, 2.5, "3", False, 10**400])
def test_product_stock_must_be_non_negative_integer(stock):
    body = dict(PRODUCT, stock=stock)
    assert message_of(validate_product, body, CREATE) == "Stock must be a non-negative integer"


def test_product_zero_price_and_integral_float_stock_are_valid():
    fields = validate_product(dict(PRODUCT, price=0, stock=3.0), CREATE)
    assert fields["price"] == 0
    assert fields["stock"] == 3
    assert isinstance(fields["stock"], int)


def test_product_partial_needs_a_known_field():
    assert message_of(validate_product, {"colour": "red"}, PARTIAL) == "At least one field is required for update"


# ----------------------------------------------------------------------
# Tasks
# ----------------------------------------------------------------------
def test_task_create_applies_defaults():
    assert validate_task({"title": " A "}, CREATE) == {
        "title": "A",
        "description": "",
        "status": "pending",
        "priority": "medium",
        "due_date": None,
    }


def test_task_create_requires_title():
    assert message_of(validate_task, {}, CREATE) == "Title is required"
    assert message_of(validate_task, {"title": "   "}, CREATE) == "Title is required"


def test_task_create_rejects_unknown_status_and_priority():
    assert message_of(validate_task, {"title": "A", "status": "done"}, CREATE) == (
        "Invalid status. Must be one of: pending, in-progress, completed"
    )
    assert message_of(validate_task, {"title": "A", "priority": "urgent"}, CREATE) == (
        "Invalid priority. Must be one of: low, medium, high"
    )


def test_task_enums_are_case_insensitive():
    fields = validate_task({"title": "A", "status": "In-Progress", "priority": "HIGH"}, CREATE)
    assert fields["status"] == "in-progress"
    assert fields["priority"] == "high"


@pytest.mark.parametrize(
    "due_date",
    [
        "2024/12/31",
        "31-12-2024",
        "2024-1-1",
        20241231,
        "2024-01-01\n",
        "\u0662\u0660\u0662\u0664-\u0660\u0661-\u0660\u0661",
    ],
)
def test_task_due_date_format(due_date):
    assert message_of(validate_task, {"title": "A", "dueDate": due_date}, CREATE) == (
        "Invalid date format. Use YYYY-MM-DD"
    )


def test_task_first_failing_rule_wins():
    body = {"title": "", "status": "bogus", "dueDate": "nope"}
    assert message_of(validate_task, body, CREATE) == "Title is required"


def test_task_replace_requires_title_status_priority():
    assert message_of(validate_task, {"status": "pending", "priority": "low"}, REPLACE) == (
        "Title is required for update"
    )
    assert message_of(validate_task, {"title": "A", "priority": "low"}, REPLACE) == (
        "Status is required and must be one of: pending, in-progress, completed"
    )
    assert message_of(validate_task, {"title": "A", "status": "pending"}, REPLACE) == (
        "Priority is required and must be one of: low, medium, high"
    )


def test_task_replace_clears_missing_optionals():
    fields = validate_task({"title": "A", "status": "pending", "priority": "low"}, REPLACE)
    assert fields["description"] == ""
    assert fields["due_date"] is None


def test_task_partial_returns_only_present_fields():
    assert validate_task({"status": "completed"}, PARTIAL) == {"status": "completed"}
    assert validate_task({"dueDate": ""}, PARTIAL) == {"due_date": None}


def test_task_partial_rejects_empty_title_and_unknown_fields():
    assert message_of(validate_task, {"title": " "}, PARTIAL) == "Title cannot be empty"
    assert message_of(validate_task, {"owner": "me"}, PARTIAL) == "At least one field is required for update"
