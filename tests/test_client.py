"""Tests for the CrudDemoAPI client against an in-process application."""

import pytest

from crud_demo_client import CrudDemoAPI


@pytest.fixture
def api(client):
    return CrudDemoAPI(base_url="http://testserver/api/", session=client)


@pytest.fixture
def seeded_api(seeded_client):
    return CrudDemoAPI(base_url="http://testserver/api", session=seeded_client)


def test_health(api):
    payload, error = api.health()
    assert error is None
    assert payload["message"] == "App is running!"


def test_user_lifecycle(api):
    user, error = api.create_user({"name": "Ann", "email": "ann@x.io"})
    assert error is None
    assert user["id"] == 1

    fetched, _ = api.get_user(1)
    assert fetched == user

    replaced, error = api.replace_user(1, {"name": "Annie", "email": "annie@x.io"})
    assert error is None
    assert replaced["email"] == "annie@x.io"

    removed, error = api.delete_user(1)
    assert error is None
    assert removed["name"] == "Annie"

    users, error = api.list_users()
    assert users == [] and error is None


def test_error_is_taken_from_envelope(api):
    api.create_user({"name": "Ann", "email": "ann@x.io"})
    data, error = api.create_user({"name": "Bob", "email": "ann@x.io"})
    assert data is None
    assert error == {"status_code": 409, "message": "User with this email already exists"}


def test_list_error_returns_empty_list(api):
    products, error = api.list_products(min_price="lots")
    assert products == []
    assert error["status_code"] == 400


def test_product_filters(seeded_api):
    products, error = seeded_api.list_products(min_price=100, max_price=200)
    assert error is None
    assert [product["name"] for product in products] == ["Running Shoes"]


def test_task_sorting_and_patch(seeded_api):
    tasks, _ = seeded_api.list_tasks(sort_by="dueDate", order="desc")
    assert [task["id"] for task in tasks] == [1, 2, 3]

    patched, error = seeded_api.patch_task(2, {"status": "completed"})
    assert error is None
    assert patched["status"] == "completed"

    completed, _ = seeded_api.list_tasks(status="completed")
    assert {task["id"] for task in completed} == {2, 3}


def test_missing_task(seeded_api):
    data, error = seeded_api.get_task(99)
    assert data is None
    assert error == {"status_code": 404, "message": "Task with ID 99 not found"}
