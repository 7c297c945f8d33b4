"""
User endpoints.

Provide listing, lookup, registration, full replacement and deletion
of users.  Email addresses must be unique; a clash yields HTTP 409.
Users do not support partial updates.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from ...services.user_service import UserService
from ..deps import get_user_service
from ..responses import entity_response, list_response


router = APIRouter()


@router.get("")
async def list_users(
    sort_by: Optional[str] = Query(None, alias="sortBy", description="name, email or createdAt"),
    order: Optional[str] = Query(None, description="asc (default) or desc"),
    service: UserService = Depends(get_user_service),
) -> Dict[str, Any]:
    """Получить список всех пользователей."""
    return list_response(service.list({"sortBy": sort_by, "order": order}))


@router.get("/{user_id}")
async def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> Dict[str, Any]:
    """Retrieve a single user by ID.  Returns 404 if the user does not exist."""
    return entity_response(service.get(user_id))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    body: Any = Body(None),
    service: UserService = Depends(get_user_service),
) -> Dict[str, Any]:
    """Зарегистрировать нового пользователя.

    Expects ``name`` and ``email``.  Returns 409 if the email is
    already registered.
    """
    return entity_response(service.create(body), "User created successfully")


@router.put("/{user_id}")
async def replace_user(
    user_id: str,
    body: Any = Body(None),
    service: UserService = Depends(get_user_service),
) -> Dict[str, Any]:
    """Replace a user's ``name`` and ``email``; both are required."""
    return entity_response(service.replace(user_id, body), "User updated successfully")


@router.delete("/{user_id}")
async def delete_user(user_id: str, service: UserService = Depends(get_user_service)) -> Dict[str, Any]:
    """Удалить пользователя по ID и вернуть удалённую запись."""
    return entity_response(service.delete(user_id), "User deleted successfully")
