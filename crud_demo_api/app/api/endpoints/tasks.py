"""
Task endpoints.

A complete RESTful resource:

* ``GET    /api/tasks``       – list, with ``status``/``priority`` filters and
  ``sortBy``/``order`` sorting
* ``GET    /api/tasks/{id}``  – fetch one task
* ``POST   /api/tasks``       – create
* ``PUT    /api/tasks/{id}``  – full update (title, status and priority required)
* ``PATCH  /api/tasks/{id}``  – partial update of the supplied fields
* ``DELETE /api/tasks/{id}``  – delete

Example: ``GET /api/tasks?status=pending&priority=high&sortBy=dueDate&order=asc``
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from ...services.task_service import TaskService
from ..deps import get_task_service
from ..responses import entity_response, list_response


router = APIRouter()


@router.get("")
async def list_tasks(
    task_status: Optional[str] = Query(None, alias="status", description="pending, in-progress or completed"),
    priority: Optional[str] = Query(None, description="low, medium or high"),
    sort_by: Optional[str] = Query(None, alias="sortBy", description="title, priority, dueDate or createdAt"),
    order: Optional[str] = Query(None, description="asc (default) or desc"),
    service: TaskService = Depends(get_task_service),
) -> Dict[str, Any]:
    """Get all tasks with optional filtering and sorting.

    Unknown ``status``/``priority`` values are ignored, as is an unknown
    ``sortBy`` field.  Priorities sort by rank (low < medium < high) and
    due dates chronologically.
    """
    tasks = service.list(
        {
            "status": task_status,
            "priority": priority,
            "sortBy": sort_by,
            "order": order,
        }
    )
    return list_response(tasks)


@router.get("/{task_id}")
async def get_task(task_id: str, service: TaskService = Depends(get_task_service)) -> Dict[str, Any]:
    """Get a single task by ID; a non-numeric ID is rejected with 400."""
    return entity_response(service.get(task_id))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_task(
    body: Any = Body(None),
    service: TaskService = Depends(get_task_service),
) -> Dict[str, Any]:
    """Create a new task.

    Only ``title`` is required.  ``status`` defaults to ``pending``,
    ``priority`` to ``medium`` and ``dueDate`` (``YYYY-MM-DD``) to null.
    """
    return entity_response(service.create(body), "Task created successfully")


@router.put("/{task_id}")
async def replace_task(
    task_id: str,
    body: Any = Body(None),
    service: TaskService = Depends(get_task_service),
) -> Dict[str, Any]:
    return entity_response(service.replace(task_id, body), "Task updated successfully")


@router.patch("/{task_id}")
async def patch_task(
    task_id: str,
    body: Any = Body(None),
    service: TaskService = Depends(get_task_service),
) -> Dict[str, Any]:
    """Update only the supplied fields; ``updatedAt`` is always refreshed."""
    return entity_response(service.patch(task_id, body), "Task updated successfully")


@router.delete("/{task_id}")
async def delete_task(task_id: str, service: TaskService = Depends(get_task_service)) -> Dict[str, Any]:
    return entity_response(service.delete(task_id), "Task deleted successfully")
