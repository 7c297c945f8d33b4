"""
Service for managing to‑do tasks.

Tasks are the only kind that exposes partial updates over HTTP and
the only kind whose store tracks ``updated_at``: every replace or
partial update refreshes it, even when the new values equal the old
ones.  Listing supports filtering by status and priority and sorting
by title, priority rank, due date or creation time.
"""

from typing import Optional

from ..core.store import ResourceStore
from ..schemas.task import TaskRead
from .query import query_tasks
from .resource_service import ResourcePolicy, ResourceService
from .validation import validate_task


TASK_POLICY = ResourcePolicy(
    kind="Task",
    model=TaskRead,
    validate=validate_task,
    query=query_tasks,
    tracks_updates=True,
)


class TaskService(ResourceService):
    """Service for creating, listing, updating and deleting tasks."""

    def __init__(self, store: Optional[ResourceStore] = None) -> None:
        super().__init__(TASK_POLICY, store)
