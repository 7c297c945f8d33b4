"""
Pydantic models for tasks.

A task is a to‑do item with a workflow ``status``, a ``priority`` and
an optional ``due_date``.  Unlike users and products, tasks track when
they were last modified: ``updated_at`` is refreshed on every replace
or partial update.

The allowed status and priority values are declared here once and
shared by the validator, the query engine and the schema itself.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field


TASK_STATUSES = ("pending", "in-progress", "completed")
TASK_PRIORITIES = ("low", "medium", "high")

# Priorities sort by rank, not alphabetically.
PRIORITY_RANK = {"low": 1, "medium": 2, "high": 3}

DEFAULT_STATUS = "pending"
DEFAULT_PRIORITY = "medium"

TaskStatus = Literal["pending", "in-progress", "completed"]
TaskPriority = Literal["low", "medium", "high"]


class TaskRead(BaseModel):
    """Schema for a task returned by the tasks API.

    ``due_date`` is kept as the literal ``YYYY-MM-DD`` string the client
    sent (no calendar check is made), or ``None`` when the task has no
    due date.
    """

    id: int
    title: str = Field(..., examples=["Complete project documentation"])
    description: str = ""
    status: TaskStatus = DEFAULT_STATUS
    priority: TaskPriority = DEFAULT_PRIORITY
    due_date: Optional[str] = Field(None, alias="dueDate", examples=["2024-12-31"])
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    model_config = {
        "populate_by_name": True,
    }
