"""
Builders for the response envelope.

Every successful response has the shape::

    {"success": true, "message": "...", "count": 3, "data": ...}

where ``message`` and ``count`` appear only when relevant.  Entities
are serialized with their camelCase aliases (``createdAt``,
``dueDate``) and ISO‑8601 timestamps.
"""

from typing import Any, Dict, Optional, Sequence

from pydantic import BaseModel


def serialize(entity: BaseModel) -> Dict[str, Any]:
    return entity.model_dump(mode="json", by_alias=True)


def success(data: Any, *, message: Optional[str] = None, count: Optional[int] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": True}
    if message is not None:
        body["message"] = message
    if count is not None:
        body["count"] = count
    body["data"] = data
    return body


def entity_response(entity: BaseModel, message: Optional[str] = None) -> Dict[str, Any]:
    return success(serialize(entity), message=message)


def list_response(entities: Sequence[BaseModel]) -> Dict[str, Any]:
    return success([serialize(entity) for entity in entities], count=len(entities))


def error_response(message: str, stack: Optional[str] = None) -> Dict[str, Any]:
    error: Dict[str, Any] = {"message": message}
    if stack is not None:
        error["stack"] = stack
    return {"success": False, "error": error}
