"""
Business logic for users.

Users are plain CRUD resources with one extra rule: no two users may
share an email address.  The check runs on create and on replace
(ignoring the user being replaced) and raises ``ConflictError`` before
anything is written.  Addresses are compared case‑insensitively.
"""

from typing import Any, Dict, Optional

from ..core.errors import ConflictError
from ..core.store import ResourceStore
from ..schemas.user import UserRead
from .query import query_users
from .resource_service import ResourcePolicy, ResourceService
from .validation import validate_user


def ensure_unique_email(store: ResourceStore, fields: Dict[str, Any], exclude_id: Optional[int]) -> None:
    """Raise ``ConflictError`` if another user already holds ``fields['email']``."""
    email = fields.get("email")
    if email is None:
        return
    wanted = email.lower()
    existing = store.find(lambda user: user.email.lower() == wanted and user.id != exclude_id)
    if existing is not None:
        raise ConflictError("User with this email already exists")


USER_POLICY = ResourcePolicy(
    kind="User",
    model=UserRead,
    validate=validate_user,
    query=query_users,
    check_unique=ensure_unique_email,
)


class UserService(ResourceService):
    """Сервис для работы с пользователями.

    Хранит пользователей в памяти процесса; данные теряются при
    перезапуске.
    """

    def __init__(self, store: Optional[ResourceStore] = None) -> None:
        super().__init__(USER_POLICY, store)
