"""
Generic CRUD service over one resource kind.

``ResourceService`` implements the six REST operations (list, get,
create, replace, partial update, delete) once, for every kind.  What
differs between users, products and tasks lives in a
``ResourcePolicy``: the entity model, the validator, the list query
(filters and sort keys) and an optional uniqueness check.

Each operation is all‑or‑nothing: input is validated and constraints
are checked before the store is touched, so an error leaves the store
unchanged.  Lookup, validation, uniqueness check and write run while
holding the store lock.
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Sequence, Type

from pydantic import BaseModel

from ..core.errors import ValidationError
from ..core.store import ResourceStore, utcnow
from .query import QueryParams
from .validation import ValidationMode


logger = logging.getLogger(__name__)

Validator = Callable[[Any, ValidationMode], Dict[str, Any]]
ListQuery = Callable[[Sequence[Any], QueryParams], List[Any]]
UniqueCheck = Callable[[ResourceStore, Dict[str, Any], Optional[int]], None]

_ID_RE = re.compile(r"-?[0-9]+")


@dataclass(frozen=True)
class ResourcePolicy:
    """Per‑kind rules consumed by ``ResourceService``."""

    kind: str
    model: Type[BaseModel]
    validate: Validator
    query: ListQuery
    tracks_updates: bool = False
    check_unique: Optional[UniqueCheck] = None

    def create_store(self, clock: Callable[[], datetime] = utcnow) -> ResourceStore:
        return ResourceStore(self.kind, self.model, tracks_updates=self.tracks_updates, clock=clock)


def parse_id(raw_id: Any, kind: str) -> int:
    """Parse a path identifier; anything but an integer is a 400."""
    if isinstance(raw_id, int) and not isinstance(raw_id, bool):
        return raw_id
    text = str(raw_id).strip()
    if not _ID_RE.fullmatch(text):
        raise ValidationError(f"Invalid {kind.lower()} ID")
    return int(text)


class ResourceService:
    """List, get, create, replace, patch and delete entities of one kind."""

    def __init__(self, policy: ResourcePolicy, store: Optional[ResourceStore] = None) -> None:
        self.policy = policy
        self.store = store if store is not None else policy.create_store()

    @property
    def kind(self) -> str:
        return self.policy.kind

    def list(self, params: Optional[QueryParams] = None) -> List[Any]:
        """Return the filtered and sorted collection; never fails on an empty store."""
        return self.policy.query(self.store.list(), params or {})

    def get(self, raw_id: Any) -> Any:
        return self.store.get(parse_id(raw_id, self.kind))

    def create(self, body: Any) -> Any:
        fields = self.policy.validate(body, ValidationMode.CREATE)
        with self.store.locked():
            self._check_unique(fields, None)
            entity = self.store.insert(fields)
        logger.info("Created %s %s", self.kind, entity.id)
        return entity

    def replace(self, raw_id: Any, body: Any) -> Any:
        """Full replace: every mandatory field must be supplied."""
        return self._update(raw_id, body, ValidationMode.REPLACE)

    def patch(self, raw_id: Any, body: Any) -> Any:
        """Partial update: only the supplied fields change."""
        return self._update(raw_id, body, ValidationMode.PARTIAL)

    def delete(self, raw_id: Any) -> Any:
        entity_id = parse_id(raw_id, self.kind)
        removed = self.store.remove(entity_id)
        logger.info("Deleted %s %s", self.kind, entity_id)
        return removed

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _update(self, raw_id: Any, body: Any, mode: ValidationMode) -> Any:
        entity_id = parse_id(raw_id, self.kind)
        with self.store.locked():
            # 404 takes precedence over a bad body
            self.store.get(entity_id)
            fields = self.policy.validate(body, mode)
            self._check_unique(fields, entity_id)
            entity = self.store.replace_fields(entity_id, fields)
        logger.info("Updated %s %s (%s)", self.kind, entity_id, mode.value)
        return entity

    def _check_unique(self, fields: Dict[str, Any], exclude_id: Optional[int]) -> None:
        if self.policy.check_unique is not None:
            self.policy.check_unique(self.store, fields, exclude_id)
