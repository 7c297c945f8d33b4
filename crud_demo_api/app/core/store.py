"""
In‑memory storage for resource collections.

A ``ResourceStore`` owns the only copy of one resource kind's entities
for the lifetime of the process.  It keeps them in insertion order,
assigns identifiers and timestamps, and hands out copies so callers can
never mutate stored state behind the store's back.

Identifiers follow a max+1 rule: the next identifier is one more than
the largest identifier currently stored (or 1 for an empty store).
Because the rule only ever looks at the current maximum, identifiers
freed by deleting an entity from the middle of the collection are
never handed out again.

All public operations run under a per‑store re‑entrant lock.  Services
that need a check‑then‑write sequence to be atomic (for example the
email uniqueness check for users) wrap it in ``store.locked()``.
"""

import logging
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Generic, Iterable, Iterator, List, Optional, Type, TypeVar

from pydantic import BaseModel

from .errors import NotFoundError


logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=BaseModel)

# Fields owned by the store; values supplied by callers are ignored.
SERVER_FIELDS = frozenset({"id", "created_at", "updated_at"})


def utcnow() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class ResourceStore(Generic[EntityT]):
    """Ordered, identifier‑keyed collection of pydantic entities.

    Parameters
    ----------
    kind : str
        Human‑readable resource name used in error messages
        (``"User"``, ``"Product"``, ``"Task"``).
    model : Type[EntityT]
        Pydantic model of the stored entity.  It must declare ``id`` and
        ``created_at`` fields, and ``updated_at`` when ``tracks_updates``
        is set.
    tracks_updates : bool
        Whether ``updated_at`` is set on insert and refreshed on every
        ``replace_fields`` call.
    clock : Callable[[], datetime]
        Source of timestamps.  Tests inject a deterministic clock.
    """

    def __init__(
        self,
        kind: str,
        model: Type[EntityT],
        *,
        tracks_updates: bool = False,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self.kind = kind
        self.model = model
        self.tracks_updates = tracks_updates
        self._clock = clock
        self._items: List[EntityT] = []
        self._lock = threading.RLock()

    @contextmanager
    def locked(self) -> Iterator["ResourceStore[EntityT]"]:
        """Hold the store lock for a multi‑step read/modify sequence."""
        with self._lock:
            yield self

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def next_id(self) -> int:
        """Return the identifier the next ``insert`` will assign."""
        with self._lock:
            return max((item.id for item in self._items), default=0) + 1

    def list(self) -> List[EntityT]:
        """Return a snapshot copy of all entities in insertion order."""
        with self._lock:
            return [item.model_copy(deep=True) for item in self._items]

    def get(self, entity_id: int) -> EntityT:
        """Return a copy of the entity with ``entity_id``.

        Raises
        ------
        NotFoundError
            If no entity has this identifier.
        """
        with self._lock:
            return self._items[self._index_of(entity_id)].model_copy(deep=True)

    def find(self, predicate: Callable[[EntityT], bool]) -> Optional[EntityT]:
        """Return a copy of the first entity matching ``predicate``, if any."""
        with self._lock:
            for item in self._items:
                if predicate(item):
                    return item.model_copy(deep=True)
            return None

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def insert(self, fields: Dict[str, Any]) -> EntityT:
        """Store a new entity built from ``fields`` and return it.

        The identifier and creation timestamp are assigned here; the
        entity is appended to the end of the collection.
        """
        with self._lock:
            now = self._clock()
            data = {key: value for key, value in fields.items() if key not in SERVER_FIELDS}
            data["id"] = self.next_id()
            data["created_at"] = now
            if self.tracks_updates:
                data["updated_at"] = now
            entity = self.model.model_validate(data)
            self._items.append(entity)
            logger.debug("Inserted %s %s", self.kind, entity.id)
            return entity.model_copy(deep=True)

    def replace_fields(self, entity_id: int, fields: Dict[str, Any]) -> EntityT:
        """Overwrite only the given fields of an entity and return it.

        ``id`` and ``created_at`` are never changed.  When the store
        tracks updates, ``updated_at`` is refreshed even if ``fields`` is
        empty.
        """
        with self._lock:
            index = self._index_of(entity_id)
            current = self._items[index]
            changes = {
                key: value
                for key, value in fields.items()
                if key not in SERVER_FIELDS and key in self.model.model_fields
            }
            if self.tracks_updates:
                changes["updated_at"] = self._clock()
            updated = self.model.model_validate({**current.model_dump(), **changes})
            self._items[index] = updated
            logger.debug("Updated %s %s: %s", self.kind, entity_id, sorted(changes))
            return updated.model_copy(deep=True)

    def remove(self, entity_id: int) -> EntityT:
        """Remove an entity from the collection and return it."""
        with self._lock:
            removed = self._items.pop(self._index_of(entity_id))
            logger.debug("Removed %s %s", self.kind, entity_id)
            return removed

    def seed(self, records: Iterable[Dict[str, Any]]) -> List[EntityT]:
        """Insert several records in order, e.g. demo data at start‑up."""
        with self._lock:
            return [self.insert(record) for record in records]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _index_of(self, entity_id: int) -> int:
        for index, item in enumerate(self._items):
            if item.id == entity_id:
                return index
        raise NotFoundError(self.kind, entity_id)
