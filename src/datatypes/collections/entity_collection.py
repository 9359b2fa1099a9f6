"""
Collection of entities keyed by their positive integer ID.

The collection keeps insertion order and one read cursor, moved with
``rewind``/``next``/``previous``. Only one traversal may be in progress
at a time; iterating with ``for`` also moves the cursor.
"""

import logging
from collections.abc import Iterator
from typing import Any

from datatypes.exceptions import DuplicateEntryError, NotFoundError, PositiveIntegerError
from datatypes.value_objects.entity import Entity

logger = logging.getLogger(__name__)

_INVALID = -1


class EntityCollection:
    """Insertion-ordered mapping of ID to entity, with a cursor."""

    def __init__(self, entities: list[Entity] | None = None) -> None:
        self._entities: dict[int, Entity] = {}
        self._position = 0
        for entity in entities or ():
            self.add(entity)

    @staticmethod
    def _validate_id(entity_id: Any) -> int:
        if isinstance(entity_id, bool) or not isinstance(entity_id, int) or entity_id <= 0:
            raise PositiveIntegerError(
                f"Supplied ID should be a positive integer, got {entity_id!r}.",
                {"id": repr(entity_id)},
            )
        return entity_id

    def all(self) -> list[Entity]:
        return list(self._entities.values())

    def ids(self) -> list[int]:
        return list(self._entities)

    def count(self) -> int:
        return len(self._entities)

    def has(self, entity_id: int) -> bool:
        return self._validate_id(entity_id) in self._entities

    def get(self, entity_id: int) -> Entity:
        """
        Get an entity by ID.

        Raises:
            PositiveIntegerError: If the ID is not a positive integer
            NotFoundError: If no entity has that ID
        """
        if self._validate_id(entity_id) not in self._entities:
            raise NotFoundError.with_id(entity_id)
        return self._entities[entity_id]

    def add(self, entity: Entity) -> "EntityCollection":
        """
        Add an entity and return the collection for chaining.

        Raises:
            PositiveIntegerError: If the entity has no valid ID
            DuplicateEntryError: If an entity with the same ID is present
        """
        entity_id = self._validate_id(entity.get_id())
        if entity_id in self._entities:
            raise DuplicateEntryError.with_id(entity_id)
        self._entities[entity_id] = entity
        logger.debug("Entity added", extra={"entity_id": entity_id, "count": len(self._entities)})
        return self

    def remove(self, entity_id: int) -> bool:
        """Remove an entity by ID and move the cursor to the previous element."""
        if self._validate_id(entity_id) not in self._entities:
            raise NotFoundError.with_id(entity_id)

        was_valid = self.valid()
        removed_at = list(self._entities).index(entity_id)
        del self._entities[entity_id]
        if was_valid:
            if removed_at < self._position:
                self._position -= 1
            if self._position >= len(self._entities):
                self._position = _INVALID
        self.previous()

        logger.debug("Entity removed", extra={"entity_id": entity_id, "count": len(self._entities)})
        return True

    def clear(self) -> "EntityCollection":
        self._entities = {}
        self.rewind()
        return self

    def rewind(self) -> Entity | None:
        """Move the cursor to the first element and return it."""
        self._position = 0
        return self.current()

    def current(self) -> Entity | None:
        """Element under the cursor; rewinds when the cursor is off the collection."""
        if not self.valid():
            if not self._entities:
                return None
            self._position = 0
        return self._entities[list(self._entities)[self._position]]

    def key(self) -> int | None:
        if not self.valid():
            return None
        return list(self._entities)[self._position]

    def next(self) -> None:
        if self.valid():
            self._position += 1
            if self._position >= len(self._entities):
                self._position = _INVALID

    def previous(self) -> None:
        if self.valid():
            self._position -= 1

    def valid(self) -> bool:
        return 0 <= self._position < len(self._entities)

    def json_serialize(self) -> list[dict[str, Any]]:
        return [entity.json_serialize() for entity in self._entities.values()]

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entities

    def __iter__(self) -> Iterator[Entity]:
        self.rewind()
        while self.valid():
            entity = self.current()
            if entity is not None:
                yield entity
            self.next()

    def __repr__(self) -> str:
        return f"EntityCollection(ids={self.ids()!r})"
