"""A page of entities with its position inside the full result set."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from datatypes.collections.entity_collection import EntityCollection
from datatypes.exceptions import EmptyInputError


class SortDirection(Enum):
    """Sort direction enumeration"""

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortInfo:
    """Field and direction a page was sorted by."""

    field: str
    direction: SortDirection = SortDirection.ASC

    def __post_init__(self) -> None:
        if not self.field.strip():
            raise EmptyInputError("Sort field must be a non-empty string.", {"name": "field"})
        if isinstance(self.direction, str):
            object.__setattr__(self, "direction", SortDirection(self.direction.lower()))

    def json_serialize(self) -> dict[str, str]:
        return {"field": self.field, "direction": self.direction.value}


class PaginatedCollection:
    """
    Immutable snapshot of one page.

    ``from_record`` and ``to_record`` are computed from the page counters
    and the size of the wrapped collection.
    """

    def __init__(
        self,
        collection: EntityCollection,
        sort_info: SortInfo,
        total: int,
        first_id: int | None,
        last_id: int | None,
        current_page: int,
        last_page: int,
        per_page: int,
    ) -> None:
        self._collection = collection
        self._sort_info = sort_info
        self._total = total
        self._first_id = first_id
        self._last_id = last_id
        self._current_page = current_page
        self._last_page = last_page
        self._per_page = per_page

    @property
    def collection(self) -> EntityCollection:
        return self._collection

    @property
    def sort_info(self) -> SortInfo:
        return self._sort_info

    def from_record(self) -> int:
        return (self._current_page - 1) * self._per_page

    def to_record(self) -> int:
        return self.from_record() + min(self._collection.count(), self._per_page)

    def first_id(self) -> int | None:
        return self._first_id

    def last_id(self) -> int | None:
        return self._last_id

    def total_records(self) -> int:
        return self._total

    def total(self) -> int:
        """Number of entities on this page."""
        return self._collection.count()

    def current_page(self) -> int:
        return self._current_page

    def last_page(self) -> int:
        return self._last_page

    def per_page(self) -> int:
        return self._per_page

    def _counters(self) -> dict[str, int]:
        return {
            "fromRecord": self.from_record(),
            "toRecord": self.to_record(),
            "totalRecords": self.total_records(),
            "currentPage": self.current_page(),
            "lastPage": self.last_page(),
            "perPage": self.per_page(),
        }

    def to_dict(self) -> dict[str, Any]:
        return {"collection": self._collection, "sortinfo": self._sort_info, **self._counters()}

    def json_serialize(self) -> dict[str, Any]:
        return {
            "collection": self._collection.json_serialize(),
            "sortinfo": self._sort_info.json_serialize(),
            **self._counters(),
        }
