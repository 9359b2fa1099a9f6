"""Linear and associative collections."""

from .entity_collection import EntityCollection
from .list_array import AbstractListArray
from .paginated import PaginatedCollection, SortDirection, SortInfo
from .queue import Queue
from .stack import Stack
from .store import Store

__all__ = [
    "AbstractListArray",
    "Stack",
    "Queue",
    "EntityCollection",
    "PaginatedCollection",
    "SortInfo",
    "SortDirection",
    "Store",
]
