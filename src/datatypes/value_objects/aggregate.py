"""Aggregates: plain groupings of value objects, entities and collections."""

from typing import Any, ClassVar

from datatypes.value_objects.value_object import to_primitive


class Aggregate:
    """
    Groups related records behind one serializable object.

    ``members`` names the attributes serialized by ``json_serialize``; when
    empty, every public instance attribute is used.
    """

    members: ClassVar[tuple[str, ...]] = ()

    def _member_names(self) -> tuple[str, ...]:
        if self.members:
            return self.members
        return tuple(name for name in vars(self) if not name.startswith("_"))

    def json_serialize(self) -> dict[str, Any]:
        return {
            name: to_primitive(getattr(self, name, None), nested=False)
            for name in self._member_names()
        }
