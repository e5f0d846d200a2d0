"""
TrackedRecord: a named collection of differently-typed TrackedValue fields.

Each field remembers the type it was declared with, so assignments through
the record are checked instead of going through an untyped mapping.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Type, get_origin

from setterkit.domain.entities.tracked_value import TrackedValue
from setterkit.exceptions import FieldAlreadyDeclared, FieldNotDeclared, FieldTypeError

logger = logging.getLogger(__name__)


def _check(name: str, expected_type: Type[Any], value: Any) -> None:
    # bool is an int subclass; only bool and object fields accept bools
    if isinstance(value, bool) and expected_type not in (bool, object):
        raise FieldTypeError(name, expected_type, type(value))
    if not isinstance(value, expected_type):
        raise FieldTypeError(name, expected_type, type(value))


class TrackedRecord:
    """
    Registry of TrackedValue fields keyed by name.

    Example:
        record = TrackedRecord()
        record.declare("name", str)
        record.declare("age", int, default=0)
        record.set("age", 1)
    """

    def __init__(self):
        self._fields: Dict[str, Tuple[Type[Any], TrackedValue[Any]]] = {}

    def declare(self, name: str, expected_type: Type[Any], default: Optional[Any] = None) -> TrackedValue[Any]:
        """
        Declare a new field and return its container.

        Args:
            name: Field name
            expected_type: A plain class; subscripted generics such as
                List[str] cannot be checked with isinstance and are rejected
            default: Value returned while unassigned; None or an instance
                of expected_type

        Raises:
            FieldAlreadyDeclared: If a field with this name exists
            TypeError: If expected_type is not a class
            FieldTypeError: If default does not match expected_type
        """
        if name in self._fields:
            raise FieldAlreadyDeclared(name)
        if not isinstance(expected_type, type) or get_origin(expected_type) is not None:
            raise TypeError(f"Field '{name}' needs a class as its type, got {expected_type!r}")
        if default is not None:
            _check(name, expected_type, default)
        tracked: TrackedValue[Any] = TrackedValue(default=default)
        self._fields[name] = (expected_type, tracked)
        logger.debug("Declared field %r of type %s", name, expected_type.__name__)
        return tracked

    def field(self, name: str) -> TrackedValue[Any]:
        """
        Raises:
            FieldNotDeclared: If the name was never declared
        """
        return self._entry(name)[1]

    def field_type(self, name: str) -> Type[Any]:
        return self._entry(name)[0]

    def set(self, name: str, value: Any) -> None:
        """
        Assign a field after checking the value against its declared type.

        Raises:
            FieldNotDeclared: If the name was never declared
            FieldTypeError: If value is not an instance of the declared type
        """
        expected_type, tracked = self._entry(name)
        _check(name, expected_type, value)
        tracked.set(value)

    def get(self, name: str) -> Any:
        return self._entry(name)[1].get()

    def is_assigned(self, name: str) -> bool:
        return self._entry(name)[1].is_assigned()

    def names(self) -> List[str]:
        return list(self._fields)

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {name: tracked.to_dict() for name, (_, tracked) in self._fields.items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Mapping[str, Any]], types: Mapping[str, Type[Any]]) -> "TrackedRecord":
        """
        Rebuild a record from to_dict() output.

        Args:
            data: Mapping of field name to TrackedValue payload
            types: Declared type for every field in data

        Raises:
            FieldNotDeclared: If data names a field missing from types
            FieldTypeError: If an assigned value or default does not match its type
        """
        record = cls()
        for name, payload in data.items():
            if name not in types:
                raise FieldNotDeclared(name)
            restored = TrackedValue.from_dict(dict(payload))
            record.declare(name, types[name], default=restored.default)
            if restored.is_assigned():
                record.set(name, restored.get())
        return record

    def _entry(self, name: str) -> Tuple[Type[Any], TrackedValue[Any]]:
        try:
            return self._fields[name]
        except KeyError:
            raise FieldNotDeclared(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __repr__(self) -> str:
        inner = ", ".join(f"{n}={t!r}" for n, (_, t) in self._fields.items())
        return f"TrackedRecord({inner})"


__all__ = ["TrackedRecord"]
