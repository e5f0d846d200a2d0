"""
TrackedValue: a value paired with a record of whether it was ever assigned.

The container keeps its state as a tagged variant: either the module-level
UNSET sentinel or the assigned value. "Never assigned" is therefore a distinct
state from "assigned the zero value", which a plain default cannot express.

Serialization helpers keep the payload JSON-friendly so containers can be
logged, cached and compared in tests.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


class _Unset:
    """Sentinel type for the unassigned state."""

    _instance: Optional["_Unset"] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Unset, ())


UNSET = _Unset()


class TrackedValue(Generic[T]):
    """
    Holds one value of type T and records whether set() has been called.

    Args:
        default: Value returned by get() while unassigned. Providing it does
            not mark the container assigned.
    """

    __slots__ = ("_state", "_default")

    def __init__(self, default: Optional[T] = None):
        self._state: Any = UNSET
        self._default = default

    def set(self, t: T) -> None:
        """Store t and mark the container assigned."""
        if t is UNSET:
            raise ValueError("UNSET cannot be assigned; it marks the unassigned state")
        self._state = t

    def get(self) -> T:
        """Return the stored value, or the default while unassigned."""
        if self._state is UNSET:
            return self._default  # type: ignore[return-value]
        return self._state

    def is_assigned(self) -> bool:
        return self._state is not UNSET

    @property
    def default(self) -> Optional[T]:
        return self._default

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        return {
            "value": self.get(),
            "assigned": self.is_assigned(),
            "default": self._default,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TrackedValue[Any]":
        """
        Rebuild a container from to_dict() output.

        Raises:
            ValueError: If the payload has no boolean 'assigned' entry
        """
        if "assigned" not in data:
            raise ValueError("TrackedValue payload is missing 'assigned'")
        assigned = data["assigned"]
        if not isinstance(assigned, bool):
            raise ValueError(f"'assigned' must be a bool, got {type(assigned).__name__}")

        tracked: TrackedValue[Any] = cls(default=data.get("default"))
        if assigned:
            tracked.set(data.get("value"))
        return tracked

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> "TrackedValue[Any]":
        return cls.from_dict(json.loads(text))

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrackedValue):
            return NotImplemented
        return (
            self.is_assigned() == other.is_assigned()
            and self.get() == other.get()
            and self._default == other._default
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._state is UNSET:
            return f"TrackedValue(UNSET, default={self._default!r})"
        return f"TrackedValue({self._state!r})"


__all__ = ["TrackedValue", "UNSET"]
