"""
Indirection layer used by the capability invoker.

A Ref borrows a value without owning it. Capability lookup always happens on
the value reached after every Ref (and live weakref.ref) has been unwrapped.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Ref(Generic[T]):
    target: T

    def deref(self) -> T:
        return self.target


__all__ = ["Ref"]
