"""
Explicit capability interface.

A Capability is a named predicate over a target. Registering capabilities
ahead of time replaces per-call string lookups with a fixed mapping from
logical name to callable.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict

from .invoker import coerce_result, invoke_named_capability, resolve_indirection


class Capability(ABC):
    """Named zero-argument predicate evaluated against a target."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Logical name used for lookup."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what the capability checks."""
        pass

    @abstractmethod
    def run(self, target: Any) -> bool:
        """Evaluate the capability against an already-resolved target."""
        pass

    def get_definition(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "source": "registered",
        }


class FunctionCapability(Capability):
    """Capability backed by a plain function taking the target."""

    def __init__(self, name: str, fn: Callable[[Any], Any], description: str = ""):
        self._name = name
        self._fn = fn
        self._description = description or (fn.__doc__ or "").strip()

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    def run(self, target: Any) -> bool:
        target = resolve_indirection(target, self._name)
        return coerce_result(self._fn(target), self._name, type(target).__name__)


class MethodCapability(Capability):
    """Capability that calls the same-named zero-argument method on the target."""

    def __init__(self, name: str, description: str = ""):
        self._name = name
        self._description = description

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description or f"Calls {self._name}() on the target"

    def run(self, target: Any) -> bool:
        return invoke_named_capability(target, self._name)

    def get_definition(self) -> Dict[str, Any]:
        definition = super().get_definition()
        definition["source"] = "method"
        return definition
