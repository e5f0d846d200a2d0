"""
Name-based invocation of zero-argument boolean capabilities.

Lookup is resolved once per type: CapabilityTable scans a class and records,
for every public attribute, whether it can be called with no arguments once
bound to an instance. DynamicInvoker binds a target to its table at
construction; invoke() re-checks the class attribute so a table never
outlives a method removed or replaced after it was built. The class
attribute is bound directly, so instance attributes never shadow it.
"""
from __future__ import annotations

import inspect
import logging
import weakref
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from setterkit.domain.entities.ref import Ref
from setterkit.exceptions import CapabilityNotFound, InvocationError
from .config import Config

logger = logging.getLogger(__name__)


def resolve_indirection(target: Any, name: str = "") -> Any:
    """
    Unwrap Ref and weakref.ref layers until a concrete value is reached.

    Raises:
        InvocationError: If a weak reference has been collected
    """
    while True:
        if isinstance(target, Ref):
            target = target.deref()
        elif isinstance(target, weakref.ReferenceType):
            referent = target()
            if referent is None:
                raise InvocationError(
                    f"Cannot invoke '{name}': weak reference target has been collected",
                    name,
                )
            target = referent
        else:
            return target


def coerce_result(result: Any, name: str, target_type: str, strict: Optional[bool] = None) -> bool:
    """
    Check that a capability produced a boolean.

    Raises:
        InvocationError: In strict mode, if result is not a bool
    """
    if isinstance(result, bool):
        return result
    if strict is None:
        strict = Config.STRICT_BOOL
    if strict:
        raise InvocationError(
            f"Capability '{name}' on type '{target_type}' returned "
            f"{type(result).__name__}, expected bool",
            name,
            target_type,
        )
    return bool(result)


_MISSING = object()


@dataclass(frozen=True)
class _Entry:
    name: str
    attribute: Any
    zero_arg: Optional[bool]  # None when the signature cannot be inspected
    reason: str = ""


def _accepts_no_arguments(signature: inspect.Signature, skip_first: bool) -> bool:
    params = list(signature.parameters.values())
    if skip_first:
        if not params or params[0].kind not in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
            inspect.Parameter.VAR_POSITIONAL,
        ):
            return False
        if params[0].kind is not inspect.Parameter.VAR_POSITIONAL:
            params = params[1:]
    for p in params:
        if p.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
            continue
        if p.default is inspect.Parameter.empty:
            return False
    return True


def _class_attribute(cls: type, name: str) -> Any:
    """Look name up in the class MRO only; the metaclass is not consulted."""
    for klass in cls.__mro__:
        if name in klass.__dict__:
            return klass.__dict__[name]
    return _MISSING


def _bind(entry: _Entry, target: Any) -> Any:
    """Bind the class attribute itself; instance attributes never shadow it."""
    attribute = entry.attribute
    getter = getattr(type(attribute), "__get__", None)
    if getter is None:
        return attribute
    return getter(attribute, target, type(target))


def _inspect_attribute(name: str, attribute: Any) -> _Entry:
    if isinstance(attribute, staticmethod):
        func, skip_first = attribute.__func__, False
    elif isinstance(attribute, classmethod):
        func, skip_first = attribute.__func__, True
    elif inspect.isfunction(attribute) or inspect.ismethoddescriptor(attribute):
        func, skip_first = attribute, True
    elif isinstance(attribute, property) or not callable(attribute):
        return _Entry(name, attribute, False, f"'{name}' is not callable")
    else:
        # Callable object stored on the class; it is not bound to instances
        func, skip_first = attribute, False

    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return _Entry(name, attribute, None)

    if _accepts_no_arguments(signature, skip_first):
        return _Entry(name, attribute, True)
    return _Entry(name, attribute, False, f"'{name}' requires arguments: {signature}")


class CapabilityTable:
    """
    Per-type mapping of capability name to its resolved attribute.

    Use CapabilityTable.for_type() to share one table per class.
    """

    _cache: "weakref.WeakKeyDictionary[type, CapabilityTable]" = weakref.WeakKeyDictionary()

    def __init__(self, cls: type):
        self.cls = cls
        self.type_name = cls.__name__
        self.entries: Dict[str, _Entry] = {}
        for name in dir(cls):
            if name.startswith("__") and name.endswith("__"):
                continue
            attribute = _class_attribute(cls, name)
            if attribute is _MISSING:
                continue
            self.entries[name] = _inspect_attribute(name, attribute)
        logger.debug("Built capability table for %s with %d entries", self.type_name, len(self.entries))

    @classmethod
    def for_type(cls, target_type: type) -> "CapabilityTable":
        table = cls._cache.get(target_type)
        if table is None:
            table = cls(target_type)
            cls._cache[target_type] = table
        return table

    def get(self, name: str) -> _Entry:
        """
        Return the entry for name, refreshing it if the class changed since
        the table was built.

        Raises:
            CapabilityNotFound: If the type has no attribute with this name
        """
        entry = self.entries.get(name)
        if name.startswith("__") and name.endswith("__"):
            current = _MISSING
        else:
            current = _class_attribute(self.cls, name)

        if current is _MISSING:
            if entry is not None:
                logger.debug("Dropping stale capability %r from %s", name, self.type_name)
                del self.entries[name]
            raise CapabilityNotFound(name, self.type_name)
        if entry is None or entry.attribute is not current:
            entry = _inspect_attribute(name, current)
            self.entries[name] = entry
        return entry

    def names(self) -> List[str]:
        """Names that can be invoked with zero arguments."""
        return sorted(n for n, e in self.entries.items() if e.zero_arg is not False)

    def __contains__(self, name: object) -> bool:
        return name in self.entries


class DynamicInvoker:
    """
    Invoke zero-argument boolean capabilities of one target by name.

    Args:
        target: The object to invoke on, optionally behind Ref/weakref.ref layers
        strict: Override Config.STRICT_BOOL for this invoker
    """

    def __init__(self, target: Any, strict: Optional[bool] = None):
        self.target = resolve_indirection(target)
        self.table = CapabilityTable.for_type(type(self.target))
        self.strict = strict

    @property
    def type_name(self) -> str:
        return self.table.type_name

    def has(self, name: str) -> bool:
        return name in self.table.names()

    def names(self) -> List[str]:
        return self.table.names()

    def invoke(self, name: str) -> bool:
        """
        Invoke capability `name` with no arguments and return its boolean result.

        Raises:
            CapabilityNotFound: If the target's type has no such capability
            InvocationError: If it cannot be called with zero arguments or
                does not return a bool
        """
        try:
            entry = self.table.get(name)
        except CapabilityNotFound:
            logger.warning("Capability %r not found on %s", name, self.type_name)
            raise

        if entry.zero_arg is False:
            logger.warning("Capability %r on %s is not invocable: %s", name, self.type_name, entry.reason)
            raise InvocationError(
                f"Capability '{name}' on type '{self.type_name}' cannot be invoked "
                f"with zero arguments: {entry.reason}",
                name,
                self.type_name,
            )

        bound = _bind(entry, self.target)
        if entry.zero_arg is None:
            # Opaque signature on the class; the bound method may still be inspectable
            try:
                inspect.signature(bound).bind()
            except ValueError:
                pass
            except TypeError as e:
                raise InvocationError(
                    f"Capability '{name}' on type '{self.type_name}' cannot be "
                    f"invoked with zero arguments: {e}",
                    name,
                    self.type_name,
                ) from e

        logger.debug("Invoking %s.%s()", self.type_name, name)
        result = bound()
        return coerce_result(result, name, self.type_name, self.strict)


def invoke_named_capability(target: Any, name: str, strict: Optional[bool] = None) -> bool:
    """
    Locate capability `name` on target's type, call it and return its result.

    Indirection (Ref, weakref.ref) is resolved first, so a referenced target
    behaves exactly like the value itself.
    """
    return DynamicInvoker(resolve_indirection(target, name), strict=strict).invoke(name)


__all__ = [
    "CapabilityTable",
    "DynamicInvoker",
    "coerce_result",
    "invoke_named_capability",
    "resolve_indirection",
]
