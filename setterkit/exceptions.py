"""
Exception hierarchy for setterkit.

Capability errors are raised by the invoker and the capability registry;
field errors are raised by TrackedRecord.
"""
from __future__ import annotations

from typing import Optional


class SetterkitError(Exception):
    """Base class for all setterkit errors."""


class CapabilityError(SetterkitError):
    """A named capability could not be resolved or invoked."""

    def __init__(self, message: str, name: str, target_type: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.name = name
        self.target_type = target_type

    def __str__(self) -> str:
        return self.message


class CapabilityNotFound(CapabilityError, KeyError):
    """No capability with the requested name exists on the target's type."""

    def __init__(self, name: str, target_type: Optional[str] = None):
        where = f" on type '{target_type}'" if target_type else ""
        super().__init__(f"Capability '{name}' not found{where}", name, target_type)


class InvocationError(CapabilityError):
    """The capability exists but cannot be called as a zero-argument predicate."""


class FieldError(SetterkitError):
    """A TrackedRecord field was misused."""

    def __init__(self, message: str, field_name: str):
        super().__init__(message)
        self.field_name = field_name

    def __str__(self) -> str:
        return self.args[0]


class FieldNotDeclared(FieldError, KeyError):
    def __init__(self, field_name: str):
        super().__init__(f"Field '{field_name}' is not declared", field_name)


class FieldAlreadyDeclared(FieldError):
    def __init__(self, field_name: str):
        super().__init__(f"Field '{field_name}' is already declared", field_name)


class FieldTypeError(FieldError, TypeError):
    def __init__(self, field_name: str, expected: type, actual: type):
        super().__init__(
            f"Field '{field_name}' expects {expected.__name__}, got {actual.__name__}",
            field_name,
        )
        self.expected = expected
        self.actual = actual


__all__ = [
    "SetterkitError",
    "CapabilityError",
    "CapabilityNotFound",
    "InvocationError",
    "FieldError",
    "FieldNotDeclared",
    "FieldAlreadyDeclared",
    "FieldTypeError",
]
