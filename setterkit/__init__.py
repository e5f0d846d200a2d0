"""
setterkit: tracked values and name-based capability invocation.
"""
from __future__ import annotations

from setterkit.domain.entities.tracked_value import TrackedValue, UNSET
from setterkit.domain.entities.tracked_record import TrackedRecord
from setterkit.domain.entities.ref import Ref
from setterkit.infrastructure.capabilities.invoker import DynamicInvoker, invoke_named_capability
from setterkit.exceptions import (
    SetterkitError,
    CapabilityError,
    CapabilityNotFound,
    InvocationError,
    FieldError,
    FieldNotDeclared,
    FieldAlreadyDeclared,
    FieldTypeError,
)

__all__ = [
    "TrackedValue",
    "UNSET",
    "TrackedRecord",
    "Ref",
    "DynamicInvoker",
    "invoke_named_capability",
    "SetterkitError",
    "CapabilityError",
    "CapabilityNotFound",
    "InvocationError",
    "FieldError",
    "FieldNotDeclared",
    "FieldAlreadyDeclared",
    "FieldTypeError",
]
