"""
Capability catalog and invocation ports.
"""
from __future__ import annotations
from typing import Protocol, List, Any, TYPE_CHECKING

if TYPE_CHECKING:
    from setterkit.abstractions.dto.capabilities import CapabilityDescriptor, CapabilityInvocationResult

class ICapabilityCatalog(Protocol):
    def list_capabilities(self) -> List["CapabilityDescriptor"]:
        ...
    def execute(self, name: str, target: Any) -> bool:
        ...

class ICapabilityInvocationAdapter(Protocol):
    def execute(self, target: Any, name: str) -> "CapabilityInvocationResult":
        ...

__all__ = ["ICapabilityCatalog", "ICapabilityInvocationAdapter"]
