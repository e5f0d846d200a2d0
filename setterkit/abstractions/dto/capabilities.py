"""
Shared capability DTOs for catalogs and invocation results.
"""
from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, Literal, Optional

ErrorKind = Literal["CapabilityNotFound", "InvocationError"]

@dataclass
class CapabilityDescriptor:
    name: str
    description: str
    source: str  # "registered" | "method"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

@dataclass
class CapabilityInvocationResult:
    ok: bool
    value: Optional[bool]
    error: Optional[str]
    error_kind: Optional[ErrorKind]
    capability_name: str
    target_type: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

__all__ = ["CapabilityDescriptor", "CapabilityInvocationResult", "ErrorKind"]
