from .capability_base import Capability, FunctionCapability, MethodCapability
from .capability_manager import CapabilityManager
from .invocation_adapter import CapabilityInvocationAdapter
from .invoker import (
    CapabilityTable,
    DynamicInvoker,
    invoke_named_capability,
    resolve_indirection,
)

__all__ = [
    "Capability",
    "FunctionCapability",
    "MethodCapability",
    "CapabilityManager",
    "CapabilityInvocationAdapter",
    "CapabilityTable",
    "DynamicInvoker",
    "invoke_named_capability",
    "resolve_indirection",
]
