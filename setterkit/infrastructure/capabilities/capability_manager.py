import logging
from typing import Any, Callable, Dict, List, Type

from setterkit.abstractions.dto.capabilities import CapabilityDescriptor
from setterkit.exceptions import CapabilityNotFound
from .capability_base import Capability, FunctionCapability, MethodCapability
from .invoker import CapabilityTable

logger = logging.getLogger(__name__)


class CapabilityManager:
    """
    Manages a collection of capabilities and handles registration and execution.

    """

    def __init__(self):
        self.capabilities: Dict[str, Capability] = {}

    @classmethod
    def for_type(cls, target_type: Type[Any]) -> "CapabilityManager":
        """
        Build a manager holding a MethodCapability for every zero-argument
        method of target_type.

        Args:
            target_type: Class whose methods become capabilities
        """
        manager = cls()
        for name in CapabilityTable.for_type(target_type).names():
            manager.register_capability(MethodCapability(name))
        return manager

    def register_capability(self, capability: Capability) -> None:
        """
        Register a capability instance. A later registration replaces an
        earlier one with the same name.

        Args:
            capability: Capability instance to register
        """
        if capability.name in self.capabilities:
            logger.debug("Replacing capability %r", capability.name)
        self.capabilities[capability.name] = capability

    def register_function(self, name: str, fn: Callable[[Any], Any], description: str = "") -> None:
        """
        Register a plain function as a capability.

        Args:
            name: Logical capability name
            fn: Function called with the resolved target
            description: Optional description (defaults to fn's docstring)
        """
        self.register_capability(FunctionCapability(name, fn, description))

    def get_capability(self, name: str) -> Capability:
        """
        Get a registered capability by name.

        Args:
            name: Name of the capability to retrieve

        Returns:
            The requested capability instance

        Raises:
            CapabilityNotFound: If capability is not registered
        """
        if name not in self.capabilities:
            raise CapabilityNotFound(name)
        return self.capabilities[name]

    def list_capabilities(self) -> List[CapabilityDescriptor]:
        """
        Get information about all registered capabilities, in registration order.
        """
        return [
            CapabilityDescriptor(**capability.get_definition())
            for capability in self.capabilities.values()
        ]

    def execute(self, name: str, target: Any) -> bool:
        """
        Execute a capability by name against target.

        Raises:
            CapabilityNotFound: If capability is not registered
            InvocationError: If the capability does not produce a bool
        """
        capability = self.get_capability(name)
        return capability.run(target)

    def __contains__(self, name: object) -> bool:
        return name in self.capabilities

    def __len__(self) -> int:
        return len(self.capabilities)
