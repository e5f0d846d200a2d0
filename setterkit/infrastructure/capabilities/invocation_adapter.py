"""
Capability invocation adapter implementing ICapabilityInvocationAdapter interface.
"""

import logging
from typing import Any, Optional, TYPE_CHECKING
from setterkit.abstractions.dto.capabilities import CapabilityInvocationResult
from setterkit.exceptions import CapabilityNotFound, InvocationError

if TYPE_CHECKING:
    from setterkit.interfaces.services.capabilities import ICapabilityInvocationAdapter

from .capability_manager import CapabilityManager
from .invoker import DynamicInvoker, resolve_indirection

logger = logging.getLogger(__name__)


class CapabilityInvocationAdapter:
    """
    Reports capability failures as results instead of exceptions.

    Registered capabilities take precedence; any other name is looked up on
    the target's type.
    """

    def __init__(self, manager: Optional[CapabilityManager] = None, strict: Optional[bool] = None):
        self.manager = manager if manager is not None else CapabilityManager()
        self.strict = strict

    def execute(self, target: Any, name: str) -> "CapabilityInvocationResult":
        """
        Invoke capability `name` on target.
        """
        target_type = type(target).__name__
        try:
            resolved = resolve_indirection(target, name)
            target_type = type(resolved).__name__
            if name in self.manager:
                value = self.manager.execute(name, resolved)
            else:
                value = DynamicInvoker(resolved, strict=self.strict).invoke(name)
        except CapabilityNotFound as e:
            return self._failure(name, e.target_type or target_type, "CapabilityNotFound", str(e))
        except InvocationError as e:
            return self._failure(name, e.target_type or target_type, "InvocationError", str(e))

        return CapabilityInvocationResult(
            ok=True,
            value=value,
            error=None,
            error_kind=None,
            capability_name=name,
            target_type=target_type,
        )

    def _failure(self, name: str, target_type: str, kind: str, message: str) -> CapabilityInvocationResult:
        logger.debug("Capability %r on %s failed (%s): %s", name, target_type, kind, message)
        return CapabilityInvocationResult(
            ok=False,
            value=None,
            error=message,
            error_kind=kind,  # type: ignore[arg-type]
            capability_name=name,
            target_type=target_type,
        )
