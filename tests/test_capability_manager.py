import pytest

from setterkit.abstractions.dto.capabilities import CapabilityDescriptor
from setterkit.domain.entities.ref import Ref
from setterkit.exceptions import CapabilityNotFound, InvocationError
from setterkit.infrastructure.capabilities.capability_base import Capability, FunctionCapability, MethodCapability
from setterkit.infrastructure.capabilities.capability_manager import CapabilityManager
from targets import Validated


class DummyCapability(Capability):
    def __init__(self):
        self.last_target = None

    @property
    def name(self) -> str:
        return "dummy"

    @property
    def description(self) -> str:
        return "Dummy capability"

    def run(self, target) -> bool:
        self.last_target = target
        return True


def test_capability_base_interface():
    """Capability ABC exposes the registry contract."""
    assert hasattr(Capability, "name")
    assert hasattr(Capability, "description")
    assert hasattr(Capability, "run")
    assert hasattr(Capability, "get_definition")
    with pytest.raises(TypeError):
        Capability()


def test_register_and_execute_capability(validated):
    manager = CapabilityManager()
    capability = DummyCapability()
    manager.register_capability(capability)

    assert "dummy" in manager
    assert manager.get_capability("dummy") is capability
    assert manager.execute("dummy", validated) is True
    assert capability.last_target is validated


def test_get_unknown_capability_raises():
    manager = CapabilityManager()
    with pytest.raises(CapabilityNotFound) as exc_info:
        manager.get_capability("missing")
    assert exc_info.value.name == "missing"


def test_register_function_uses_docstring_as_description(validated):
    def is_ok(target):
        """True when the target is ok."""
        return target.ok

    manager = CapabilityManager()
    manager.register_function("is_ok", is_ok)

    assert manager.execute("is_ok", validated) is True
    assert manager.execute("is_ok", Validated(ok=False)) is False
    assert manager.list_capabilities() == [
        CapabilityDescriptor(name="is_ok", description="True when the target is ok.", source="registered")
    ]


def test_function_capability_resolves_indirection(validated):
    capability = FunctionCapability("same", lambda t: t is validated)
    assert capability.run(Ref(validated)) is True


def test_function_capability_rejects_non_bool(validated, strict_config):
    capability = FunctionCapability("count", lambda t: 1)
    with pytest.raises(InvocationError):
        capability.run(validated)


def test_method_capability_delegates_to_target(validated):
    capability = MethodCapability("Valid")
    assert capability.run(validated) is True
    assert capability.get_definition()["source"] == "method"
    assert "Valid" in capability.description


def test_later_registration_replaces_earlier(validated):
    manager = CapabilityManager()
    manager.register_function("check", lambda t: True)
    manager.register_function("check", lambda t: False)
    assert len(manager) == 1
    assert manager.execute("check", validated) is False


def test_for_type_registers_zero_argument_methods(validated):
    manager = CapabilityManager.for_type(Validated)
    names = [d.name for d in manager.list_capabilities()]

    assert "Valid" in names and "Check" in names
    assert "NeedsArg" not in names
    assert manager.execute("Valid", validated) is True
    with pytest.raises(CapabilityNotFound):
        manager.execute("NeedsArg", validated)
