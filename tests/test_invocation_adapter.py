"""
Tests for the result-returning invocation adapter.
"""

import gc
import weakref

from setterkit.domain.entities.ref import Ref
from setterkit.infrastructure.capabilities.capability_manager import CapabilityManager
from setterkit.infrastructure.capabilities.invocation_adapter import CapabilityInvocationAdapter
from targets import Shadowed, Validated


def test_success_result(validated):
    result = CapabilityInvocationAdapter().execute(validated, "Valid")
    assert result.ok is True
    assert result.value is True
    assert result.error is None and result.error_kind is None
    assert result.capability_name == "Valid"
    assert result.target_type == "Validated"


def test_not_found_is_reported_not_raised(validated):
    result = CapabilityInvocationAdapter().execute(validated, "Missing")
    assert result.ok is False
    assert result.value is None
    assert result.error_kind == "CapabilityNotFound"
    assert "Missing" in result.error


def test_invocation_error_is_reported_not_raised(validated):
    result = CapabilityInvocationAdapter().execute(validated, "NeedsArg")
    assert result.ok is False
    assert result.error_kind == "InvocationError"
    assert result.target_type == "Validated"


def test_adapter_strict_flag(validated):
    lenient = CapabilityInvocationAdapter(strict=False).execute(validated, "Count")
    strict = CapabilityInvocationAdapter(strict=True).execute(validated, "Count")
    assert lenient.ok and lenient.value is True
    assert not strict.ok and strict.error_kind == "InvocationError"


def test_target_type_is_reported_after_dereferencing(validated):
    result = CapabilityInvocationAdapter().execute(Ref(validated), "Valid")
    assert result.ok
    assert result.target_type == "Validated"


def test_dead_weakref_reports_invocation_error():
    target = Validated()
    ref = weakref.ref(target)
    del target
    gc.collect()

    result = CapabilityInvocationAdapter().execute(ref, "Valid")
    assert result.ok is False
    assert result.error_kind == "InvocationError"


def test_registered_capabilities_take_precedence(validated):
    manager = CapabilityManager()
    manager.register_function("Valid", lambda t: False)

    result = CapabilityInvocationAdapter(manager).execute(validated, "Valid")
    assert result.ok and result.value is False


def test_result_to_dict(validated):
    data = CapabilityInvocationAdapter().execute(validated, "Missing").to_dict()
    assert data["ok"] is False
    assert data["error_kind"] == "CapabilityNotFound"
    assert set(data) == {"ok", "value", "error", "error_kind", "capability_name", "target_type"}


def test_shadowed_method_is_invoked_not_raised():
    result = CapabilityInvocationAdapter().execute(Shadowed(), "Valid")
    assert result.ok is True
    assert result.value is True
    assert result.target_type == "Shadowed"


def test_removed_method_is_reported_as_not_found():
    class Patched:
        def Valid(self) -> bool:
            return True

    adapter = CapabilityInvocationAdapter()
    assert adapter.execute(Patched(), "Valid").ok
    del Patched.Valid

    result = adapter.execute(Patched(), "Valid")
    assert result.ok is False
    assert result.error_kind == "CapabilityNotFound"
