"""
Capability targets shared by the invoker tests.
"""


class Validated:
    """Target exposing a variety of capability shapes."""

    def __init__(self, ok: bool = True):
        self.ok = ok
        self.instance_only = lambda: True

    def Valid(self) -> bool:
        return True

    def Check(self) -> bool:
        return self.ok

    def Lenient(self, strict: bool = False) -> bool:
        return not strict

    def NeedsArg(self, value) -> bool:
        return bool(value)

    def Count(self) -> int:
        return 1

    def Explode(self) -> bool:
        raise RuntimeError("boom")

    @staticmethod
    def Static() -> bool:
        return True

    @classmethod
    def Klass(cls) -> bool:
        return cls is Validated

    @property
    def Prop(self) -> bool:
        return True

    label = "not callable"


class Child(Validated):
    def Extra(self) -> bool:
        return False


class Shadowed:
    """Instance attribute hides the method of the same name."""

    def __init__(self):
        self.Valid = "not a method"

    def Valid(self) -> bool:
        return True
