"""Classes used as selection targets in tests.

Member declaration order inside each class is significant:
tests assert that failures are listed in exactly this order.
"""

from typing import final

from membercheck.domain.model.marker import Marker
from membercheck.presentation.api.visibility import internal


class DummyPropertyMarker(Marker):
    """Marker checked for presence in decoration tests."""


class OtherMarker(Marker):
    """Marker never expected by tests."""


class ClassWithAllPropertiesOverridable:
    @property
    def public_overridable_property(self) -> str:
        return ""

    @internal
    @property
    def internal_overridable_property(self) -> str:
        return ""

    @property
    def _protected_overridable_property(self) -> str:
        return ""


class ClassWithNonOverridableProperties:
    @property
    @final
    def public_non_overridable_property(self) -> str:
        return ""

    @internal
    @property
    @final
    def internal_non_overridable_property(self) -> str:
        return ""

    @property
    @final
    def _protected_non_overridable_property(self) -> str:
        return ""

    @property
    @final
    def __private_non_overridable_property(self) -> str:
        return ""


class ClassWithAllPropertiesDecoratedWithDummyMarker:
    @DummyPropertyMarker()
    @property
    def public_property(self) -> str:
        return ""

    @DummyPropertyMarker()
    @internal
    @property
    def internal_property(self) -> str:
        return ""

    @DummyPropertyMarker()
    @property
    def _protected_property(self) -> str:
        return ""


class ClassWithPropertiesNotDecoratedWithDummyMarker:
    @property
    def public_property(self) -> str:
        return ""

    @internal
    @property
    def internal_property(self) -> str:
        return ""

    @property
    def _protected_property(self) -> str:
        return ""


class ClassWithoutProperties:
    value = 1

    def compute(self) -> int:
        return self.value


class ClassWithOnlyPrivateProperties:
    @property
    @final
    def __secret(self) -> str:
        return ""


class ClassWithUnsortedProperties:
    @property
    @final
    def zulu(self) -> int:
        return 0

    @property
    @final
    def alpha(self) -> int:
        return 0

    @property
    @final
    def mike(self) -> int:
        return 0


@final
class FinalClassWithProperties:
    @property
    def sealed_by_class(self) -> str:
        return ""


class BaseEntity:
    @property
    def identifier(self) -> int:
        return 0

    @property
    @final
    def created_at(self) -> float:
        return 0.0


class DerivedEntity(BaseEntity):
    @property
    def name(self) -> str:
        return ""

    @property
    def identifier(self) -> int:
        return 1


class ClassWithMethods:
    def public_method(self) -> str:
        return ""

    @final
    def sealed_method(self) -> int:
        return 0

    @DummyPropertyMarker()
    def _protected_method(self) -> None:
        return None

    @staticmethod
    @final
    def static_method() -> bool:
        return True

    @classmethod
    def class_method(cls) -> "ClassWithMethods":
        return cls()

    def __private_method(self) -> None:
        return None

    def __repr__(self) -> str:
        return "ClassWithMethods()"

    @property
    def not_a_method(self) -> str:
        return ""


class ClassWithUnannotatedProperty:
    @property
    def untyped(self):  # noqa: ANN201
        return None

    @property
    def optional(self) -> int | None:
        return None

    @property
    def listing(self) -> list[int]:
        return []
