"""Fluent API (DSL) for member assertions.

Entry point for fluent member queries and assertions.

Example:
    properties(Order).that_are_public_or_internal().should().be_decorated_with(Audited)
    MemberCheck(Order).methods().should().be_overridable("{0} is mocked in tests", "Order")
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from membercheck.application.services.evaluator import Expectation, evaluate, verify
from membercheck.domain.model.configuration import SelectionConfig
from membercheck.domain.model.enums import MemberKind, Visibility
from membercheck.domain.model.visibility_filter import VisibilityFilter
from membercheck.domain.predicates.member_predicates import (
    has_name_matching,
    has_visibility,
    is_decorated_with,
    is_of_type,
    is_overridable,
)
from membercheck.infrastructure.introspection.base import resolve_type
from membercheck.infrastructure.introspection.reflection import (
    MethodIntrospector,
    PropertyIntrospector,
)
from membercheck.presentation.api._helpers import execute_query, negate

if TYPE_CHECKING:
    from collections.abc import Iterator

    from membercheck.domain.model.assertion_result import AssertionResult
    from membercheck.domain.model.marker import Marker
    from membercheck.domain.model.member import MemberDescriptor
    from membercheck.domain.ports.introspector import TypeIntrospector
    from membercheck.domain.predicates.base import MemberPredicate


class MemberCheck:
    """Entry point for member analysis of one class.

    Provides fluent API for selecting and asserting class members.

    Attributes:
        _type: Class under test
        _config: Selection configuration
    """

    def __init__(self, cls: type, config: SelectionConfig | None = None) -> None:
        """Initialize member checker.

        Args:
            cls: Class whose members are selected
            config: Selection configuration (defaults if None)

        Raises:
            UnresolvableTypeError: If cls is None or not a class
        """
        self._type = resolve_type(cls)
        self._config = config or SelectionConfig()

    def properties(self) -> PropertySelector:
        """Start property selection.

        Returns:
            PropertySelector for chaining filters
        """
        return PropertySelector.create(self._type, self._config)

    def methods(self) -> MethodSelector:
        """Start method selection.

        Returns:
            MethodSelector for chaining filters
        """
        return MethodSelector.create(self._type, self._config)

    @property
    def target(self) -> type:
        """Class under test."""
        return self._type


def properties(cls: type, config: SelectionConfig | None = None) -> PropertySelector:
    """Select properties of cls (PRIVATE excluded)."""
    return MemberCheck(cls, config).properties()


def methods(cls: type, config: SelectionConfig | None = None) -> MethodSelector:
    """Select methods of cls (PRIVATE and special methods excluded)."""
    return MemberCheck(cls, config).methods()


@dataclass(frozen=True, slots=True)
class MemberSelector:
    """Immutable selector over the members of one class.

    Every refinement returns a new selector; the receiver is unchanged.
    Members are enumerated afresh on each execute()/should().
    """

    _type: type
    _introspector: TypeIntrospector
    _visibility: VisibilityFilter = field(default_factory=VisibilityFilter.default)
    _filters: tuple[MemberPredicate, ...] = ()

    def _with_filter(self, predicate: MemberPredicate) -> MemberSelector:
        """Return new selector with additional filter.

        Args:
            predicate: Filter predicate

        Returns:
            New selector with added filter (immutable)
        """
        return replace(self, _filters=(*self._filters, predicate))

    def filtered_to(self, *visibilities: Visibility) -> MemberSelector:
        """Restrict selection to exactly the given visibilities.

        Replaces the current visibility filter; may re-admit PRIVATE.

        Args:
            *visibilities: Admitted visibilities (at least one required)

        Returns:
            New selector

        Raises:
            EmptyVisibilityFilterError: If no visibilities provided
        """
        return replace(self, _visibility=VisibilityFilter.of(*visibilities))

    def that_are_public_or_internal(self) -> MemberSelector:
        """Narrow selection to PUBLIC and INTERNAL members."""
        narrowed = self._visibility.narrow(VisibilityFilter.public_or_internal())
        return replace(self, _visibility=narrowed)

    def that_are_public(self) -> MemberSelector:
        """Narrow selection to PUBLIC members."""
        narrowed = self._visibility.narrow(VisibilityFilter.of(Visibility.PUBLIC))
        return replace(self, _visibility=narrowed)

    def that_are_decorated_with(self, marker: type[Marker]) -> MemberSelector:
        """Filter members carrying marker of given kind.

        Raises:
            InvalidMarkerError: If marker is not a Marker subclass
        """
        return self._with_filter(is_decorated_with(marker))

    def that_are_not_decorated_with(self, marker: type[Marker]) -> MemberSelector:
        """Filter members not carrying marker of given kind.

        Raises:
            InvalidMarkerError: If marker is not a Marker subclass
        """
        return self._with_filter(negate(is_decorated_with(marker)))

    def of_type(self, declared: object) -> MemberSelector:
        """Filter members whose value/return type is declared.

        Args:
            declared: Annotation (e.g. str) or display name (e.g. "str")
        """
        return self._with_filter(is_of_type(declared))

    def matching(self, regex: str) -> MemberSelector:
        """Filter members whose name matches regex.

        Raises:
            ValueError: If regex is invalid
        """
        return self._with_filter(has_name_matching(regex))

    def that(self, predicate: MemberPredicate) -> MemberSelector:
        """Filter by custom predicate.

        Args:
            predicate: Function returning True for matching members

        Returns:
            Filtered selector
        """
        return self._with_filter(predicate)

    def execute(self) -> tuple[MemberDescriptor, ...]:
        """Enumerate matching members in declaration order.

        Returns:
            Tuple of members passing visibility filter and all filters
        """
        members = self._introspector.members(self._type)
        return execute_query(members, (self._allows_visibility, *self._filters))

    def should(self) -> MemberAssertions:
        """Transition to assertion mode.

        Executes selection and returns assertion builder.

        Returns:
            MemberAssertions over selected members
        """
        return MemberAssertions(_members=self.execute(), _kind=self.kind)

    def _allows_visibility(self, member: MemberDescriptor) -> bool:
        return self._visibility.allows(member.visibility)

    @property
    def kind(self) -> MemberKind:
        """Kind of member this selector enumerates."""
        return self._introspector.kind

    @property
    def visibility(self) -> VisibilityFilter:
        """Current visibility filter."""
        return self._visibility

    @property
    def target(self) -> type:
        """Class whose members are selected."""
        return self._type

    def __iter__(self) -> Iterator[MemberDescriptor]:
        return iter(self.execute())

    def __len__(self) -> int:
        return len(self.execute())


@dataclass(frozen=True, slots=True)
class PropertySelector(MemberSelector):
    """Selector over properties."""

    @classmethod
    def create(cls, target: type, config: SelectionConfig | None = None) -> PropertySelector:
        """Create selector with default visibility filter (PRIVATE excluded).

        Raises:
            UnresolvableTypeError: If target is not a class
        """
        config = config or SelectionConfig()
        return cls(
            _type=resolve_type(target),
            _introspector=PropertyIntrospector.from_config(config),
        )


@dataclass(frozen=True, slots=True)
class MethodSelector(MemberSelector):
    """Selector over methods (special methods excluded)."""

    @classmethod
    def create(cls, target: type, config: SelectionConfig | None = None) -> MethodSelector:
        """Create selector with default visibility filter (PRIVATE excluded).

        Raises:
            UnresolvableTypeError: If target is not a class
        """
        config = config or SelectionConfig()
        return cls(
            _type=resolve_type(target),
            _introspector=MethodIntrospector.from_config(config),
        )


@dataclass(frozen=True, slots=True)
class MemberAssertions:
    """Immutable assertion builder over selected members.

    Each assertion evaluates immediately and reports every failing
    member at once. Returns self so assertions can be chained.
    """

    _members: tuple[MemberDescriptor, ...]
    _kind: MemberKind

    def be_overridable(self, because: str = "", *because_args: object) -> MemberAssertions:
        """Assert no selected member is @final.

        Args:
            because: Reason template with {0}-style placeholders
            *because_args: Placeholder values

        Returns:
            self, for chaining

        Raises:
            MemberAssertionError: If any member is not overridable
            ReasonFormatError: If reason template cannot be formatted
        """
        expectation = Expectation(
            predicate=is_overridable(),
            expected="to be overridable",
            actual="not overridable",
        )
        return self._verify(expectation, because, because_args)

    def not_be_overridable(self, because: str = "", *because_args: object) -> MemberAssertions:
        """Assert every selected member is @final.

        Raises:
            MemberAssertionError: If any member is overridable
            ReasonFormatError: If reason template cannot be formatted
        """
        expectation = Expectation(
            predicate=negate(is_overridable()),
            expected="not to be overridable",
            actual="overridable",
        )
        return self._verify(expectation, because, because_args)

    def be_decorated_with(
        self,
        marker: type[Marker],
        because: str = "",
        *because_args: object,
    ) -> MemberAssertions:
        """Assert every selected member carries marker.

        Args:
            marker: Marker subclass
            because: Reason template with {0}-style placeholders
            *because_args: Placeholder values

        Returns:
            self, for chaining

        Raises:
            InvalidMarkerError: If marker is not a Marker subclass
            MemberAssertionError: If any member lacks the marker
            ReasonFormatError: If reason template cannot be formatted
        """
        predicate = is_decorated_with(marker)
        expectation = Expectation(
            predicate=predicate,
            expected=f"to be decorated with {marker.qualified_name()}",
            actual="not",
        )
        return self._verify(expectation, because, because_args)

    def not_be_decorated_with(
        self,
        marker: type[Marker],
        because: str = "",
        *because_args: object,
    ) -> MemberAssertions:
        """Assert no selected member carries marker.

        Raises:
            InvalidMarkerError: If marker is not a Marker subclass
            MemberAssertionError: If any member carries the marker
            ReasonFormatError: If reason template cannot be formatted
        """
        predicate = negate(is_decorated_with(marker))
        name = marker.qualified_name()
        expectation = Expectation(
            predicate=predicate,
            expected=f"not to be decorated with {name}",
            actual=f"decorated with {name}",
        )
        return self._verify(expectation, because, because_args)

    def be_public(self, because: str = "", *because_args: object) -> MemberAssertions:
        """Assert every selected member is PUBLIC.

        Raises:
            MemberAssertionError: If any member is not PUBLIC
            ReasonFormatError: If reason template cannot be formatted
        """
        expectation = Expectation(
            predicate=has_visibility(Visibility.PUBLIC),
            expected="to be public",
            actual="not public",
        )
        return self._verify(expectation, because, because_args)

    def satisfy(
        self,
        predicate: MemberPredicate,
        expected: str,
        actual: str,
        because: str = "",
        *because_args: object,
    ) -> MemberAssertions:
        """Assert custom predicate with custom message wording.

        Args:
            predicate: Check every member must pass
            expected: Verb phrase, e.g. "to be documented"
            actual: Phrase for failing members, e.g. "not documented"
            because: Reason template with {0}-style placeholders
            *because_args: Placeholder values

        Raises:
            MemberAssertionError: If any member fails predicate
            ReasonFormatError: If reason template cannot be formatted
        """
        expectation = Expectation(predicate=predicate, expected=expected, actual=actual)
        return self._verify(expectation, because, because_args)

    def collect(self, predicate: MemberPredicate) -> AssertionResult:
        """Evaluate predicate without raising.

        Returns:
            Result with every failing member, selector order preserved
        """
        return evaluate(self._members, predicate)

    def _verify(
        self,
        expectation: Expectation,
        because: str,
        because_args: tuple[object, ...],
    ) -> MemberAssertions:
        verify(self._members, self._kind, expectation, because, *because_args)
        return self

    @property
    def member_count(self) -> int:
        """Number of members being checked."""
        return len(self._members)

    @property
    def members(self) -> tuple[MemberDescriptor, ...]:
        """Members being checked, in selector order."""
        return self._members
