"""pytest fixtures for member assertions.

User overrides member_config in their conftest.py.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from membercheck.domain.model.configuration import SelectionConfig
from membercheck.presentation.api.dsl import MemberCheck


@pytest.fixture(scope="session")
def member_config(request: pytest.FixtureRequest) -> SelectionConfig:
    """Selection configuration from ini options.

    Reads membercheck_include_inherited from pytest.ini / pyproject.toml.

    Returns:
        SelectionConfig
    """
    include_inherited = request.config.getini("membercheck_include_inherited")
    return SelectionConfig(include_inherited=bool(include_inherited))


@pytest.fixture
def member_check(member_config: SelectionConfig) -> Callable[[type], MemberCheck]:
    """Factory for MemberCheck bound to member_config.

    Usage:
        def test_entities(member_check):
            member_check(Order).properties().should().be_overridable()

    Returns:
        Callable taking a class and returning MemberCheck
    """

    def factory(cls: type) -> MemberCheck:
        return MemberCheck(cls, member_config)

    return factory
