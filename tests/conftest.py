# pytest configuration

from typing import Any, NamedTuple

from pytest import fixture


class FakeInfo(NamedTuple):
    """Stand-in for the resolve info passed to directive handlers."""

    field_name: str = "field"
    context: Any = None


@fixture
def info():
    return FakeInfo(context={"version": "1.0"})
