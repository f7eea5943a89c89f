# SPDX-License-Identifier: MIT
"""Plain record projections of versions.

Records are the structural form used for comparison and serialization. Any
mapping carrying the record keys, or any object carrying the same attributes,
is accepted wherever a "version-like" value is expected.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypedDict, Union

from .errors import InvalidValueError

RELEASE_FIELDS = ("major", "minor", "patch")


class ReleaseRecord(TypedDict):
    """Record form of a release version."""

    major: int
    minor: int
    patch: int


class PrereleaseRecord(ReleaseRecord):
    """Record form of a prerelease version."""

    channel: str
    iteration: int


# str | record mapping | object with record attributes
VersionLike = Union[str, Mapping[str, Any], Any]


def get_field(value: Any, name: str, default: Any = None) -> Any:
    """Read ``name`` from a mapping key or an object attribute."""
    if isinstance(value, Mapping):
        return value.get(name, default)
    return getattr(value, name, default)


def check_component(name: str, value: Any) -> int:
    """Validate a numeric version component.

    Raises:
        InvalidValueError: If the value is not a non-negative integer
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidValueError(
            value, f"Version component {name} must be an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise InvalidValueError(value, "Negative values are not permitted in version numbers.")
    return value
