# SPDX-License-Identifier: MIT
"""Ordering shared by release and prerelease versions.

Versions are ordered lexicographically over their numeric sort fields.
Strings, record mappings and version objects can be mixed freely: each is
normalized to a sort key, while the original value is what gets returned.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, ClassVar, TypeVar

from .records import VersionLike, check_component, get_field

T = TypeVar("T")


class ComparableVersion:
    """Class-level comparison helpers keyed on ``SORT_FIELDS``."""

    __slots__ = ()

    SORT_FIELDS: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def parse(cls, version_string: str) -> Mapping[str, Any]:
        """Parse a version string into a record; subclasses supply the pattern."""
        raise NotImplementedError

    @classmethod
    def sort_key(cls, value: VersionLike) -> tuple[int, ...]:
        """Return the tuple of sort fields for a version-like value.

        Missing fields count as 0. Strings are parsed first.

        Raises:
            InvalidFormatError: If a string value does not parse
            InvalidValueError: If a field is not a non-negative integer
        """
        record = cls.parse(value) if isinstance(value, str) else value
        return tuple(
            check_component(name, get_field(record, name, 0)) for name in cls.SORT_FIELDS
        )

    @classmethod
    def compare(cls, a: VersionLike, b: VersionLike) -> int:
        """Compare two version-like values.

        Returns:
            -1 if a < b
            0 if a == b
            1 if a > b

        Examples:
            >>> ReleaseVersion.compare("1.0.0", "2.0.0")
            -1
            >>> ReleaseVersion.compare({"major": 1}, "v1.0.0")
            0
        """
        key_a = cls.sort_key(a)
        key_b = cls.sort_key(b)
        if key_a == key_b:
            return 0
        return -1 if key_a < key_b else 1

    @classmethod
    def max_of(cls, inputs: Iterable[T]) -> T:
        """Return the input with the highest version.

        When several inputs share the highest version, the first of them wins.

        Raises:
            ValueError: If ``inputs`` is empty
        """
        best: Any = None
        best_key: tuple[int, ...] | None = None
        for value in inputs:
            key = cls.sort_key(value)
            if best_key is None or key > best_key:
                best, best_key = value, key
        if best_key is None:
            raise ValueError("max_of() arg is an empty sequence")
        return best

    @classmethod
    def sort_versions(cls, inputs: Iterable[T], *, reverse: bool = False) -> list[T]:
        """Sort version-like inputs in ascending order (descending if ``reverse``).

        The sort is stable: inputs with equal keys keep their relative order
        in both directions.
        """
        return sorted(inputs, key=cls.sort_key, reverse=reverse)
