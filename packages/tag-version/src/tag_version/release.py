# SPDX-License-Identifier: MIT
"""Release versions in MAJOR.MINOR.PATCH form.

Accepted strings carry an optional leading ``v`` (as used in tag names):
- 1.2.3
- v1.2.3
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Optional

from .compare import ComparableVersion
from .errors import InvalidFormatError
from .levels import ChangeLevel
from .records import RELEASE_FIELDS, ReleaseRecord, VersionLike, check_component, get_field

RELEASE_PATTERN = re.compile(r"^v?(?P<major>[0-9]+)\.(?P<minor>[0-9]+)\.(?P<patch>[0-9]+)$")


@dataclass(slots=True)
class ReleaseVersion(ComparableVersion):
    """A mutable release version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
    """

    SORT_FIELDS: ClassVar[tuple[str, ...]] = RELEASE_FIELDS

    major: int = 0
    minor: int = 0
    patch: int = 0

    def __post_init__(self) -> None:
        for name in RELEASE_FIELDS:
            check_component(name, getattr(self, name))

    def __str__(self) -> str:
        return self.version_string

    @classmethod
    def parse(cls, version_string: str) -> ReleaseRecord:
        """Parse a release version string into a record.

        Args:
            version_string: A string in ``[v]MAJOR.MINOR.PATCH`` form

        Returns:
            The parsed record

        Raises:
            InvalidFormatError: If the string is not exactly a release version

        Examples:
            >>> ReleaseVersion.parse("v1.2.3")
            {'major': 1, 'minor': 2, 'patch': 3}
        """
        if not isinstance(version_string, str):
            raise InvalidFormatError(
                version_string,
                f"Version must be a string, got {type(version_string).__name__}",
            )
        match = RELEASE_PATTERN.fullmatch(version_string)
        if not match:
            raise InvalidFormatError(version_string)
        try:
            return ReleaseRecord(
                major=int(match.group("major")),
                minor=int(match.group("minor")),
                patch=int(match.group("patch")),
            )
        except ValueError as e:
            # int() refuses digit runs past sys.get_int_max_str_digits()
            raise InvalidFormatError(version_string, f"Version component too long: {e}") from e

    @classmethod
    def matches_pattern(cls, version_string: str) -> bool:
        """Return True if ``version_string`` parses as a release version."""
        try:
            cls.parse(version_string)
        except InvalidFormatError:
            return False
        return True

    @classmethod
    def from_string(cls, version_string: str) -> ReleaseVersion:
        return cls(**cls.parse(version_string))

    @classmethod
    def from_input(cls, value: Optional[VersionLike] = None) -> ReleaseVersion:
        """Build a release version from a string, a record or another version.

        Missing record fields default to 0 and ``None`` gives ``0.0.0``. A
        version object has its triple copied, so the result never aliases it.

        Raises:
            InvalidFormatError: If a string value does not parse
            InvalidValueError: If a component is negative
        """
        if value is None:
            return cls()
        if isinstance(value, str):
            return cls.from_string(value)
        return cls(**{name: get_field(value, name, 0) for name in RELEASE_FIELDS})

    def to_record(self) -> ReleaseRecord:
        return ReleaseRecord(major=self.major, minor=self.minor, patch=self.patch)

    @property
    def version_string(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def tag_name(self) -> str:
        return f"v{self.version_string}"

    def bump(self, change_level: Optional[ChangeLevel]) -> ReleaseVersion:
        """Bump this version in place by ``change_level`` and return it.

        Anything other than a ``ChangeLevel`` leaves the version unchanged.
        """
        if change_level is ChangeLevel.MAJOR:
            self.major += 1
            self.minor = 0
            self.patch = 0
        elif change_level is ChangeLevel.MINOR:
            self.minor += 1
            self.patch = 0
        elif change_level is ChangeLevel.PATCH:
            self.patch += 1
        return self
