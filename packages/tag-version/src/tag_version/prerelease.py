# SPDX-License-Identifier: MIT
"""Prerelease versions in MAJOR.MINOR.PATCH-channel.ITERATION form.

A prerelease sits on a release core and adds a named channel (``alpha``,
``beta``, ``next``...) with an iteration counter. The highest change level
applied so far decides whether a later bump advances the core or only the
iteration:

    >>> version = PrereleaseVersion.from_base(ReleaseVersion(1, 2, 3), "beta", ChangeLevel.MINOR)
    >>> version.version_string
    '1.3.0-beta.0'
    >>> version.bump(ChangeLevel.PATCH).version_string
    '1.3.0-beta.1'
    >>> version.bump(ChangeLevel.MAJOR).version_string
    '2.0.0-beta.0'

Ordering ignores the channel: ``1.0.0-alpha.1`` and ``1.0.0-beta.1`` compare
as equal, while ``==`` still tells them apart.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from typing import Any, ClassVar, Optional

from .compare import ComparableVersion
from .errors import InvalidFormatError, InvalidValueError
from .levels import ChangeLevel
from .records import (
    RELEASE_FIELDS,
    PrereleaseRecord,
    VersionLike,
    check_component,
    get_field,
)
from .release import ReleaseVersion

logger = logging.getLogger(__name__)

PRERELEASE_PATTERN = re.compile(
    r"^v?(?P<major>[0-9]+)"
    r"\.(?P<minor>[0-9]+)"
    r"\.(?P<patch>[0-9]+)"
    r"-(?P<channel>[A-Za-z]+)"
    r"\.(?P<iteration>[0-9]+)$"
)

# Number of leading release fields a change-level filter must match
_FILTER_WIDTH = {
    ChangeLevel.MAJOR: 1,
    ChangeLevel.MINOR: 2,
    ChangeLevel.PATCH: 3,
}


def _check_channel(channel: Any) -> str:
    if not isinstance(channel, str) or not channel:
        raise InvalidValueError(channel, "Prerelease channel must be a non-empty string")
    return channel


class PrereleaseVersion(ComparableVersion):
    """A mutable prerelease version.

    Attributes:
        channel: Name of the prerelease channel
        iteration: Zero-based build counter within the channel
        highest_change_level: Highest change level applied so far, or None
    """

    __slots__ = ("_core", "channel", "iteration", "highest_change_level")

    SORT_FIELDS: ClassVar[tuple[str, ...]] = RELEASE_FIELDS + ("iteration",)

    def __init__(
        self,
        channel: str,
        major: int = 0,
        minor: int = 0,
        patch: int = 0,
        iteration: int = 0,
        change_level: Optional[ChangeLevel] = None,
    ):
        self._core = ReleaseVersion(major, minor, patch)
        self.channel = _check_channel(channel)
        self.iteration = check_component("iteration", iteration)
        self.highest_change_level = (
            None if change_level is None else ChangeLevel.parse(change_level)
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(channel={self.channel!r}, major={self.major}, "
            f"minor={self.minor}, patch={self.patch}, iteration={self.iteration})"
        )

    def __str__(self) -> str:
        return self.version_string

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrereleaseVersion):
            return NotImplemented
        return self.to_record() == other.to_record()

    __hash__ = None  # type: ignore[assignment]

    @property
    def major(self) -> int:
        return self._core.major

    @property
    def minor(self) -> int:
        return self._core.minor

    @property
    def patch(self) -> int:
        return self._core.patch

    @property
    def core(self) -> ReleaseVersion:
        """A copy of the release triple this prerelease is built on."""
        return ReleaseVersion.from_input(self._core)

    # -------------------------------------------------------------------------
    # Parsing and construction
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, version_string: str) -> PrereleaseRecord:
        """Parse a prerelease version string into a record.

        Args:
            version_string: A string in ``[v]MAJOR.MINOR.PATCH-channel.ITERATION`` form

        Returns:
            The parsed record

        Raises:
            InvalidFormatError: If the string is not exactly a prerelease version

        Examples:
            >>> PrereleaseVersion.parse("v1.0.10-beta.1")
            {'major': 1, 'minor': 0, 'patch': 10, 'channel': 'beta', 'iteration': 1}
        """
        if not isinstance(version_string, str):
            raise InvalidFormatError(
                version_string,
                f"Version must be a string, got {type(version_string).__name__}",
            )
        match = PRERELEASE_PATTERN.fullmatch(version_string)
        if not match:
            raise InvalidFormatError(version_string)
        try:
            return PrereleaseRecord(
                major=int(match.group("major")),
                minor=int(match.group("minor")),
                patch=int(match.group("patch")),
                channel=match.group("channel"),
                iteration=int(match.group("iteration")),
            )
        except ValueError as e:
            # int() refuses digit runs past sys.get_int_max_str_digits()
            raise InvalidFormatError(version_string, f"Version component too long: {e}") from e

    @classmethod
    def matches_pattern(cls, version_string: str, channel: Optional[str] = None) -> bool:
        """Return True if the string is a prerelease version, in ``channel`` if given."""
        try:
            record = cls.parse(version_string)
        except InvalidFormatError:
            return False
        return not channel or record["channel"] == channel

    @classmethod
    def pattern_filter(cls, channel: Optional[str] = None) -> Callable[[str], bool]:
        """Return a predicate selecting prerelease strings, in ``channel`` if given.

        Examples:
            >>> tags = ["0.0.0", "0.1.1-alpha.0", "1.2.3-beta.20", "0.0.0-beta"]
            >>> list(filter(PrereleaseVersion.pattern_filter("beta"), tags))
            ['1.2.3-beta.20']
        """

        def matches(version_string: str) -> bool:
            return cls.matches_pattern(version_string, channel)

        return matches

    @classmethod
    def from_string(cls, version_string: str) -> PrereleaseVersion:
        return cls(**cls.parse(version_string))

    @classmethod
    def from_base(
        cls,
        base: VersionLike,
        channel: str,
        change_level: Optional[ChangeLevel] = None,
    ) -> PrereleaseVersion:
        """Derive a prerelease that is ahead of ``base``.

        A release base is always advanced, by ``change_level`` or by a patch
        when no level is given. A prerelease base is already ahead of its
        release, so it only advances when ``change_level`` exceeds the level
        it has already applied. The iteration restarts at 0 either way.

        Raises:
            InvalidValueError: If ``channel`` is empty
        """
        if isinstance(base, str) and cls.matches_pattern(base):
            base = cls.from_string(base)
        if isinstance(base, PrereleaseVersion):
            version = cls(channel, base.major, base.minor, base.patch)
            version.highest_change_level = base.highest_change_level
            if change_level is not None:
                version.bump(change_level)
            version.iteration = 0
            return version

        level = ChangeLevel.PATCH if change_level is None else ChangeLevel.parse(change_level)
        release = ReleaseVersion.from_input(base).bump(level)
        return cls(channel, release.major, release.minor, release.patch, change_level=level)

    @classmethod
    def from_input(
        cls,
        value: VersionLike,
        channel: Optional[str] = None,
        change_level: Optional[ChangeLevel] = None,
    ) -> PrereleaseVersion:
        """Build a prerelease from a string, a record, or a base version.

        - A string is parsed; ``channel`` and ``change_level`` are ignored.
        - A version object is treated as a base (see ``from_base``).
        - Any other value is read as a record; ``channel`` and
          ``change_level`` fill in keys the record does not carry.
        """
        if isinstance(value, str):
            return cls.from_string(value)
        if isinstance(value, (ReleaseVersion, PrereleaseVersion)):
            return cls.from_base(value, channel, change_level)
        return cls(
            channel=get_field(value, "channel", channel),
            major=get_field(value, "major", 0),
            minor=get_field(value, "minor", 0),
            patch=get_field(value, "patch", 0),
            iteration=get_field(value, "iteration", 0),
            change_level=get_field(value, "change_level", change_level),
        )

    # -------------------------------------------------------------------------
    # Representations
    # -------------------------------------------------------------------------

    def to_record(self) -> PrereleaseRecord:
        return PrereleaseRecord(
            major=self.major,
            minor=self.minor,
            patch=self.patch,
            channel=self.channel,
            iteration=self.iteration,
        )

    @property
    def version_string(self) -> str:
        return f"{self._core.version_string}-{self.channel}.{self.iteration}"

    @property
    def tag_name(self) -> str:
        return f"v{self.version_string}"

    # -------------------------------------------------------------------------
    # Bumping
    # -------------------------------------------------------------------------

    def bump(self, change_level: Optional[ChangeLevel] = None) -> PrereleaseVersion:
        """Advance this prerelease in place and return it.

        A level above every level applied so far bumps the core and restarts
        the iteration at 0. Anything else, including no level, only
        increments the iteration.

        Raises:
            InvalidValueError: If ``change_level`` is not a change level
        """
        level = None if change_level is None else ChangeLevel.parse(change_level)
        highest = self.highest_change_level
        if level is None or (highest is not None and level <= highest):
            self.iteration += 1
            logger.debug("Bumped %s iteration", self.version_string)
            return self

        self._core.bump(level)
        self.iteration = 0
        self.highest_change_level = level
        logger.debug("Bumped %s core by %s", self.version_string, level.name.lower())
        return self

    # -------------------------------------------------------------------------
    # Filtering a pool of versions
    # -------------------------------------------------------------------------

    @classmethod
    def _record_or_none(cls, value: VersionLike) -> Optional[Any]:
        if not isinstance(value, str):
            return value
        try:
            return cls.parse(value)
        except InvalidFormatError:
            return None

    @classmethod
    def change_level_filter(
        cls,
        target: VersionLike,
        change_level: ChangeLevel,
        channel: Optional[str] = None,
    ) -> Callable[[VersionLike], bool]:
        """Return a predicate matching versions near ``target``.

        MAJOR matches the major number, MINOR the major and minor numbers,
        PATCH the whole release triple. When ``channel`` is non-empty the
        channel must match as well. Strings that do not parse never match.
        """
        width = _FILTER_WIDTH[ChangeLevel.parse(change_level)]
        target_key = ReleaseVersion.sort_key(target)[:width]
        fields = RELEASE_FIELDS[:width]

        def matches(value: VersionLike) -> bool:
            record = cls._record_or_none(value)
            if record is None:
                return False
            if tuple(get_field(record, name, 0) for name in fields) != target_key:
                return False
            return not channel or get_field(record, "channel") == channel

        return matches

    @classmethod
    def version_filter(
        cls, target: VersionLike, channel: Optional[str] = None
    ) -> Callable[[VersionLike], bool]:
        """Return a predicate matching versions with the same release triple as ``target``."""
        return cls.change_level_filter(target, ChangeLevel.PATCH, channel)

    @classmethod
    def compute_next_iteration(
        cls,
        core: VersionLike,
        channel: Optional[str],
        existing: Iterable[str] = (),
    ) -> int:
        """Return the next free iteration for ``core`` in ``channel``.

        Args:
            core: Release triple the prerelease is built on
            channel: Prerelease channel
            existing: Version strings already in use; entries that are not
                prerelease versions are skipped

        Returns:
            0 if no existing prerelease shares the triple and channel,
            otherwise one more than the highest such iteration

        Examples:
            >>> pool = ["1.0.0-beta.1", "1.0.0-beta.2", "2.0.0-beta.5"]
            >>> PrereleaseVersion.compute_next_iteration(ReleaseVersion(1), "beta", pool)
            3
        """
        matches = cls.version_filter(core, channel)
        iterations = []
        for version_string in existing:
            try:
                record = cls.parse(version_string)
            except InvalidFormatError:
                logger.debug("Skipping %r: not a prerelease version", version_string)
                continue
            if matches(record):
                iterations.append(record["iteration"])
        return max(iterations) + 1 if iterations else 0

    @classmethod
    def next_from_pool(
        cls,
        base: VersionLike,
        channel: str,
        existing: Iterable[str] = (),
        change_level: Optional[ChangeLevel] = None,
    ) -> PrereleaseVersion:
        """Derive a prerelease from ``base`` that is not already in ``existing``.

        The core comes from ``from_base``; the iteration is the next free one
        for that core and channel.
        """
        version = cls.from_base(base, channel, change_level)
        version.iteration = cls.compute_next_iteration(version.core, version.channel, existing)
        logger.debug("Next prerelease after %s is %s", base, version.version_string)
        return version
