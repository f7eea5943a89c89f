# SPDX-License-Identifier: MIT
"""Prerelease configuration read from ``pyproject.toml``.

Example ``pyproject.toml`` section::

    [tool.tag-version.prerelease]
    channel = "beta"
    change-level = "minor"
"""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .errors import VersionError
from .levels import ChangeLevel
from .prerelease import PrereleaseVersion
from .records import VersionLike

DEFAULT_CHANNEL = "next"


class PrereleaseConfigError(Exception):
    """Raised when prerelease configuration is invalid."""

    pass


@dataclass
class PrereleaseConfig:
    """Settings used to pick the next prerelease tag.

    Attributes:
        channel: Prerelease channel to publish to
        change_level: Declared magnitude of the pending change, if known
    """

    channel: str = DEFAULT_CHANNEL
    change_level: Optional[ChangeLevel] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        # Tags only parse back with an ASCII alphabetic channel
        channel = self.channel
        if not (isinstance(channel, str) and channel.isascii() and channel.isalpha()):
            raise PrereleaseConfigError(
                f"Invalid channel: {self.channel!r}. Must contain only ASCII letters."
            )
        if self.change_level is not None:
            try:
                self.change_level = ChangeLevel.parse(self.change_level)
            except VersionError as e:
                raise PrereleaseConfigError(e.message) from e

    def next_version(
        self, base: VersionLike, existing: Iterable[str] = ()
    ) -> PrereleaseVersion:
        """Return the next prerelease after ``base`` that is not in ``existing``."""
        return PrereleaseVersion.next_from_pool(
            base, self.channel, existing, change_level=self.change_level
        )

    @classmethod
    def from_pyproject(cls, pyproject_path: str | Path) -> "PrereleaseConfig":
        """Create PrereleaseConfig from a pyproject.toml file.

        Raises:
            PrereleaseConfigError: If the file is not valid TOML or the
                section is invalid
            FileNotFoundError: If the file does not exist
        """
        path = Path(pyproject_path)
        if not path.exists():
            raise FileNotFoundError(f"pyproject.toml not found: {path}")

        try:
            with open(path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise PrereleaseConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject)

    @classmethod
    def from_pyproject_dict(cls, pyproject: dict[str, Any]) -> "PrereleaseConfig":
        """Create PrereleaseConfig from a parsed pyproject.toml dictionary.

        A missing ``[tool.tag-version.prerelease]`` section gives the defaults.

        Raises:
            PrereleaseConfigError: If the section is not a table or holds
                invalid values
        """
        section: Any = pyproject
        path: list[str] = []
        for table in ("tool", "tag-version", "prerelease"):
            path.append(table)
            section = section.get(table, {})
            if not isinstance(section, dict):
                raise PrereleaseConfigError(f"[{'.'.join(path)}] must be a table")

        return cls(
            channel=section.get("channel", DEFAULT_CHANNEL),
            change_level=section.get("change-level"),
        )
