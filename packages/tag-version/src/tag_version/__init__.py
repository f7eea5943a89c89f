# SPDX-License-Identifier: MIT
"""Release and prerelease versions for tag-based release automation.

This package parses, orders and bumps ``MAJOR.MINOR.PATCH`` release versions
and ``MAJOR.MINOR.PATCH-channel.ITERATION`` prerelease versions, and picks the
next prerelease iteration from a pool of existing tags.

Example:
    >>> from tag_version import ChangeLevel, PrereleaseVersion, ReleaseVersion
    >>>
    >>> ReleaseVersion(major=1).bump(ChangeLevel.MINOR).version_string
    '1.1.0'
    >>>
    >>> pool = ["1.0.1-beta.0", "1.0.1-beta.1", "v1.0.0"]
    >>> PrereleaseVersion.next_from_pool("v1.0.0", "beta", pool).tag_name
    'v1.0.1-beta.2'
"""

__version__ = "0.1.0"

from .config import (
    PrereleaseConfig,
    PrereleaseConfigError,
)
from .errors import (
    VersionError,
    InvalidFormatError,
    InvalidValueError,
)
from .levels import ChangeLevel
from .prerelease import (
    PrereleaseVersion,
    PRERELEASE_PATTERN,
)
from .records import (
    ReleaseRecord,
    PrereleaseRecord,
)
from .release import (
    ReleaseVersion,
    RELEASE_PATTERN,
)

__all__ = [
    # Versions
    "ReleaseVersion",
    "PrereleaseVersion",
    "ChangeLevel",
    "RELEASE_PATTERN",
    "PRERELEASE_PATTERN",
    # Records
    "ReleaseRecord",
    "PrereleaseRecord",
    # Errors
    "VersionError",
    "InvalidFormatError",
    "InvalidValueError",
    # Configuration
    "PrereleaseConfig",
    "PrereleaseConfigError",
]
