# SPDX-License-Identifier: MIT
"""Change levels used to bump versions."""

from __future__ import annotations

from enum import IntEnum

from .errors import InvalidValueError


class ChangeLevel(IntEnum):
    """Magnitude of a change, totally ordered: PATCH < MINOR < MAJOR."""

    PATCH = 1
    MINOR = 2
    MAJOR = 3

    @classmethod
    def parse(cls, name: str | ChangeLevel) -> ChangeLevel:
        """Return the level named by ``name`` (case-insensitive).

        Raises:
            InvalidValueError: If ``name`` is not a known level
        """
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            try:
                return cls[name.strip().upper()]
            except KeyError:
                pass
        raise InvalidValueError(name, f"Unknown change level: {name!r}")
