# SPDX-License-Identifier: MIT
"""Exceptions raised while parsing or building versions."""

from __future__ import annotations

from typing import Any


class VersionError(Exception):
    """Base class for version errors."""

    def __init__(self, value: Any, message: str = ""):
        self.value = value
        self.message = message or f"Invalid version: {value!r}"
        super().__init__(self.message)


class InvalidFormatError(VersionError):
    """Raised when a version string does not match the required pattern."""

    def __init__(self, value: Any, message: str = ""):
        super().__init__(value, message or f"Invalid version string: {value!r}")


class InvalidValueError(VersionError):
    """Raised when a version component is negative or a channel is empty."""
