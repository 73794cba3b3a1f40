# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class ErrorCategory(str, Enum):
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    OPTION_APPLICATION_FAILURE = "OPTION_APPLICATION_FAILURE"
    CONFIGURATION_INCOMPLETE = "CONFIGURATION_INCOMPLETE"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


class ConfigurationError(Exception):
    """Base class for every error raised while building a configured value."""

    category: ErrorCategory = ErrorCategory.UNKNOWN_ERROR

    @property
    def summary(self) -> str:
        """User-facing reason for the category followed by the detail message."""
        return f"{error_category_to_reason(self.category)}: {self}"


class InvalidArgument(ConfigurationError, ValueError):
    """The required identifier (or another builder argument) is missing or malformed."""

    category = ErrorCategory.INVALID_ARGUMENT


class OptionApplicationFailure(ConfigurationError):
    """
    An option rejected the target state it was applied to.

    `option` names the failing option and `index` is its position in the
    sequence passed to the builder (None when raised directly by an option).
    """

    category = ErrorCategory.OPTION_APPLICATION_FAILURE

    def __init__(self, option: str, reason: str, *, index: int | None = None):
        self.option = option
        self.reason = reason
        self.index = index
        super().__init__(self._format())

    def _format(self) -> str:
        where = f" (position {self.index})" if self.index is not None else ""
        return f"option {self.option!r}{where} failed: {self.reason}"

    def at(self, index: int) -> OptionApplicationFailure:
        """Return a copy positioned at `index`."""
        return OptionApplicationFailure(self.option, self.reason, index=index)


class ConfigurationIncomplete(ConfigurationError):
    """Attributes that must be set in this context were never set by any option."""

    category = ErrorCategory.CONFIGURATION_INCOMPLETE

    def __init__(self, missing: Iterable[str], *, target: str = "target"):
        self.missing = tuple(missing)
        self.target = target
        super().__init__(f"{target} is missing required attributes: {', '.join(self.missing)}")


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map an exception to ErrorCategory.
    """
    if isinstance(exc, ConfigurationError):
        return exc.category
    return ErrorCategory.UNKNOWN_ERROR


def error_category_to_reason(category: ErrorCategory | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.INVALID_ARGUMENT: "Required identifier is missing or malformed",
        ErrorCategory.OPTION_APPLICATION_FAILURE: "An option rejected the configuration",
        ErrorCategory.CONFIGURATION_INCOMPLETE: "Configuration is missing required attributes",
        ErrorCategory.UNKNOWN_ERROR: "Unexpected error while building configuration",
        ErrorCategory.NONE: "",
        None: "",
    }
    return mapping.get(category, "Configuration failed")


__all__ = [
    "ConfigurationError",
    "ConfigurationIncomplete",
    "ErrorCategory",
    "InvalidArgument",
    "OptionApplicationFailure",
    "categorize_exception",
    "error_category_to_reason",
]
